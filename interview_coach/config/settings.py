"""
Application settings and configuration management.

Uses pydantic-settings for environment variable loading.
"""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Smart Interview Coach"
    app_version: str = "0.1.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # Default credential for the transcription and completion services.
    # Requests may carry their own key instead.
    openai_api_key: str = ""

    # Transcription service (speech-to-text)
    transcription_url: str = "https://api.openai.com/v1/audio/transcriptions"
    transcription_model: str = "whisper-1"
    transcription_language: str = "en"
    audio_filename: str = "audio.webm"

    # Completion service (voice answer evaluation)
    completion_url: str = "https://api.openai.com/v1/chat/completions"
    completion_model: str = "gpt-4"
    completion_temperature: float = 0.3
    completion_max_tokens: int = 1000

    # None means no timeout; callers bound latency themselves
    http_timeout_seconds: float | None = None

    # Offline stand-in for the completion service
    use_offline_voice_evaluator: bool = False
    offline_evaluator_seed: int | None = None
    offline_evaluator_delay_seconds: float = 0.0

    # Practice sessions
    min_answers_for_report: int = 2

    # Langfuse tracing
    langfuse_enabled: bool = False
    langfuse_public_key: str = ""
    langfuse_secret_key: str = ""
    langfuse_base_url: str = "https://cloud.langfuse.com"

    # CORS - stored as comma-separated string in env
    # Uses validation_alias to read from CORS_ORIGINS env var
    cors_origins_str: str = Field(
        default="http://localhost:3000,http://localhost:8000",
        validation_alias="cors_origins"
    )

    @computed_field
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
