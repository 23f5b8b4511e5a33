"""
Voice Transcription Client for Smart Interview Coach

Sends recorded answers to the speech-to-text service and returns the
transcript. Failures are transport errors and are never retried.
"""

import logging

import httpx

from interview_coach.config.settings import Settings, get_settings
from interview_coach.core.exceptions import TransportError, ValidationError

logger = logging.getLogger(__name__)

SERVICE_NAME = "Transcription"


def upstream_error_message(response: httpx.Response) -> str:
    """Pull the human-readable message out of an error response."""
    try:
        data = response.json()
    except ValueError:
        return response.reason_phrase or f"HTTP {response.status_code}"

    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str) and error:
        return error
    return response.reason_phrase or f"HTTP {response.status_code}"


class VoiceTranscriptionClient:
    """
    Speech-to-text over HTTP.

    Request: multipart form with the audio file, model ID and language,
    authorized with a bearer credential.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize transcription client.

        Args:
            settings: Application settings (defaults to cached settings)
            client: HTTP client to use (one is created if omitted)
        """
        self.settings = settings or get_settings()
        self.client = client or httpx.AsyncClient(timeout=self.settings.http_timeout_seconds)

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def transcribe(
        self,
        audio_data: bytes,
        credential: str,
        language: str | None = None,
        content_type: str = "audio/webm",
    ) -> str:
        """
        Transcribe recorded audio.

        Args:
            audio_data: Raw audio bytes
            credential: Bearer credential for the service
            language: Language code (defaults to configured language)
            content_type: MIME type of the audio

        Returns:
            Transcript text (empty string if the service returned none)

        Raises:
            ValidationError: missing credential or empty audio
            TransportError: non-success status or network failure
        """
        if not credential or not credential.strip():
            raise ValidationError("An API key is required for voice transcription")
        if not audio_data:
            raise ValidationError("Audio recording is empty")

        files = {
            "file": (self.settings.audio_filename, audio_data, content_type),
        }
        data = {
            "model": self.settings.transcription_model,
            "language": language or self.settings.transcription_language,
        }

        try:
            response = await self.client.post(
                self.settings.transcription_url,
                headers={"Authorization": f"Bearer {credential}"},
                files=files,
                data=data,
            )
        except httpx.HTTPError as e:
            logger.error(f"Transcription API error: {e}")
            raise TransportError(SERVICE_NAME, str(e)) from e

        if not response.is_success:
            message = upstream_error_message(response)
            logger.error(f"Transcription API returned {response.status_code}: {message}")
            raise TransportError(SERVICE_NAME, message, status_code=response.status_code)

        try:
            result = response.json()
        except ValueError as e:
            raise TransportError(SERVICE_NAME, "Response body is not valid JSON",
                                 status_code=response.status_code) from e

        text = result.get("text") if isinstance(result, dict) else None
        transcript = (text or "").strip()
        logger.info(f"Transcribed {len(audio_data)} bytes of audio into {len(transcript.split())} words")
        return transcript
