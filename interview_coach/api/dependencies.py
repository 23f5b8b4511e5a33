"""
API Dependencies

Provides dependency injection for API endpoints.
Manages singleton instances of core components.
"""

import random

from fastapi import Depends, Header, HTTPException

from interview_coach.config.settings import get_settings
from interview_coach.core.exceptions import (
    CoachError,
    NotFoundError,
    TransportError,
    ValidationError,
)
from interview_coach.core.practice_session import PracticeSessionManager
from interview_coach.core.report_aggregator import FeedbackReportAggregator
from interview_coach.core.transcription_client import VoiceTranscriptionClient
from interview_coach.core.voice_evaluator import OfflineVoiceEvaluator, VoiceResponseEvaluator


# ============================================================================
# SINGLETON INSTANCES
# ============================================================================

_manager: PracticeSessionManager | None = None


def get_manager() -> PracticeSessionManager:
    """
    Get the practice session manager singleton.

    Lazily initializes all required components.
    """
    global _manager

    if _manager is None:
        settings = get_settings()

        if settings.use_offline_voice_evaluator:
            voice_evaluator = OfflineVoiceEvaluator(
                rng=random.Random(settings.offline_evaluator_seed),
                delay_seconds=settings.offline_evaluator_delay_seconds,
            )
        else:
            voice_evaluator = VoiceResponseEvaluator(settings)

        _manager = PracticeSessionManager(
            transcription_client=VoiceTranscriptionClient(settings),
            voice_evaluator=voice_evaluator,
        )

    return _manager


def get_transcription_client(
    manager: PracticeSessionManager = Depends(get_manager),
) -> VoiceTranscriptionClient:
    """Get the transcription client shared with the session manager."""
    return manager.transcription_client


def get_report_aggregator(
    manager: PracticeSessionManager = Depends(get_manager),
) -> FeedbackReportAggregator:
    return manager.report_aggregator


def get_credential(x_api_key: str | None = Header(default=None)) -> str:
    """Credential from the X-API-Key header, else the configured key."""
    if x_api_key and x_api_key.strip():
        return x_api_key.strip()
    return get_settings().openai_api_key


def to_http_exception(error: CoachError) -> HTTPException:
    """Map core errors onto HTTP responses."""
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(error, ValidationError):
        return HTTPException(status_code=400, detail=str(error))
    if isinstance(error, TransportError):
        return HTTPException(status_code=502, detail=error.message)
    return HTTPException(status_code=500, detail=str(error))


async def cleanup():
    """Cleanup resources on shutdown."""
    global _manager

    if _manager:
        await _manager.close()

    _manager = None
