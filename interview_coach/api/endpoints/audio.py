"""
Audio API endpoints

Handles:
- Speech-to-text transcription
"""

from fastapi import APIRouter, Depends, File, UploadFile
from pydantic import BaseModel

from interview_coach.api.dependencies import (
    get_credential,
    get_transcription_client,
    to_http_exception,
)
from interview_coach.core.exceptions import CoachError
from interview_coach.core.transcription_client import VoiceTranscriptionClient

router = APIRouter()


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class STTResponse(BaseModel):
    """Response with transcribed text."""
    transcript: str


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post("/transcribe", response_model=STTResponse)
async def speech_to_text(
    audio: UploadFile = File(...),
    language: str | None = None,
    credential: str = Depends(get_credential),
    client: VoiceTranscriptionClient = Depends(get_transcription_client),
) -> STTResponse:
    """
    Transcribe audio to text.

    Accepts audio file upload.
    """
    try:
        audio_data = await audio.read()
        transcript = await client.transcribe(
            audio_data,
            credential,
            language=language,
            content_type=audio.content_type or "audio/webm",
        )
        return STTResponse(transcript=transcript)
    except CoachError as e:
        raise to_http_exception(e)
