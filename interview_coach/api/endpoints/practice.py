"""
Practice API endpoints

Handles practice session lifecycle:
- Creating sessions for a role
- Submitting typed and recorded answers
- Resetting and ending sessions
"""

from fastapi import APIRouter, Depends, File, UploadFile
from pydantic import BaseModel

from interview_coach.api.dependencies import get_credential, get_manager, to_http_exception
from interview_coach.core.exceptions import CoachError
from interview_coach.core.practice_session import PracticeSessionManager
from interview_coach.models.feedback import AnswerFeedback, VoiceAnswerResult
from interview_coach.models.question import Question

router = APIRouter()


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class CreateSessionRequest(BaseModel):
    """Request model for starting a practice session."""
    role_id: str


class SessionResponse(BaseModel):
    """A practice session and its current progress."""
    session_id: str
    role_id: str
    role_title: str
    questions: list[Question]
    answered_questions: int
    feedback: dict[str, AnswerFeedback]


class TextAnswerRequest(BaseModel):
    """Request model for a typed answer."""
    answer: str


class TranscriptRequest(BaseModel):
    """Request model for an answer transcribed on the client."""
    transcript: str


def _session_response(manager: PracticeSessionManager, session_id: str) -> SessionResponse:
    session = manager.require_session(session_id)
    return SessionResponse(
        session_id=session.session_id,
        role_id=session.role.id,
        role_title=session.role.title,
        questions=session.questions,
        answered_questions=session.answered_count,
        feedback=session.feedback,
    )


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post("/sessions", response_model=SessionResponse)
async def create_session(
    request: CreateSessionRequest,
    manager: PracticeSessionManager = Depends(get_manager),
) -> SessionResponse:
    """
    Create a new practice session.

    Loads the role's questions with an empty feedback store.
    """
    try:
        session = manager.create_session(request.role_id)
        return _session_response(manager, session.session_id)
    except CoachError as e:
        raise to_http_exception(e)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    manager: PracticeSessionManager = Depends(get_manager),
) -> SessionResponse:
    """Get a session with all stored feedback."""
    try:
        return _session_response(manager, session_id)
    except CoachError as e:
        raise to_http_exception(e)


@router.post("/sessions/{session_id}/answers/{question_id}", response_model=AnswerFeedback)
async def submit_text_answer(
    session_id: str,
    question_id: str,
    request: TextAnswerRequest,
    manager: PracticeSessionManager = Depends(get_manager),
) -> AnswerFeedback:
    """
    Submit a typed answer.

    The answer is scored and replaces any earlier feedback for the question.
    """
    try:
        return await manager.submit_text_answer(session_id, question_id, request.answer)
    except CoachError as e:
        raise to_http_exception(e)


@router.post("/sessions/{session_id}/voice/{question_id}", response_model=VoiceAnswerResult)
async def submit_voice_answer(
    session_id: str,
    question_id: str,
    audio: UploadFile = File(...),
    credential: str = Depends(get_credential),
    manager: PracticeSessionManager = Depends(get_manager),
) -> VoiceAnswerResult:
    """
    Submit a recorded answer.

    The audio is transcribed, evaluated by the completion service and stored.
    """
    try:
        audio_data = await audio.read()
        return await manager.submit_voice_answer(
            session_id,
            question_id,
            audio_data,
            credential,
            content_type=audio.content_type or "audio/webm",
        )
    except CoachError as e:
        raise to_http_exception(e)


@router.post("/sessions/{session_id}/transcripts/{question_id}", response_model=VoiceAnswerResult)
async def submit_transcript(
    session_id: str,
    question_id: str,
    request: TranscriptRequest,
    credential: str = Depends(get_credential),
    manager: PracticeSessionManager = Depends(get_manager),
) -> VoiceAnswerResult:
    """Submit an answer that was already transcribed."""
    try:
        return await manager.submit_transcript(
            session_id, question_id, request.transcript, credential
        )
    except CoachError as e:
        raise to_http_exception(e)


@router.post("/sessions/{session_id}/reset", response_model=SessionResponse)
async def reset_session(
    session_id: str,
    manager: PracticeSessionManager = Depends(get_manager),
) -> SessionResponse:
    """Clear all stored feedback and start over with the same questions."""
    try:
        manager.reset_session(session_id)
        return _session_response(manager, session_id)
    except CoachError as e:
        raise to_http_exception(e)


@router.delete("/sessions/{session_id}")
async def end_session(
    session_id: str,
    manager: PracticeSessionManager = Depends(get_manager),
) -> dict[str, str]:
    """End a session and discard its feedback."""
    try:
        manager.end_session(session_id)
    except CoachError as e:
        raise to_http_exception(e)
    return {"status": "ended", "session_id": session_id}
