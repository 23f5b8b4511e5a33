"""
Practice Session Manager - owner of the per-question feedback store.

Coordinates the evaluation components for each submitted answer and keeps
the resulting feedback keyed by question ID. The evaluators and the report
aggregator hold no state; everything they need is passed in per call.
"""

import logging
from typing import Any

from interview_coach.core.exceptions import NotFoundError
from interview_coach.core.report_aggregator import FeedbackReportAggregator
from interview_coach.core.text_evaluator import TextAnswerEvaluator
from interview_coach.core.voice_adapter import VoiceFeedbackAdapter
from interview_coach.models.catalog import get_questions_for_role, get_role
from interview_coach.models.feedback import AnswerFeedback, VoiceAnswerResult
from interview_coach.models.report import PerformanceReport
from interview_coach.models.session import PracticeSession

logger = logging.getLogger(__name__)


class PracticeSessionManager:
    """
    Manages practice sessions and their feedback stores.

    Flow:
        typed answer  → TextAnswerEvaluator ─────────────────────────────┐
        recorded audio → VoiceTranscriptionClient → VoiceResponseEvaluator → VoiceFeedbackAdapter
                                                                          ↓
                                                      session.feedback[question_id]
                                                                          ↓
                                                          FeedbackReportAggregator

    Concurrent submissions for the same question are last-write-wins:
    whichever evaluation finishes last is stored.
    """

    def __init__(
        self,
        text_evaluator: TextAnswerEvaluator | None = None,
        transcription_client: Any = None,  # VoiceTranscriptionClient
        voice_evaluator: Any = None,  # VoiceResponseEvaluator | OfflineVoiceEvaluator
        voice_adapter: VoiceFeedbackAdapter | None = None,
        report_aggregator: FeedbackReportAggregator | None = None,
    ):
        """
        Initialize the manager with component dependencies.

        Args:
            text_evaluator: Heuristic scorer for typed answers
            transcription_client: Speech-to-text client
            voice_evaluator: Evaluator for transcribed answers
            voice_adapter: Maps voice results onto AnswerFeedback
            report_aggregator: Builds the readiness report
        """
        self.text_evaluator = text_evaluator or TextAnswerEvaluator()
        self.transcription_client = transcription_client
        self.voice_evaluator = voice_evaluator
        self.voice_adapter = voice_adapter or VoiceFeedbackAdapter()
        self.report_aggregator = report_aggregator or FeedbackReportAggregator()

        # Session storage (in-memory only, sessions are not persisted)
        self._sessions: dict[str, PracticeSession] = {}

    # =========================================================================
    # SESSION MANAGEMENT
    # =========================================================================

    def create_session(self, role_id: str) -> PracticeSession:
        """
        Start a practice session for a role.

        Raises:
            NotFoundError: unknown role
        """
        role = get_role(role_id)
        if role is None:
            raise NotFoundError(f"Role not found: {role_id}")

        session = PracticeSession(role=role, questions=get_questions_for_role(role_id))
        self._sessions[session.session_id] = session

        logger.info(f"Created practice session {session.session_id} for role {role_id}")
        return session

    def get_session(self, session_id: str) -> PracticeSession | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def require_session(self, session_id: str) -> PracticeSession:
        session = self.get_session(session_id)
        if session is None:
            raise NotFoundError(f"Session not found: {session_id}")
        return session

    def reset_session(self, session_id: str) -> PracticeSession:
        """Drop all stored feedback for a session."""
        session = self.require_session(session_id)
        session.feedback.clear()
        logger.info(f"Cleared feedback for session {session_id}")
        return session

    def end_session(self, session_id: str) -> None:
        """Forget a session entirely."""
        self.require_session(session_id)
        del self._sessions[session_id]
        logger.info(f"Ended practice session {session_id}")

    def _require_question(self, session: PracticeSession, question_id: str):
        question = session.get_question(question_id)
        if question is None:
            raise NotFoundError(
                f"Question {question_id} is not part of session {session.session_id}"
            )
        return question

    # =========================================================================
    # ANSWER SUBMISSION
    # =========================================================================

    async def submit_text_answer(
        self,
        session_id: str,
        question_id: str,
        answer: str,
    ) -> AnswerFeedback:
        """
        Evaluate a typed answer and store the result.

        Raises:
            NotFoundError: unknown session or question
            ValidationError: empty answer
        """
        session = self.require_session(session_id)
        question = self._require_question(session, question_id)

        feedback = await self.text_evaluator.evaluate(
            question=question.text,
            answer=answer,
            sample_answer=question.sample_answer,
        )

        session.feedback[question_id] = feedback
        return feedback

    async def submit_voice_answer(
        self,
        session_id: str,
        question_id: str,
        audio_data: bytes,
        credential: str,
        content_type: str = "audio/webm",
    ) -> VoiceAnswerResult:
        """
        Transcribe a recorded answer, evaluate it and store the result.

        Raises:
            NotFoundError: unknown session or question
            ValidationError: missing credential, empty audio or no speech
            TransportError: transcription or completion call failed
        """
        session = self.require_session(session_id)
        self._require_question(session, question_id)

        transcript = await self.transcription_client.transcribe(
            audio_data,
            credential,
            content_type=content_type,
        )
        return await self.submit_transcript(session_id, question_id, transcript, credential)

    async def submit_transcript(
        self,
        session_id: str,
        question_id: str,
        transcript: str,
        credential: str,
    ) -> VoiceAnswerResult:
        """Evaluate an already transcribed voice answer and store the result."""
        session = self.require_session(session_id)
        question = self._require_question(session, question_id)

        evaluation = await self.voice_evaluator.evaluate(question.text, transcript, credential)
        feedback = self.voice_adapter.adapt(evaluation)

        session.feedback[question_id] = feedback
        return VoiceAnswerResult(
            question_id=question_id,
            transcript=transcript,
            evaluation=evaluation,
            feedback=feedback,
        )

    # =========================================================================
    # REPORTING
    # =========================================================================

    def generate_report(self, session_id: str) -> PerformanceReport:
        """Aggregate the session's current feedback into a report."""
        session = self.require_session(session_id)
        return self.report_aggregator.aggregate(session.feedback.values())

    async def close(self):
        """Close external clients."""
        if self.transcription_client:
            await self.transcription_client.close()
        if self.voice_evaluator:
            await self.voice_evaluator.close()
