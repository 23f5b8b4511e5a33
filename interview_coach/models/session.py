"""
Practice session models for Smart Interview Coach
"""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field

from interview_coach.models.feedback import AnswerFeedback
from interview_coach.models.question import Question, Role


class PracticeSession(BaseModel):
    """One practice run for a role. Kept in memory only."""

    # Identification
    session_id: str = Field(default_factory=lambda: str(uuid4()))

    # Setup
    role: Role
    questions: list[Question] = Field(default_factory=list)

    # Timing
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Latest feedback per question ID; a new evaluation replaces the old one
    feedback: dict[str, AnswerFeedback] = Field(default_factory=dict)

    def get_question(self, question_id: str) -> Question | None:
        """Find a question of this session by ID."""
        for question in self.questions:
            if question.id == question_id:
                return question
        return None

    @property
    def answered_count(self) -> int:
        return len(self.feedback)
