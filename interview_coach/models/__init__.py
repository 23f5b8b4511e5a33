"""
Data models and schemas for Smart Interview Coach

Contains Pydantic models for:
- Roles and questions
- Answer feedback (text and voice paths)
- Performance reports
"""

from interview_coach.models.question import Question, QuestionDifficulty, Role
from interview_coach.models.feedback import (
    AnswerFeedback,
    Sentiment,
    VoiceAnswerResult,
    VoiceEvaluationResult,
    VoiceSentiment,
)
from interview_coach.models.report import PerformanceReport

__all__ = [
    # Question
    "Question",
    "QuestionDifficulty",
    "Role",
    # Feedback
    "AnswerFeedback",
    "Sentiment",
    "VoiceAnswerResult",
    "VoiceEvaluationResult",
    "VoiceSentiment",
    # Report
    "PerformanceReport",
]
