"""
Feedback models for Smart Interview Coach

Defines the per-answer evaluation records produced by the text and
voice evaluation paths.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Sentiment(str, Enum):
    """Answer sentiment as reported on AnswerFeedback."""

    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


class VoiceSentiment(str, Enum):
    """Sentiment values accepted from the completion service (lower case)."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"

    def to_sentiment(self) -> Sentiment:
        """Re-case into the AnswerFeedback enumeration."""
        return Sentiment(self.value.capitalize())


class AnswerFeedback(BaseModel):
    """Evaluation of a single answer, shared by the text and voice paths."""

    score: int = Field(..., ge=0, le=10, description="Overall answer score")
    clarity: int = Field(..., ge=0, le=10)
    knowledge: int = Field(..., ge=0, le=10)
    grammar: int = Field(..., ge=0, le=10)
    confidence: int = Field(..., ge=0, le=10)

    sentiment: Sentiment = Sentiment.NEUTRAL

    feedback: str = ""
    suggestions: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)


class VoiceEvaluationResult(BaseModel):
    """Validated evaluation of a spoken answer. Transient."""

    score: float = Field(..., ge=0, le=10)
    clarity: float = Field(..., ge=0, le=10)
    fluency: float = Field(..., ge=0, le=10)
    confidence: float = Field(..., ge=0, le=10)

    sentiment: VoiceSentiment = VoiceSentiment.NEUTRAL

    feedback: str = ""
    suggestions: list[str] = Field(default_factory=list, max_length=5)


class VoiceAnswerResult(BaseModel):
    """What the voice path hands back to the caller."""

    question_id: str
    transcript: str
    evaluation: VoiceEvaluationResult
    feedback: AnswerFeedback
