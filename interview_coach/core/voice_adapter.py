"""
Voice Feedback Adapter for Smart Interview Coach

Maps a VoiceEvaluationResult onto the AnswerFeedback shape used by the
text path so both paths land in the same feedback store.
"""

import math

from interview_coach.core.scoring import clamp, round_half_up
from interview_coach.models.feedback import AnswerFeedback, VoiceEvaluationResult

STRENGTH_THRESHOLD = 7
MAX_IMPROVEMENTS = 3


class VoiceFeedbackAdapter:
    """
    Field mapping:
    - score, clarity, confidence: carried over
    - knowledge: floor of the mean of score and fluency
    - grammar: fluency
    - sentiment: lower-case voice value re-cased to the text enumeration
    - strengths: derived from clarity, confidence and fluency
    - improvements: first three suggestions
    """

    def adapt(self, result: VoiceEvaluationResult) -> AnswerFeedback:
        strengths = [
            label
            for label, value in (
                ("Clear communication", result.clarity),
                ("Confident delivery", result.confidence),
                ("Smooth speech flow", result.fluency),
            )
            if value >= STRENGTH_THRESHOLD
        ]

        return AnswerFeedback(
            score=_to_score(result.score),
            clarity=_to_score(result.clarity),
            knowledge=math.floor((result.score + result.fluency) / 2),
            grammar=_to_score(result.fluency),
            confidence=_to_score(result.confidence),
            sentiment=result.sentiment.to_sentiment(),
            feedback=result.feedback,
            suggestions=list(result.suggestions),
            strengths=strengths,
            improvements=list(result.suggestions[:MAX_IMPROVEMENTS]),
        )


def _to_score(value: float) -> int:
    """Round a 0-10 voice score to the integer scale of AnswerFeedback."""
    return int(clamp(round_half_up(value), 0, 10))
