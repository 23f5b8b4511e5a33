"""
Core business logic modules for Smart Interview Coach

Contains:
- Text Answer Evaluator: Heuristic scoring of typed answers
- Voice Transcription Client: Speech-to-text integration
- Voice Response Evaluator: Model-backed scoring of spoken answers
- Voice Feedback Adapter: Voice results in the shared feedback shape
- Feedback Report Aggregator: Readiness report compilation
- Practice Session Manager: Per-question feedback store
"""

from interview_coach.core.text_evaluator import TextAnswerEvaluator
from interview_coach.core.transcription_client import VoiceTranscriptionClient
from interview_coach.core.voice_evaluator import OfflineVoiceEvaluator, VoiceResponseEvaluator
from interview_coach.core.voice_adapter import VoiceFeedbackAdapter
from interview_coach.core.report_aggregator import FeedbackReportAggregator
from interview_coach.core.practice_session import PracticeSessionManager

__all__ = [
    "TextAnswerEvaluator",
    "VoiceTranscriptionClient",
    "VoiceResponseEvaluator",
    "OfflineVoiceEvaluator",
    "VoiceFeedbackAdapter",
    "FeedbackReportAggregator",
    "PracticeSessionManager",
]
