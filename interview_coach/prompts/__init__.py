"""
AI prompt templates for Smart Interview Coach

Contains structured prompts for:
- Voice answer evaluation
"""

from interview_coach.prompts.evaluator import VoiceEvaluatorPrompts

__all__ = [
    "VoiceEvaluatorPrompts",
]
