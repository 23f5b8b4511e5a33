"""
API endpoint modules for Smart Interview Coach
"""

from interview_coach.api.endpoints import audio, metadata, practice, report

__all__ = ["audio", "metadata", "practice", "report"]
