"""
API layer for Smart Interview Coach

Contains FastAPI routers for:
- Practice sessions and answer submission
- Audio transcription
- Report generation
- Role and question metadata
"""

from interview_coach.api.router import api_router

__all__ = ["api_router"]
