"""
Report API endpoints

Handles:
- Readiness report for a practice session
- Ad-hoc aggregation of feedback records
"""

from fastapi import APIRouter, Depends, HTTPException

from interview_coach.api.dependencies import (
    get_manager,
    get_report_aggregator,
    to_http_exception,
)
from interview_coach.config.settings import get_settings
from interview_coach.core.exceptions import CoachError
from interview_coach.core.practice_session import PracticeSessionManager
from interview_coach.core.report_aggregator import FeedbackReportAggregator
from interview_coach.models.feedback import AnswerFeedback
from interview_coach.models.report import PerformanceReport

router = APIRouter()


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.get("/{session_id}", response_model=PerformanceReport)
async def get_report(
    session_id: str,
    manager: PracticeSessionManager = Depends(get_manager),
) -> PerformanceReport:
    """
    Get the readiness report for a session.

    Recomputed from the stored feedback on every request.
    """
    try:
        session = manager.require_session(session_id)
    except CoachError as e:
        raise to_http_exception(e)

    required = get_settings().min_answers_for_report
    if session.answered_count < required:
        raise HTTPException(
            status_code=400,
            detail=f"Answer at least {required} questions to generate a report "
                   f"({session.answered_count} answered)"
        )

    return manager.generate_report(session_id)


@router.post("/aggregate", response_model=PerformanceReport)
async def aggregate_feedback(
    feedback: list[AnswerFeedback],
    aggregator: FeedbackReportAggregator = Depends(get_report_aggregator),
) -> PerformanceReport:
    """Build a report from feedback records supplied by the caller."""
    return aggregator.aggregate(feedback)
