"""
Feedback Report Aggregator for Smart Interview Coach

Compiles a readiness report from the stored per-question feedback:
- Average and overall score
- Readiness score (quality plus volume, capped at 100)
- Strong and weak areas
- Improvement tips and follow-up questions
"""

import logging
from collections.abc import Iterable

from interview_coach.core.scoring import clamp, round_half_up
from interview_coach.models.feedback import AnswerFeedback
from interview_coach.models.report import PerformanceReport

logger = logging.getLogger(__name__)

# Fixed lists; the report does not personalize these
IMPROVEMENT_TIPS = [
    "Practice explaining complex concepts in simple terms",
    "Prepare specific examples for each type of question",
    "Record yourself answering questions to improve delivery",
]

FOLLOW_UP_QUESTIONS = [
    "Can you provide a specific example of how you've applied this skill?",
    "How would you handle a situation where this approach doesn't work?",
    "What would you do differently if you encountered this challenge again?",
]

POINTS_PER_SCORE = 10
POINTS_PER_ANSWER = 5


def readiness_score(average_score: int, answered: int) -> int:
    """Readiness on a 0-100 scale from average score and answer count."""
    return int(clamp(average_score * POINTS_PER_SCORE + answered * POINTS_PER_ANSWER, 0, 100))


def _unique(items: Iterable[str]) -> list[str]:
    """Deduplicate, keeping first-seen order."""
    return list(dict.fromkeys(items))


class FeedbackReportAggregator:
    """
    Stateless report builder.

    Holds no feedback of its own; callers pass the current records on
    every request.
    """

    def aggregate(self, feedback_list: Iterable[AnswerFeedback]) -> PerformanceReport:
        """
        Build a PerformanceReport.

        Args:
            feedback_list: All currently stored AnswerFeedback records

        Returns:
            PerformanceReport (all zeros and empty areas for no input)
        """
        feedbacks = list(feedback_list)

        if not feedbacks:
            return PerformanceReport(
                overall_score=0,
                average_score=0,
                readiness_score=0,
                answered_questions=0,
                strong_areas=[],
                weak_areas=[],
                improvement_tips=list(IMPROVEMENT_TIPS),
                follow_up_questions=list(FOLLOW_UP_QUESTIONS),
            )

        average = round_half_up(sum(f.score for f in feedbacks) / len(feedbacks))

        report = PerformanceReport(
            overall_score=average,
            average_score=average,
            readiness_score=readiness_score(average, len(feedbacks)),
            answered_questions=len(feedbacks),
            strong_areas=_unique(s for f in feedbacks for s in f.strengths),
            weak_areas=_unique(i for f in feedbacks for i in f.improvements),
            improvement_tips=list(IMPROVEMENT_TIPS),
            follow_up_questions=list(FOLLOW_UP_QUESTIONS),
        )

        logger.info(
            f"Report compiled: answered={report.answered_questions}, "
            f"average={report.average_score}, readiness={report.readiness_score}"
        )
        return report
