"""
Report models for Smart Interview Coach

Defines the readiness report compiled from per-question feedback.
"""

from pydantic import BaseModel, ConfigDict, Field


class PerformanceReport(BaseModel):
    """Readiness report. Derived on demand, never updated in place."""

    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(..., ge=0, le=10)
    average_score: int = Field(..., ge=0, le=10)
    readiness_score: int = Field(
        ..., ge=0, le=100,
        description="Blend of answer quality and number of answers"
    )
    answered_questions: int = Field(..., ge=0)

    strong_areas: list[str] = Field(default_factory=list)
    weak_areas: list[str] = Field(default_factory=list)

    # Fixed lists, not personalized
    improvement_tips: list[str] = Field(default_factory=list)
    follow_up_questions: list[str] = Field(default_factory=list)
