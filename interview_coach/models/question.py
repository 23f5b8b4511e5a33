"""
Question and role models for Smart Interview Coach
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class QuestionDifficulty(str, Enum):
    """Question difficulty levels."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class Role(BaseModel):
    """A target role the candidate can practice for."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique role ID")
    title: str
    description: str
    icon: str = ""


class Question(BaseModel):
    """A single catalog question. Immutable."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique question ID")
    text: str = Field(..., description="The question text")
    sample_answer: str = Field(..., description="Reference answer shown after evaluation")
    category: str = Field(..., description="Question category")
    difficulty: QuestionDifficulty = Field(..., description="Difficulty level")
