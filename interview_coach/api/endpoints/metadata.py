"""
Metadata API endpoints

Provides reference data for:
- Roles
- Questions per role
- Single question lookup
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from interview_coach.models.catalog import (
    ROLE_CATALOG,
    find_question,
    get_questions_for_role,
    get_role,
)
from interview_coach.models.question import Question

router = APIRouter()


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class RoleInfo(BaseModel):
    """Information about a role."""
    id: str
    title: str
    description: str
    icon: str
    question_count: int


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.get("/roles")
async def get_roles() -> list[RoleInfo]:
    """Get all available practice roles."""
    return [
        RoleInfo(
            id=role.id,
            title=role.title,
            description=role.description,
            icon=role.icon,
            question_count=len(get_questions_for_role(role.id)),
        )
        for role in ROLE_CATALOG.values()
    ]


@router.get("/roles/{role_id}/questions")
async def get_role_questions(role_id: str) -> list[Question]:
    """Get the ordered questions for a role."""
    if get_role(role_id) is None:
        raise HTTPException(status_code=404, detail=f"Role not found: {role_id}")
    return get_questions_for_role(role_id)


@router.get("/questions/{question_id}")
async def get_question(question_id: str) -> Question:
    """Get a single catalog question by ID."""
    question = find_question(question_id)
    if question is None:
        raise HTTPException(status_code=404, detail=f"Question not found: {question_id}")
    return question
