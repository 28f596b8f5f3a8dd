"""Skill Routes — grouped list for the skills section."""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_storage
from app.core.contract import LIST_SKILLS
from app.core.repository_protocols import PortfolioStorage

router = APIRouter(tags=["skills"])


@router.api_route(
    LIST_SKILLS.path,
    methods=[LIST_SKILLS.method],
    status_code=LIST_SKILLS.success_status,
    response_model=LIST_SKILLS.success_schema,
    responses=LIST_SKILLS.error_responses(),
)
async def list_skills(storage: PortfolioStorage = Depends(get_storage)):
    """List skills ordered by (category, name)."""
    return await storage.list_skills()
