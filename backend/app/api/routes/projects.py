"""Project Routes — list and detail reads.

Invariants:
    - GET /api/projects -> 200, newest first
    - GET /api/projects/{project_id} -> 200 or 404 {message}; malformed ids are 404, not 400
"""

import logging

from fastapi import APIRouter, Depends

from app.api.dependencies import get_storage
from app.core.contract import GET_PROJECT, LIST_PROJECTS
from app.core.domain_types import EntityKind
from app.core.errors import NotFoundError
from app.core.repository_protocols import PortfolioStorage

logger = logging.getLogger(__name__)
router = APIRouter(tags=["projects"])


@router.api_route(
    LIST_PROJECTS.path,
    methods=[LIST_PROJECTS.method],
    status_code=LIST_PROJECTS.success_status,
    response_model=LIST_PROJECTS.success_schema,
    responses=LIST_PROJECTS.error_responses(),
)
async def list_projects(storage: PortfolioStorage = Depends(get_storage)):
    """List all projects, most recently created first."""
    return await storage.list_projects()


@router.api_route(
    GET_PROJECT.path,
    methods=[GET_PROJECT.method],
    status_code=GET_PROJECT.success_status,
    response_model=GET_PROJECT.success_schema,
    responses=GET_PROJECT.error_responses(),
)
async def get_project(
    project_id: str, storage: PortfolioStorage = Depends(get_storage),
):
    """Get one project by id."""
    project = await storage.get_project(project_id)
    if project is None:
        raise NotFoundError(EntityKind.PROJECT.value, project_id)
    return project
