"""Portfolio Client — async HTTP client built from the contract registry.

Invariants:
    - URLs, methods and response schemas come from core/contract.py, never literals
    - A status not declared for an endpoint raises PortfolioClientError
    - get_project() maps a declared 404 to None
    - send_message() validates locally before sending; a declared 400 raises
      ContactValidationError carrying every failing field
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from app.core.contract import (
    Endpoint, GET_PROJECT, LIST_PROJECTS, LIST_SKILLS, SUBMIT_CONTACT,
)
from app.core.errors import FieldError
from app.schemas.message import InsertMessage, Message
from app.schemas.project import Project
from app.schemas.skill import Skill

logger = logging.getLogger(__name__)


class PortfolioClientError(Exception):
    """Unexpected status, transport failure or malformed response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ContactValidationError(PortfolioClientError):
    """The server rejected a contact message (declared 400)."""

    def __init__(self, message: str, field: str | None, errors: list[FieldError]):
        super().__init__(message, 400)
        self.field = field
        self.errors = errors


class PortfolioClient:
    """Async client for the portfolio API."""

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> "PortfolioClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ─── Operations ─────────────────────────────────────────────

    async def list_projects(self) -> list[Project]:
        _, projects = await self._call(LIST_PROJECTS)
        return projects

    async def get_project(self, project_id: int) -> Project | None:
        status, body = await self._call(GET_PROJECT, params={"project_id": project_id})
        return body if status == 200 else None

    async def list_skills(self) -> list[Skill]:
        _, skills = await self._call(LIST_SKILLS)
        return skills

    async def send_message(self, data: InsertMessage | dict) -> Message:
        validated = SUBMIT_CONTACT.validate_input(data)
        status, body = await self._call(
            SUBMIT_CONTACT, json=validated.model_dump(mode="json", by_alias=True),
        )
        if status == 400:
            raise ContactValidationError(
                body.message, body.field,
                [FieldError(e.field, e.message) for e in body.errors],
            )
        return body

    # ─── Transport ──────────────────────────────────────────────

    async def _call(
        self,
        endpoint: Endpoint,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> tuple[int, Any]:
        """Issue the request and parse the body with the schema declared for its status."""
        url = endpoint.url(**(params or {}))
        try:
            resp = await self._client.request(endpoint.method, url, json=json)
        except httpx.HTTPError as e:
            logger.error(f"{endpoint.name} request failed: {e}")
            raise PortfolioClientError(f"{endpoint.name} request failed: {e}") from e

        if not endpoint.accepts(resp.status_code):
            raise PortfolioClientError(
                f"{endpoint.name} returned unexpected status {resp.status_code}",
                resp.status_code,
            )
        try:
            return resp.status_code, endpoint.parse_response(resp.status_code, resp.json())
        except (ValueError, PydanticValidationError) as e:
            raise PortfolioClientError(
                f"{endpoint.name} returned a malformed body: {e}", resp.status_code,
            ) from e
