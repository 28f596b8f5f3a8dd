"""API Contract Registry — single declarative map of operation -> request/response schemas.

Invariants:
    - Every endpoint declares method, path template, optional input schema and a
      closed {status: schema} map of responses
    - Server routes and PortfolioClient both read paths, methods and schemas from API
    - A status absent from an endpoint's responses is always an unexpected error
    - Path templates use {name} placeholders, substituted only through build_url()

Design Decisions:
    - Frozen dataclass entries: the registry is data, not behaviour
    - Explicit entries, no auto-discovery from routers
"""

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Mapping
from urllib.parse import quote

from pydantic import BaseModel, TypeAdapter

from app.schemas.errors import NotFoundBody, ValidationErrorBody
from app.schemas.message import InsertMessage, Message
from app.schemas.project import Project
from app.schemas.skill import Skill
from app.schemas.validate import validate_payload

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


@dataclass(frozen=True)
class Endpoint:
    """One logical API operation."""
    name: str
    method: str
    path: str
    responses: Mapping[int, Any] = field(default_factory=dict)
    input_schema: type[BaseModel] | None = None

    @property
    def success_status(self) -> int:
        return min(s for s in self.responses if 200 <= s < 300)

    @property
    def success_schema(self) -> Any:
        return self.responses[self.success_status]

    @property
    def path_params(self) -> list[str]:
        return _PLACEHOLDER.findall(self.path)

    def accepts(self, status_code: int) -> bool:
        """True if status_code is declared for this endpoint."""
        return status_code in self.responses

    def url(self, **params: object) -> str:
        return build_url(self.path, **params)

    def validate_input(self, payload: Any) -> BaseModel:
        """Validate a request payload against the declared input schema."""
        if self.input_schema is None:
            raise TypeError(f"Endpoint {self.name} declares no input schema")
        return validate_payload(self.input_schema, payload)

    def parse_response(self, status_code: int, body: Any) -> Any:
        """Validate a response body against the schema declared for status_code."""
        if not self.accepts(status_code):
            raise KeyError(
                f"Status {status_code} is not declared for {self.name}",
            )
        return _adapter(self.responses[status_code]).validate_python(body)

    def error_responses(self) -> dict[int, dict]:
        """Non-success responses in FastAPI's `responses=` format (OpenAPI docs)."""
        return {
            status: {"model": schema}
            for status, schema in self.responses.items()
            if status >= 300
        }


@lru_cache(maxsize=None)
def _adapter(schema: Any) -> TypeAdapter:
    return TypeAdapter(schema)


def build_url(path: str, **params: object) -> str:
    """Substitute {name} placeholders. Missing params raise; extras are ignored."""
    missing = [name for name in _PLACEHOLDER.findall(path) if name not in params]
    if missing:
        raise ValueError(f"Missing path parameter(s) for {path}: {', '.join(missing)}")
    return _PLACEHOLDER.sub(
        lambda m: quote(str(params[m.group(1)]), safe=""), path,
    )


# ─── Endpoints ───────────────────────────────────────────────────

LIST_PROJECTS = Endpoint(
    name="projects.list",
    method="GET",
    path="/api/projects",
    responses={200: list[Project]},
)

GET_PROJECT = Endpoint(
    name="projects.get",
    method="GET",
    path="/api/projects/{project_id}",
    responses={200: Project, 404: NotFoundBody},
)

LIST_SKILLS = Endpoint(
    name="skills.list",
    method="GET",
    path="/api/skills",
    responses={200: list[Skill]},
)

SUBMIT_CONTACT = Endpoint(
    name="contact.submit",
    method="POST",
    path="/api/contact",
    input_schema=InsertMessage,
    responses={200: Message, 400: ValidationErrorBody},
)

API: dict[str, Endpoint] = {
    e.name: e for e in (LIST_PROJECTS, GET_PROJECT, LIST_SKILLS, SUBMIT_CONTACT)
}
