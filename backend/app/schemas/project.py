"""Project Schemas — case-study shape with an ordered tech stack.

Invariants:
    - tech_stack is always a list[str] on read, whatever the stored encoding
    - Empty optional URLs normalize to None
"""

from datetime import datetime

from pydantic import Field, field_validator

from app.core.tech_stack import decode_tech_stack
from app.schemas.base import InsertModel, WireModel


class InsertProject(InsertModel):
    """Project creation payload."""
    title: str = Field(min_length=1, max_length=255)
    short_description: str = Field(min_length=1)
    problem_statement: str = Field(min_length=1)
    methodology: str = Field(min_length=1)
    outcome: str = Field(min_length=1)
    tech_stack: list[str] = Field(default_factory=list)
    github_url: str | None = Field(None, max_length=512)
    demo_url: str | None = Field(None, max_length=512)
    image_url: str | None = Field(None, max_length=512)

    @field_validator("github_url", "demo_url", "image_url", mode="before")
    @classmethod
    def blank_url_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class Project(WireModel):
    """Stored project as returned by storage and the API."""
    id: int
    title: str
    short_description: str
    problem_statement: str
    methodology: str
    outcome: str
    tech_stack: list[str] = Field(default_factory=list)
    github_url: str | None = None
    demo_url: str | None = None
    image_url: str | None = None
    created_at: datetime

    @field_validator("tech_stack", mode="before")
    @classmethod
    def decode_stored_stack(cls, v) -> list[str]:
        return decode_tech_stack(v)
