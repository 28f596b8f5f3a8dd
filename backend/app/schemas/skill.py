"""Skill Schemas — name/category grouping with a 0-100 proficiency."""

from pydantic import Field, field_validator

from app.core.domain_types import (
    DEFAULT_PROFICIENCY, MAX_PROFICIENCY, MIN_PROFICIENCY,
)
from app.schemas.base import InsertModel, WireModel


class InsertSkill(InsertModel):
    """Skill creation payload. Missing or null proficiency -> DEFAULT_PROFICIENCY."""
    name: str = Field(min_length=1, max_length=100)
    category: str = Field(min_length=1, max_length=50)
    proficiency: int = Field(
        DEFAULT_PROFICIENCY, ge=MIN_PROFICIENCY, le=MAX_PROFICIENCY,
    )

    @field_validator("proficiency", mode="before")
    @classmethod
    def normalize_proficiency(cls, v):
        if isinstance(v, bool):
            raise ValueError("Proficiency must be a number")
        return DEFAULT_PROFICIENCY if v is None else v


class Skill(WireModel):
    id: int
    name: str
    category: str
    proficiency: int = DEFAULT_PROFICIENCY

    @field_validator("proficiency", mode="before")
    @classmethod
    def default_when_null(cls, v):
        return DEFAULT_PROFICIENCY if v is None else v
