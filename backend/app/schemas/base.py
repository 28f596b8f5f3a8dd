"""Shared schema configuration — camelCase on the wire, snake_case in Python."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for every entity schema exchanged over HTTP."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class InsertModel(WireModel):
    """Base for caller-supplied payloads: trimmed strings, unknown fields dropped."""
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")
