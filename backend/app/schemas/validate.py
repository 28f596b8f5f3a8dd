"""Payload Validation — turns pydantic failures into a domain ValidationError.

Invariants:
    - validate_payload() returns the normalized insert model or raises ValidationError
    - Every violated field is reported once, with a human-readable reason
    - Non-object payloads fail on the pseudo-field "body"
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.errors import FieldError, ValidationError

M = TypeVar("M", bound=BaseModel)

_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}
_VALUE_ERROR_PREFIX = "Value error, "


def validate_payload(schema: type[M], payload: Any) -> M:
    """Validate a candidate insert payload against an entity's insert schema."""
    if isinstance(payload, schema):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    if not isinstance(payload, Mapping):
        raise ValidationError([
            FieldError("body", "Request body must be a JSON object"),
        ])
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(field_errors_from_pydantic(exc.errors())) from None


def field_errors_from_pydantic(errors: list[dict]) -> list[FieldError]:
    """One FieldError per field, in the order pydantic reported them."""
    seen: dict[str, FieldError] = {}
    for e in errors:
        field = _format_loc(e.get("loc", ()))
        if field not in seen:
            seen[field] = FieldError(field, _format_msg(e.get("msg", "Invalid value")))
    return list(seen.values())


def _format_loc(loc: tuple) -> str:
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _REQUEST_LOCATIONS:
        parts = parts[1:]
    return ".".join(str(p) for p in parts) or "body"


def _format_msg(msg: str) -> str:
    if msg.startswith(_VALUE_ERROR_PREFIX):
        return msg[len(_VALUE_ERROR_PREFIX):]
    return msg
