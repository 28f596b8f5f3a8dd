"""Error Body Schemas — response shapes declared for non-2xx statuses in the contract registry."""

from pydantic import BaseModel


class FieldErrorBody(BaseModel):
    field: str
    message: str


class ValidationErrorBody(BaseModel):
    """400 body: first failing field up front, every failing field in errors."""
    message: str
    field: str | None = None
    errors: list[FieldErrorBody] = []


class NotFoundBody(BaseModel):
    message: str
