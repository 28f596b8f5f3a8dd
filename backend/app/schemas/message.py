"""Message Schemas — contact form submissions (append-only inbox).

Invariants:
    - name and message are non-empty after trimming
    - email must be a syntactically valid address (EmailStr, no DNS lookup)
"""

from datetime import datetime

from pydantic import EmailStr, Field, ValidationInfo, field_validator

from app.schemas.base import InsertModel, WireModel


class InsertMessage(InsertModel):
    """Contact form payload."""
    name: str = Field(max_length=100)
    email: EmailStr
    message: str

    @field_validator("name", "message")
    @classmethod
    def require_text(cls, v: str, info: ValidationInfo) -> str:
        if not v:
            raise ValueError(f"{info.field_name.capitalize()} is required")
        return v


class Message(WireModel):
    id: int
    name: str
    email: str
    message: str
    created_at: datetime
