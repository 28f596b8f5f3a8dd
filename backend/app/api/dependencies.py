"""Request Dependencies — process-scoped collaborators pulled from app.state.

Invariants:
    - Storage and notifier are created once in the lifespan and only read here
    - read_json_body() turns unparsable JSON into a ValidationError on "body"
"""

from typing import Any

from fastapi import Request

from app.core.errors import FieldError, ValidationError
from app.core.repository_protocols import PortfolioStorage
from app.infrastructure.email_notifier import EmailNotifier


def get_storage(request: Request) -> PortfolioStorage:
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise RuntimeError("Storage not initialized")
    return storage


def get_notifier(request: Request) -> EmailNotifier | None:
    return getattr(request.app.state, "notifier", None)


async def read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        raise ValidationError([
            FieldError("body", "Request body must be valid JSON"),
        ]) from None
