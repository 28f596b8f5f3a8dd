"""Contact Route — validates and stores contact form messages.

Invariants:
    - Body validated against the registry's input schema before storage is touched
    - Every failing field reported in the 400 body
    - Email notification scheduled only after the message is stored; it runs after
      the response is sent and cannot change it
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request

from app.api.dependencies import get_notifier, get_storage, read_json_body
from app.core.contract import SUBMIT_CONTACT
from app.core.repository_protocols import PortfolioStorage
from app.infrastructure.email_notifier import EmailNotifier

logger = logging.getLogger(__name__)
router = APIRouter(tags=["contact"])


@router.api_route(
    SUBMIT_CONTACT.path,
    methods=[SUBMIT_CONTACT.method],
    status_code=SUBMIT_CONTACT.success_status,
    response_model=SUBMIT_CONTACT.success_schema,
    responses=SUBMIT_CONTACT.error_responses(),
)
async def submit_message(
    request: Request,
    background_tasks: BackgroundTasks,
    storage: PortfolioStorage = Depends(get_storage),
    notifier: EmailNotifier | None = Depends(get_notifier),
):
    """Store a contact message and notify the site owner."""
    payload = await read_json_body(request)
    data = SUBMIT_CONTACT.validate_input(payload)
    message = await storage.create_message(data)
    if notifier is not None and notifier.enabled:
        background_tasks.add_task(notifier.notify_new_message, message)
    return message
