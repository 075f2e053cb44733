"""
Contact API Routes
"""
from datetime import datetime
from typing import Any, Dict, Tuple

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from subscription_gateway.api.dependencies import (
    Clock,
    IdGenerator,
    get_app_settings,
    get_clock,
    get_id_generator,
    get_store,
    json_body,
)
from subscription_gateway.config import Settings
from subscription_gateway.core.exceptions import StoreError
from subscription_gateway.core.logger import get_logger
from subscription_gateway.schemas import ContactRequest, parse_contact_request
from subscription_gateway.store import Store

logger = get_logger(__name__)

router = APIRouter()


def _contact_row(
    payload: ContactRequest, storage: str, message_id: str, now: datetime
) -> Tuple[str, Dict[str, Any]]:
    if storage == "contact_messages":
        return "contact_messages", {
            "name": payload.name,
            "email": payload.email,
            "message": payload.message,
        }
    return "messages", {
        "user_id": message_id,
        "subject": f"Contact Form: {payload.name}",
        "message": f"Name: {payload.name}\nEmail: {payload.email}\n\nMessage:\n{payload.message}",
        "type": "contact_form",
        "created_at": now,
    }


@router.post("/contact")
def submit_contact(
    body: Any = Depends(json_body),
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
    new_id: IdGenerator = Depends(get_id_generator),
    clock: Clock = Depends(get_clock),
):
    """Store a contact-form submission."""
    payload = parse_contact_request(body)
    message_id = new_id()
    now = clock()
    table, row = _contact_row(payload, settings.contact_storage, message_id, now)

    try:
        store.insert(table, row)
    except StoreError:
        logger.exception("Error saving contact form to %s", table)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": "Failed to save contact message to database"},
        )

    return {
        "success": True,
        "message": "Contact message received successfully",
        "data": {
            "name": payload.name,
            "email": payload.email,
            "messageId": message_id,
            "timestamp": now.isoformat(),
        },
    }
