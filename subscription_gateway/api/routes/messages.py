"""
Messages API Routes
Admin listing of stored notification and contact messages
"""
from fastapi import APIRouter, Depends, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from subscription_gateway.api.dependencies import get_store
from subscription_gateway.core.exceptions import StoreError
from subscription_gateway.core.logger import get_logger
from subscription_gateway.store import Store

logger = get_logger(__name__)

router = APIRouter()


@router.get("/messages")
def list_messages(store: Store = Depends(get_store)):
    """All messages, newest first."""
    try:
        rows = store.select("messages", order_by="created_at", descending=True)
    except StoreError:
        logger.exception("Error fetching messages")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": "Could not fetch messages."},
        )

    return {"success": True, "messages": jsonable_encoder(rows)}
