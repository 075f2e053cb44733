"""
Subscribe API Routes
Create a subscription and record a notification message for it
"""
from typing import Any

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
from subscription_gateway.schemas import SubscribeRequest, parse_subscribe_request
from subscription_gateway.services.terms import compute_term
from subscription_gateway.store import Store

logger = get_logger(__name__)

router = APIRouter()


def _notification_text(payload: SubscribeRequest) -> str:
    customer = payload.customer_info
    return (
        f"Name: {customer.fullname}\n"
        f"Email: {customer.email}\n"
        f"Phone: {customer.phone}\n"
        f"Plan: {payload.plan_id}\n"
        f"Payment: {payload.payment_method}"
    )


@router.post("/subscribe")
def subscribe(
    body: Any = Depends(json_body),
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
    new_id: IdGenerator = Depends(get_id_generator),
    clock: Clock = Depends(get_clock),
):
    """
    Validate the request, derive the term and store the subscription together
    with its notification message in one transaction.
    """
    payload = parse_subscribe_request(body)
    now = clock()
    term = compute_term(payload.plan_id, now, settings.unknown_plan_policy)
    user_id = new_id()

    subscription = {
        "user_id": user_id,
        "plan_id": payload.plan_id,
        "start_date": term.start_date,
        "end_date": term.end_date,
        "status": "active",
    }
    notification = {
        "user_id": user_id,
        "subject": f"New Subscription - {payload.customer_info.email}",
        "message": _notification_text(payload),
        "type": "subscription",
        "created_at": now,
    }

    try:
        store.insert_many([("subscriptions", subscription), ("messages", notification)])
    except StoreError:
        logger.exception("Error saving subscription for plan %s", payload.plan_id)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": "Failed to save data to database."},
        )

    logger.info("Created %s subscription user_id=%s", payload.plan_id, user_id)
    return {
        "success": True,
        "subscription": {
            "plan": payload.plan_id,
            "start_date": term.start_date.isoformat(),
            "end_date": term.end_date.isoformat(),
        },
    }
