"""
Plans API Routes
"""
from decimal import Decimal
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from subscription_gateway.api.dependencies import get_store
from subscription_gateway.core.exceptions import StoreError
from subscription_gateway.core.logger import get_logger
from subscription_gateway.store import Store

logger = get_logger(__name__)

router = APIRouter()

PLAN_COLUMNS = ("id", "name", "price", "features")


def _price(plan: Dict[str, Any]) -> Decimal:
    return Decimal(str(plan.get("price") or 0))


@router.get("/plans")
def list_plans(store: Store = Depends(get_store)):
    """List purchasable plans, cheapest first."""
    try:
        rows = store.select("plans", columns=PLAN_COLUMNS, order_by="price")
    except StoreError:
        logger.exception("Error fetching plans")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": "Could not fetch plans."},
        )

    plans = sorted(rows, key=_price)
    return {"success": True, "plans": jsonable_encoder(plans)}
