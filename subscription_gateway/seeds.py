from __future__ import annotations

from decimal import Decimal
from typing import Any

from sqlalchemy.orm import Session

from subscription_gateway.core.logger import get_logger
from subscription_gateway.models import Plan

logger = get_logger(__name__)

PLAN_SEED_DATA: list[dict[str, Any]] = [
    {
        "id": "monthly",
        "name": "Monthly",
        "price": Decimal("12.99"),
        "features": ["All channels", "HD streaming", "1 device"],
    },
    {
        "id": "2months",
        "name": "2 Months",
        "price": Decimal("22.99"),
        "features": ["All channels", "HD streaming", "2 devices"],
    },
    {
        "id": "annual",
        "name": "Annual",
        "price": Decimal("99.99"),
        "features": ["All channels", "4K streaming", "4 devices", "Priority support"],
    },
]


def seed_plans(db: Session) -> int:
    if db.query(Plan).count() > 0:
        return 0

    for item in PLAN_SEED_DATA:
        db.add(Plan(**item))
    db.commit()
    logger.info("Seeded %s default plans", len(PLAN_SEED_DATA))
    return len(PLAN_SEED_DATA)
