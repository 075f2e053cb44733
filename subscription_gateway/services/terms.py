"""
Subscription term calculation.

Calendar months are added with end-of-month clamping: when the target month
is shorter than the start day, the term ends on the target month's last day
(2024-01-31 + 1 month -> 2024-02-29).
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import datetime

from subscription_gateway.core.exceptions import UnknownPlanError

PLAN_TERM_MONTHS = {
    "monthly": 1,
    "2months": 2,
    "annual": 12,
}


@dataclass(frozen=True)
class Term:
    start_date: datetime
    end_date: datetime


def add_months(start: datetime, months: int) -> datetime:
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return start.replace(year=year, month=month, day=day)


def compute_term(plan_id: str, now: datetime, unknown_plan_policy: str = "reject") -> Term:
    """Map a plan identifier to the (start, end) pair starting at ``now``."""
    months = PLAN_TERM_MONTHS.get(plan_id)
    if months is None:
        if unknown_plan_policy != "monthly":
            raise UnknownPlanError(plan_id)
        months = PLAN_TERM_MONTHS["monthly"]
    return Term(start_date=now, end_date=add_months(now, months))
