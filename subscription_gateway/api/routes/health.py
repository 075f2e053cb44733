"""
Health API Routes
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends

from subscription_gateway.api.dependencies import Clock, get_clock

router = APIRouter()


@router.get("/health")
async def health_check(clock: Clock = Depends(get_clock)) -> Dict[str, Any]:
    """Liveness probe; does not touch the database."""
    return {
        "status": "OK",
        "server_time": clock().isoformat(),
    }
