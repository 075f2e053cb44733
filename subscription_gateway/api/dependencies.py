"""Shared API dependencies; tests replace these through ``app.dependency_overrides``."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from subscription_gateway.config import Settings
from subscription_gateway.core.exceptions import ClientError
from subscription_gateway.database import get_db
from subscription_gateway.store import Store

IdGenerator = Callable[[], str]
Clock = Callable[[], datetime]


def get_store(db: Session = Depends(get_db)) -> Generator[Store, None, None]:
    yield Store(db)


def new_id() -> str:
    return str(uuid.uuid4())


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def get_id_generator() -> IdGenerator:
    return new_id


def get_clock() -> Clock:
    return now_utc


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def json_body(request: Request) -> Any:
    """Parsed JSON request body; undecodable input is a client error."""
    try:
        return await request.json()
    except ValueError:
        raise ClientError("Request body must be valid JSON") from None
