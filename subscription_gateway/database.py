"""
Database connection and session management.

Each application builds its own engine from the settings it was created with;
nothing here connects at import time.
"""
from __future__ import annotations

from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from subscription_gateway.config import Settings
from subscription_gateway.core.logger import get_logger

logger = get_logger(__name__)


def create_db_engine(settings: Settings) -> Engine:
    """Build the engine for the configured database URL."""
    url = settings.database_url
    if url.startswith("sqlite"):
        # SQLite needs this flag since requests may run on different threads
        return create_engine(url, connect_args={"check_same_thread": False}, echo=False)
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_recycle=settings.db_pool_recycle,
        echo=False,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency for getting a database session from the application's engine.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def init_db(engine: Engine) -> int:
    """
    Create tables and seed the default plans. Returns the number of plans inserted.
    """
    from subscription_gateway.models import Base
    from subscription_gateway.seeds import seed_plans

    Base.metadata.create_all(bind=engine)

    db = Session(bind=engine)
    try:
        return seed_plans(db)
    finally:
        db.close()


def check_database_connection(engine: Engine) -> bool:
    """
    Return True when the database connection is healthy.
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        logger.warning("Database connectivity check failed", exc_info=True)
        return False
