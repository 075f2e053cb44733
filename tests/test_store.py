from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from subscription_gateway.core.exceptions import StoreError
from subscription_gateway.database import check_database_connection, init_db
from subscription_gateway.models import Base, Plan
from subscription_gateway.store import Store


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = Session(bind=engine)
    yield session
    session.close()


def test_select_orders_by_column(db):
    db.add_all(
        [
            Plan(id="annual", name="Annual", price=Decimal("99.99"), features=["4K"]),
            Plan(id="monthly", name="Monthly", price=Decimal("12.99"), features=[]),
        ]
    )
    db.commit()

    rows = Store(db).select("plans", columns=("id", "price"), order_by="price")
    assert [row["id"] for row in rows] == ["monthly", "annual"]
    assert set(rows[0]) == {"id", "price"}


def test_insert_many_is_atomic(db):
    store = Store(db)
    start = datetime(2024, 1, 31, 12, 0)
    subscription = {
        "user_id": "u1",
        "plan_id": "monthly",
        "start_date": start,
        "end_date": datetime(2024, 2, 29, 12, 0),
        "status": "active",
    }
    # messages.subject is NOT NULL, so the second row fails and nothing is kept
    with pytest.raises(StoreError):
        store.insert_many([("subscriptions", subscription), ("messages", {"user_id": "u1", "message": "x"})])

    assert store.select("subscriptions") == []
    assert store.select("messages") == []


def test_insert_returns_stored_row(db):
    store = Store(db)
    row = store.insert(
        "messages",
        {"user_id": "u1", "subject": "s", "message": "m", "type": "contact_form", "created_at": datetime(2024, 1, 1)},
    )
    assert row["id"] is not None
    assert row["subject"] == "s"


def test_messages_newest_first(db):
    store = Store(db)
    store.insert("messages", {"subject": "old", "message": "m", "created_at": datetime(2024, 1, 1)})
    store.insert("messages", {"subject": "new", "message": "m", "created_at": datetime(2024, 6, 1)})
    rows = store.select("messages", order_by="created_at", descending=True)
    assert [row["subject"] for row in rows] == ["new", "old"]


def test_unknown_table_is_store_error(db):
    with pytest.raises(StoreError):
        Store(db).select("users")


def test_database_failure_wrapped(engine, db):
    Base.metadata.drop_all(bind=engine)
    with pytest.raises(StoreError) as excinfo:
        Store(db).select("plans")
    assert excinfo.value.__cause__ is not None


def test_init_db_seeds_plans_once(engine):
    assert init_db(engine) == 3
    assert init_db(engine) == 0
    assert check_database_connection(engine) is True
