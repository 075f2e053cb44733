"""
Utility to create the gateway tables and seed the default plans.

Usage:
  python scripts/seed_plans.py
"""
from __future__ import annotations

from sqlalchemy import func, select

from subscription_gateway.config import get_settings
from subscription_gateway.database import create_db_engine, create_session_factory, init_db
from subscription_gateway.models import Plan


def main() -> None:
    engine = create_db_engine(get_settings())
    inserted = init_db(engine)
    db = create_session_factory(engine)()
    try:
        total = db.execute(select(func.count()).select_from(Plan)).scalar()
        print(f"seed_plans inserted={inserted} total={int(total or 0)}")
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    main()
