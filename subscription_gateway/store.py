"""
Table-level insert/select access to the hosted database.

Route handlers depend on this small surface only, so tests can swap in any
object exposing the same ``select``/``insert``/``insert_many`` methods.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from subscription_gateway.core.exceptions import StoreError
from subscription_gateway.core.logger import get_logger
from subscription_gateway.models import TABLES

logger = get_logger(__name__)

Row = Dict[str, Any]


def _model_for(table: str):
    try:
        return TABLES[table]
    except KeyError:
        raise StoreError(f"Unknown table '{table}'") from None


def _row_to_dict(instance: Any, columns: Optional[Iterable[str]] = None) -> Row:
    names = list(columns) if columns else [c.name for c in instance.__table__.columns]
    return {name: getattr(instance, name) for name in names}


class Store:
    """SQLAlchemy-backed store bound to one session."""

    def __init__(self, db: Session):
        self.db = db

    def select(
        self,
        table: str,
        columns: Optional[Sequence[str]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> List[Row]:
        model = _model_for(table)
        try:
            query = self.db.query(model)
            if order_by:
                column = getattr(model, order_by)
                query = query.order_by(column.desc() if descending else column.asc())
            return [_row_to_dict(item, columns) for item in query.all()]
        except SQLAlchemyError as exc:
            raise StoreError(f"select from {table} failed") from exc

    def insert(self, table: str, row: Row) -> Row:
        return self.insert_many([(table, row)])[0]

    def insert_many(self, items: Sequence[Tuple[str, Row]]) -> List[Row]:
        """Insert rows into one or more tables in a single transaction."""
        instances = [_model_for(table)(**row) for table, row in items]
        try:
            self.db.add_all(instances)
            self.db.commit()
            for instance in instances:
                self.db.refresh(instance)
        except SQLAlchemyError as exc:
            self.db.rollback()
            tables = ", ".join(table for table, _ in items)
            raise StoreError(f"insert into {tables} failed") from exc
        logger.debug("Inserted %s row(s)", len(instances))
        return [_row_to_dict(instance) for instance in instances]
