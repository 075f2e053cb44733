from datetime import datetime, timezone

from subscription_gateway.core.exceptions import StoreError

FIXED_NOW = datetime(2024, 1, 31, 12, 0, tzinfo=timezone.utc)
FIXED_ID = '00000000-0000-4000-8000-000000000001'


class FakeStore:
    """In-memory stand-in for Store that records every call."""

    def __init__(self, rows=None, fail=False):
        self.rows = rows or {}
        self.fail = fail
        self.calls = []
        self.inserted = []

    def select(self, table, columns=None, order_by=None, descending=False):
        self.calls.append(('select', table))
        if self.fail:
            raise StoreError('could not connect to server at db.internal:5432')
        return [dict(row) for row in self.rows.get(table, [])]

    def insert(self, table, row):
        return self.insert_many([(table, row)])[0]

    def insert_many(self, items):
        self.calls.append(('insert_many', [table for table, _ in items]))
        if self.fail:
            raise StoreError('duplicate key value violates unique constraint "secret_idx"')
        self.inserted.extend(items)
        return [dict(row) for _, row in items]
