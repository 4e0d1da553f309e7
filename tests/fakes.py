import uuid
from types import SimpleNamespace

from app.modules.locations.repository import InMemoryReferenceStore, ReferenceStoreUnavailable


class FakeQuery:
    """Just enough of the postgrest builder chain for the store and seed script."""

    def __init__(self, db, table):
        self.db = db
        self.table = table
        self.op = "select"
        self.payload = None
        self.filters = []
        self.order_by = None
        self.max_rows = None

    def select(self, *columns):
        self.op = "select"
        return self

    def insert(self, payload):
        self.op = "insert"
        self.payload = payload
        return self

    def update(self, payload):
        self.op = "update"
        self.payload = payload
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: str(row.get(column)) == str(value))
        return self

    def like(self, column, pattern):
        prefix = pattern.rstrip("%")
        self.filters.append(lambda row: str(row.get(column, "")).startswith(prefix))
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def limit(self, count):
        self.max_rows = count
        return self

    def _matching(self):
        rows = self.db.tables.setdefault(self.table, [])
        return [row for row in rows if all(f(row) for f in self.filters)]

    def execute(self):
        self.db.calls.append((self.table, self.op))
        if self.op == "insert":
            row = dict(self.payload)
            row.setdefault("id", str(uuid.uuid4()))
            self.db.tables.setdefault(self.table, []).append(row)
            return SimpleNamespace(data=[row])
        if self.op == "update":
            rows = self._matching()
            for row in rows:
                row.update(self.payload)
            return SimpleNamespace(data=rows)

        rows = self._matching()
        if self.order_by:
            column, desc = self.order_by
            rows = sorted(rows, key=lambda row: row.get(column), reverse=desc)
        if self.max_rows is not None:
            rows = rows[:self.max_rows]
        return SimpleNamespace(data=[dict(row) for row in rows])


class FakeSupabase:
    def __init__(self, tables=None):
        self.tables = tables or {}
        self.calls = []

    def table(self, name):
        return FakeQuery(self, name)


class FailingQuery(FakeQuery):
    def execute(self):
        raise ConnectionError("connection refused")


class FailingSupabase(FakeSupabase):
    def table(self, name):
        return FailingQuery(self, name)


class UnavailableStore:
    def get_by_id(self, level, identifier):
        raise ReferenceStoreUnavailable("store down")

    def get_by_code(self, level, code):
        raise ReferenceStoreUnavailable("store down")

    def list_units(self, level, parent_code=None):
        raise ReferenceStoreUnavailable("store down")


def seed_id(level: str, code: str) -> str:
    return InMemoryReferenceStore.seed_unit_id(level, code)


