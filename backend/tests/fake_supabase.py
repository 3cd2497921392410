"""
In-memory stand-in for the Supabase client.

Implements the slice of the PostgREST query builder the repositories use
(``table().select/insert/update().eq().is_().order().limit().execute()``)
so that services and routes can be exercised against real conditional
updates. Unique constraints raise the same ``APIError`` PostgREST does.
"""

import copy
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from postgrest.exceptions import APIError

# Unique constraints over live (not soft-deleted) rows
UNIQUE_LIVE_COLUMNS = {
    "users": [("email",)],
    "followers": [("follower_id", "following_id")],
}


@dataclass
class FakeResult:
    data: list[dict[str, Any]]


class FakeQuery:
    """A single query against one table."""

    def __init__(self, db: "FakeSupabase", table: str):
        self._db = db
        self._table = table
        self._op: Optional[str] = None
        self._payload: dict[str, Any] = {}
        self._filters: list[Callable[[dict[str, Any]], bool]] = []
        self._order: Optional[tuple[str, bool]] = None
        self._limit: Optional[int] = None

    def select(self, columns: str = "*") -> "FakeQuery":
        self._op = "select"
        return self

    def insert(self, data: dict[str, Any]) -> "FakeQuery":
        self._op = "insert"
        self._payload = dict(data)
        return self

    def update(self, data: dict[str, Any]) -> "FakeQuery":
        self._op = "update"
        self._payload = dict(data)
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self._filters.append(lambda row: row.get(column) == value)
        return self

    def is_(self, column: str, value: str) -> "FakeQuery":
        assert value == "null", "only IS NULL is supported"
        self._filters.append(lambda row: row.get(column) is None)
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self._order = (column, desc)
        return self

    def limit(self, size: int) -> "FakeQuery":
        self._limit = size
        return self

    def execute(self) -> FakeResult:
        self._db.executed.append((self._table, self._op))
        if self._db.fail_with is not None:
            raise self._db.fail_with

        rows = self._db.tables.setdefault(self._table, [])
        if self._op == "insert":
            return FakeResult(data=[self._do_insert(rows)])
        if self._op == "update":
            return FakeResult(data=self._do_update(rows))
        return FakeResult(data=self._do_select(rows))

    def _matches(self, row: dict[str, Any]) -> bool:
        return all(check(row) for check in self._filters)

    def _do_select(self, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        found = [row for row in rows if self._matches(row)]
        if self._order is not None:
            column, desc = self._order
            found.sort(key=lambda row: row[column], reverse=desc)
        if self._limit is not None:
            found = found[: self._limit]
        return copy.deepcopy(found)

    def _do_insert(self, rows: list[dict[str, Any]]) -> dict[str, Any]:
        row = {
            "created_at": datetime.now(timezone.utc).isoformat(),
            "updated_at": None,
            "deleted_at": None,
            **self._payload,
            "id": self._db.next_id(self._table),
        }
        self._check_unique(rows, row)
        rows.append(row)
        return copy.deepcopy(row)

    def _do_update(self, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        targets = [row for row in rows if self._matches(row)]
        for row in targets:
            self._check_unique(rows, {**row, **self._payload}, ignore=row)
        for row in targets:
            row.update(self._payload)
        return copy.deepcopy(targets)

    def _check_unique(
        self,
        rows: list[dict[str, Any]],
        candidate: dict[str, Any],
        ignore: Optional[dict[str, Any]] = None,
    ) -> None:
        if candidate.get("deleted_at") is not None:
            return
        for columns in UNIQUE_LIVE_COLUMNS.get(self._table, []):
            for row in rows:
                if row is ignore or row.get("deleted_at") is not None:
                    continue
                if all(row.get(c) == candidate.get(c) for c in columns):
                    raise APIError({
                        "message": f'duplicate key value violates unique constraint "{self._table}_{"_".join(columns)}_key"',
                        "code": "23505",
                        "hint": None,
                        "details": f"Key ({', '.join(columns)}) already exists.",
                    })


class FakeSupabase:
    """Minimal Supabase ``Client`` replacement holding tables in memory."""

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.executed: list[tuple[str, Optional[str]]] = []
        # Set to an exception to make every query fail with it
        self.fail_with: Optional[Exception] = None
        self._ids: dict[str, int] = {}

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def next_id(self, table: str) -> int:
        self._ids[table] = self._ids.get(table, 0) + 1
        return self._ids[table]

    def rows(self, table: str) -> list[dict[str, Any]]:
        """All rows of a table, deleted ones included."""
        return self.tables.get(table, [])

    def get(self, table: str, row_id: int) -> Optional[dict[str, Any]]:
        for row in self.rows(table):
            if row["id"] == row_id:
                return row
        return None
