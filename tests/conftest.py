"""Shared fixtures: an in-memory stand-in for the psycopg2 connection pool."""

from __future__ import annotations

import threading
from typing import Any, Iterable, Optional

import pytest

import db.connection


class FakeCursor:
    def __init__(self, connection: "FakeConnection") -> None:
        self._connection = connection
        self._rows: list = []

    def __enter__(self) -> "FakeCursor":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        return None

    def execute(self, sql: str, params: Any = None) -> None:
        self._connection.pool.record(sql, params)
        self._rows = list(self._connection.pool.rows_for(sql))

    def fetchall(self) -> list:
        return self._rows

    def fetchone(self) -> Optional[Any]:
        return self._rows[0] if self._rows else None


class FakeConnection:
    def __init__(self, pool: "FakePool") -> None:
        self.pool = pool
        self.commits = 0
        self.rollbacks = 0

    def cursor(self, **kwargs: Any) -> FakeCursor:
        return FakeCursor(self)

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1


class FakePool:
    """
    Serves canned rows keyed on SQL fragments.

    ``respond("FROM revenue", rows=[...])`` answers any statement containing
    every given fragment; ``error=`` raises instead.
    """

    def __init__(self) -> None:
        self._responses: list[tuple[tuple[str, ...], Iterable, Optional[BaseException]]] = []
        self._lock = threading.Lock()
        self.executed: list[tuple[str, Any]] = []
        self.connections: list[FakeConnection] = []
        self.checked_out = 0

    def respond(self, *fragments: str, rows: Iterable = (), error: Optional[BaseException] = None) -> None:
        self._responses.append((fragments, list(rows), error))

    def record(self, sql: str, params: Any) -> None:
        with self._lock:
            self.executed.append((str(sql), params))

    def rows_for(self, sql: str) -> Iterable:
        for fragments, rows, error in self._responses:
            if all(fragment in sql for fragment in fragments):
                if error is not None:
                    raise error
                return rows
        raise AssertionError(f"Unexpected query: {sql}")

    def getconn(self) -> FakeConnection:
        with self._lock:
            conn = FakeConnection(self)
            self.connections.append(conn)
            self.checked_out += 1
            return conn

    def putconn(self, conn: FakeConnection) -> None:
        with self._lock:
            self.checked_out -= 1

    def closeall(self) -> None:
        return None


@pytest.fixture()
def fake_db(monkeypatch: pytest.MonkeyPatch) -> FakePool:
    pool = FakePool()
    monkeypatch.setattr(db.connection, "_pool", pool)
    return pool
