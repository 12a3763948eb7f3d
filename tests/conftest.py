"""Shared fixtures: an in-memory stand-in for the asyncpg pool."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from core import db


def _normalize(sql: str) -> str:
    return " ".join(sql.split())


class FakePool:
    """Understands exactly the statements the customers repository issues."""

    def __init__(self) -> None:
        self.rows: dict[int, dict] = {}
        self.statements: list[str] = []
        self.fail_with: Exception | None = None
        self.closed = False
        self._next_id = 1

    def _record(self, sql: str) -> str:
        stmt = _normalize(sql)
        self.statements.append(stmt)
        if self.fail_with is not None:
            raise self.fail_with
        return stmt

    async def fetchrow(self, sql: str, *args):
        stmt = self._record(sql)
        if stmt.startswith("INSERT INTO customers"):
            name, email = args
            row = {"id": self._next_id, "name": name, "email": email}
            self._next_id += 1
            self.rows[row["id"]] = row
            return dict(row)
        raise AssertionError(f"unexpected fetchrow: {stmt}")

    async def fetch(self, sql: str, *args):
        stmt = self._record(sql)
        if stmt.startswith("SELECT id, name, email FROM customers"):
            return [dict(row) for row in self.rows.values()]
        raise AssertionError(f"unexpected fetch: {stmt}")

    async def execute(self, sql: str, *args) -> str:
        stmt = self._record(sql)
        if stmt.startswith("CREATE TABLE IF NOT EXISTS customers"):
            return "CREATE TABLE"
        if stmt.startswith("UPDATE customers"):
            name, email, customer_id = args
            if customer_id not in self.rows:
                return "UPDATE 0"
            self.rows[customer_id].update(name=name, email=email)
            return "UPDATE 1"
        if stmt.startswith("DELETE FROM customers"):
            (customer_id,) = args
            return f"DELETE {1 if self.rows.pop(customer_id, None) else 0}"
        raise AssertionError(f"unexpected execute: {stmt}")

    async def fetchval(self, sql: str, *args):
        self._record(sql)
        return 1

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_pool(monkeypatch) -> FakePool:
    pool = FakePool()
    monkeypatch.setattr(db, "_pool", pool)
    monkeypatch.setattr(db, "_keepalive_task", None)
    return pool


@pytest.fixture
def client(fake_pool):
    """TestClient with the lifespan running against the fake pool."""
    from main import app

    with TestClient(app) as c:
        yield c
