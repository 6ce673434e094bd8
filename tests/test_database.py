import asyncio

import anyio
import pytest
from sqlalchemy import text

from app.core.database import SQLConn

pytestmark = pytest.mark.anyio


class StubResult:
    def __init__(self, rows=(), rowcount=0):
        self.rows = list(rows)
        self.rowcount = rowcount

    def mappings(self):
        return self

    def all(self):
        return list(self.rows)

    def first(self):
        return self.rows[0] if self.rows else None


class StubConnection:
    """Stands in for an AsyncConnection; optionally slow."""

    def __init__(self, result=None, delay=0):
        self.result = result or StubResult()
        self.delay = delay
        self.calls = []
        self.cancelled = False

    async def execute(self, statement, params=None):
        self.calls.append((statement, params))
        try:
            await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return self.result


async def test_fetch_all_returns_rows():
    rows = [{"id": 1, "name": "Tunnel 1"}, {"id": 2, "name": "Tunnel 2"}]
    stub = StubConnection(StubResult(rows))

    assert await SQLConn(stub).fetch_all(text("SELECT * FROM tunnels")) == rows


async def test_fetch_one_passes_params():
    stub = StubConnection(StubResult([{"id": 3}]))
    statement = text("SELECT * FROM tunnels WHERE id = :id")

    row = await SQLConn(stub).fetch_one(statement, {"id": 3})

    assert row == {"id": 3}
    assert stub.calls == [(statement, {"id": 3})]


async def test_fetch_one_without_rows_is_none():
    stub = StubConnection(StubResult([]))

    assert await SQLConn(stub).fetch_one(text("SELECT 1 WHERE false")) is None


async def test_execute_returns_rowcount():
    conn = SQLConn(StubConnection(StubResult(rowcount=1)))

    assert await conn.execute(text("DELETE FROM coaches WHERE id = :id"), {"id": "x"}) == 1


async def test_execute_touching_nothing_is_zero():
    conn = SQLConn(StubConnection(StubResult(rowcount=0)))

    assert await conn.execute(text("DELETE FROM coaches WHERE id = :id"), {"id": "x"}) == 0


async def test_statement_deadline():
    stub = StubConnection(delay=1)
    conn = SQLConn(stub, statement_timeout=0.05)

    with pytest.raises(asyncio.TimeoutError):
        await conn.fetch_all(text("SELECT pg_sleep(1)"))

    assert stub.cancelled


async def test_cancelling_the_caller_cancels_the_statement():
    stub = StubConnection(delay=5)
    conn = SQLConn(stub, statement_timeout=30)

    async with anyio.create_task_group() as tg:
        tg.start_soon(conn.fetch_all, text("SELECT pg_sleep(5)"))
        await anyio.sleep(0.05)
        tg.cancel_scope.cancel()

    assert stub.cancelled
