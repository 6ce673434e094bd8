import uuid
from collections import deque
from datetime import datetime, timezone

from sqlalchemy.dialects import postgresql


# ------------------ mock connection ------------------
class MockConn:
    """
    Driver-free stand-in for a database connection.

    Results are queued with expect() and handed out in order, one per call.
    Queue an exception to make the next call fail with it.
    """

    def __init__(self):
        self.calls = []
        self._results = deque()

    def expect(self, result):
        self._results.append(result)
        return self

    async def _next(self, kind, statement, params):
        self.calls.append((kind, statement, params))
        if not self._results:
            raise AssertionError(f"unexpected {kind} call: {statement}")
        result = self._results.popleft()
        if isinstance(result, BaseException):
            raise result
        return result

    async def fetch_all(self, statement, params=None):
        return await self._next("fetch_all", statement, params)

    async def fetch_one(self, statement, params=None):
        return await self._next("fetch_one", statement, params)

    async def execute(self, statement, params=None):
        return await self._next("execute", statement, params)

    def expectations_were_met(self):
        return not self._results

    def compiled(self, index=-1):
        _, statement, _ = self.calls[index]
        return statement.compile(dialect=postgresql.dialect())

    def sql(self, index=-1):
        return str(self.compiled(index))

    def bound(self, index=-1):
        """Values bound into the statement plus any params passed alongside it."""
        _, _, params = self.calls[index]
        values = dict(self.compiled(index).params)
        values.update(params or {})
        return values


class FakeDatabase:
    def __init__(self, healthy=True):
        self.healthy = healthy
        self.connected = False
        self.pings = 0

    async def connect(self):
        self.connected = True

    async def disconnect(self):
        self.connected = False

    async def ping(self, timeout=None):
        self.pings += 1
        if not self.healthy:
            raise ConnectionRefusedError("connection refused")


# ------------------ rows ------------------
def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


def coach_row(**overrides):
    row = {
        "id": uuid.uuid4(),
        "first_name": "John",
        "last_name": "Doe",
        "email": None,
        "phone": "1112223333",
        "is_active": True,
        "specialties": ["hitting"],
        "created_at": utc(2025, 8, 1, 9, 0),
        "updated_at": utc(2025, 8, 1, 9, 0),
    }
    row.update(overrides)
    return row


def reservation_row(**overrides):
    row = {
        "id": uuid.uuid4(),
        "reservation_kind": "tunnel",
        "tunnel_id": 1,
        "coach_id": None,
        "customer_first_name": "John",
        "customer_last_name": "Doe",
        "customer_phone": "1112223333",
        "customer_email": None,
        "start_time": utc(2025, 8, 9, 12, 0),
        "duration_minutes": 60,
        "end_time": utc(2025, 8, 9, 13, 0),
        "status": "confirmed",
        "notes": None,
        "created_at": utc(2025, 8, 1, 9, 0),
        "updated_at": utc(2025, 8, 1, 9, 0),
    }
    row.update(overrides)
    return row


def tunnel_row(**overrides):
    row = {
        "id": 1,
        "name": "Tunnel 1",
        "is_active": True,
        "created_at": utc(2025, 8, 1, 9, 0),
    }
    row.update(overrides)
    return row


