"""Database engine, connection abstraction and request dependencies."""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping, Optional, Protocol, Sequence

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import Executable

logger = logging.getLogger(__name__)

Base = declarative_base()


class DBConn(Protocol):
    """
    The three database operations the services rely on.

    Anything implementing these can stand in for a real connection,
    which is how the services are tested without a driver.
    """

    async def fetch_all(
        self, statement: Executable, params: Optional[Mapping[str, Any]] = None
    ) -> Sequence[Mapping[str, Any]]:
        ...

    async def fetch_one(
        self, statement: Executable, params: Optional[Mapping[str, Any]] = None
    ) -> Optional[Mapping[str, Any]]:
        ...

    async def execute(
        self, statement: Executable, params: Optional[Mapping[str, Any]] = None
    ) -> int:
        ...


class SQLConn:
    """DBConn backed by a SQLAlchemy async connection."""

    def __init__(self, conn: AsyncConnection, statement_timeout: Optional[float] = None):
        self._conn = conn
        self._statement_timeout = statement_timeout

    async def _run(self, statement, params):
        # The calling task's cancellation reaches the driver through this await.
        return await asyncio.wait_for(
            self._conn.execute(statement, params),
            timeout=self._statement_timeout,
        )

    async def fetch_all(self, statement, params=None):
        result = await self._run(statement, params)
        return result.mappings().all()

    async def fetch_one(self, statement, params=None):
        result = await self._run(statement, params)
        return result.mappings().first()

    async def execute(self, statement, params=None):
        result = await self._run(statement, params)
        return result.rowcount


class Database:
    """Owns the connection pool for the lifetime of the application."""

    def __init__(
        self,
        url: URL,
        pool_size: int = 5,
        connect_timeout: float = 5.0,
        statement_timeout: Optional[float] = None,
    ):
        self.url = url
        self.pool_size = pool_size
        self.connect_timeout = connect_timeout
        self.statement_timeout = statement_timeout
        self.engine: Optional[AsyncEngine] = None

    async def connect(self):
        """Create the engine and make sure the database answers."""
        if self.engine is not None:
            logger.warning("Database is already connected")
            return

        logger.info(f"Connecting to database at {self.url.host}:{self.url.port}/{self.url.database}")

        self.engine = create_async_engine(
            self.url,
            pool_size=self.pool_size,
            pool_pre_ping=True,
            isolation_level="AUTOCOMMIT",
            connect_args={"timeout": self.connect_timeout, "ssl": "disable"},
        )
        await self.ping(timeout=self.connect_timeout)

        logger.info("Database connection established")

    async def disconnect(self):
        """Dispose of the pool."""
        if self.engine is None:
            return

        await self.engine.dispose()
        self.engine = None
        logger.info("Database connection closed")

    async def ping(self, timeout: Optional[float] = None):
        """Run a trivial query, raising if the database cannot be reached in time."""
        if self.engine is None:
            raise RuntimeError("Database is not connected")

        async def _ping():
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))

        await asyncio.wait_for(_ping(), timeout=timeout)

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[SQLConn]:
        """Check a connection out of the pool for the duration of the block."""
        if self.engine is None:
            raise RuntimeError("Database is not connected")

        async with self.engine.connect() as conn:
            yield SQLConn(conn, statement_timeout=self.statement_timeout)


def get_database(request: Request) -> Database:
    """Dependency: the application's Database."""
    return request.app.state.database


async def get_conn(request: Request) -> AsyncIterator[DBConn]:
    """Dependency: one pooled connection per request."""
    database: Database = request.app.state.database
    async with database.connection() as conn:
        yield conn
