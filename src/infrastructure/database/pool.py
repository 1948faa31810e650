from __future__ import annotations

"""
Pooled Asynchronous Database Connections

This module hands out connections from a bounded pool built on SQLAlchemy's
asyncio support. The pool never grows beyond `pool_size` (no overflow): once
every connection is checked out, `acquire()` suspends the caller until another
request releases one, or until `pool_timeout` elapses.

A connectivity check (`SELECT 1`) runs once per pool, on first use. A failure
is logged and swallowed so the process keeps serving; later operations raise
`StorageError` until the store is reachable again. There is no reconnection
loop.

**Security Note**: The database URL carries credentials and is never logged.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator, Optional

import structlog
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.pool import AsyncAdaptedQueuePool
from sqlmodel import SQLModel

from src.core.exceptions import StorageError

if TYPE_CHECKING:
    from src.core.config.settings import Settings

logger = structlog.get_logger(__name__)


class ConnectionPool:
    """Bounded set of reusable connections to the relational store.

    Usage:
        async with pool.connection() as conn:
            await conn.execute(statement)

    `acquire()` / `release()` are exposed for callers that manage the handle
    themselves; every successful `acquire()` must be paired with exactly one
    `release()`.
    """

    def __init__(
        self,
        database_url: str,
        *,
        pool_size: int = 10,
        pool_timeout: float = 30.0,
        echo: bool = False,
    ):
        self._engine: AsyncEngine = create_async_engine(
            database_url,
            echo=echo,
            poolclass=AsyncAdaptedQueuePool,
            pool_size=pool_size,
            max_overflow=0,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,  # Check connection health before use
        )
        self._pool_size = pool_size
        self._connectivity_checked = False
        self._check_lock: Optional[asyncio.Lock] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConnectionPool":
        return cls(
            settings.DATABASE_URL,
            pool_size=settings.DB_POOL_SIZE,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            echo=settings.DB_ECHO,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def size(self) -> int:
        return self._pool_size

    @property
    def checked_out(self) -> int:
        """Number of connections currently handed out."""
        return self._engine.pool.checkedout()

    async def check_connectivity(self) -> bool:
        """Run `SELECT 1` on a fresh connection.

        Returns:
            bool: True if the store answered, False otherwise. Never raises.
        """
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                "database_connectivity_check_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return False
        logger.info("database_connected", pool_size=self._pool_size)
        return True

    async def _ensure_connectivity_checked(self) -> None:
        if self._connectivity_checked:
            return
        if self._check_lock is None:
            self._check_lock = asyncio.Lock()
        async with self._check_lock:
            if self._connectivity_checked:
                return
            self._connectivity_checked = True
            await self.check_connectivity()

    async def acquire(self) -> AsyncConnection:
        """Check a connection out of the pool, waiting while it is exhausted.

        Raises:
            StorageError: If no connection could be opened, or none was
                released within the pool timeout.
        """
        await self._ensure_connectivity_checked()
        try:
            conn = await self._engine.connect()
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                "database_connection_acquire_failed",
                error=str(e),
                error_type=type(e).__name__,
                checked_out=self.checked_out,
            )
            raise StorageError("Database connection unavailable") from e
        logger.debug("database_connection_acquired", checked_out=self.checked_out)
        return conn

    async def release(self, conn: AsyncConnection) -> None:
        """Return a connection to the pool; uncommitted work is rolled back."""
        await conn.close()
        logger.debug("database_connection_released", checked_out=self.checked_out)

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[AsyncConnection]:
        """Scoped acquisition: the connection is released even when the body raises."""
        conn = await self.acquire()
        try:
            yield conn
        finally:
            await self.release(conn)

    async def create_tables(self) -> None:
        """Create every table registered on the SQLModel metadata."""
        logger.info("Creating database tables")
        async with self._engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("database_tables_created", tables=list(SQLModel.metadata.tables.keys()))

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self._engine.dispose()
        logger.info("database_pool_disposed")
