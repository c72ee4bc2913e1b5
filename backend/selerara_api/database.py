"""
Selerara Dashboard API — Database Connection Pool
==================================================

What:  The `Database` resource (async engine + session factory) and the
       FastAPI dependencies that hand sessions to route handlers.
Why:   The pool is owned by the application, not by the module: it is built
       in the lifespan handler, stored on `app.state`, and disposed on
       shutdown. Tests inject their own instance.
How:   SQLAlchemy async engine over aiomysql, bounded QueuePool.
Who:   Created by main.lifespan; used by routes through Depends().

Connection Pooling Strategy:
    pool_size=10:       At most 10 queries in flight at once
    max_overflow=0:     No burst connections beyond pool_size
    pool_timeout=None:  Requests beyond the limit queue until a connection frees
    pool_pre_ping:      Validates connections before use
    pool_recycle:       Recycles connections before MySQL's wait_timeout drops them
"""

import logging
from typing import AsyncGenerator, Optional, Union

from fastapi import Depends, Request
from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from selerara_api.config import Settings

logger = logging.getLogger(__name__)


class Database:
    """
    Owns the connection pool for one application instance.

    Lifecycle:
        1. Built at startup (from settings, or passed to create_app by tests)
        2. Sessions are opened per request and always closed, returning the
           connection to the pool even when the query fails
        3. dispose() closes every pooled connection on shutdown
    """

    def __init__(
        self,
        url: Union[str, URL],
        pool_size: int = 10,
        pool_timeout: Optional[float] = None,
        pool_pre_ping: bool = True,
        pool_recycle: int = 3600,
        echo: bool = False,
    ):
        self.engine: AsyncEngine = create_async_engine(
            url,
            pool_size=pool_size,
            max_overflow=0,
            pool_timeout=pool_timeout,
            pool_pre_ping=pool_pre_ping,
            pool_recycle=pool_recycle,
            echo=echo,
        )
        # expire_on_commit=False: rows stay readable after the session ends
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Builds the pool described by the application settings."""
        return cls(
            settings.database_url_resolved,
            pool_size=settings.db_pool_size,
            pool_timeout=settings.db_pool_timeout,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=settings.db_pool_recycle,
            echo=settings.log_level == "DEBUG",
        )

    def session(self) -> AsyncSession:
        return self.session_factory()

    async def ping(self) -> None:
        """
        What:  Checks out a pooled connection and runs SELECT 1.
        Raises: Whatever the driver raises when the database is unreachable.
        """
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Closes all pooled connections. Called from the lifespan shutdown."""
        await self.engine.dispose()
        logger.info("Database pool disposed")


# ── Dependencies ──────────────────────────────────────────────────────────
def get_database(request: Request) -> Database:
    """Returns the pool owned by the running application."""
    return request.app.state.database


async def get_db_session(
    database: Database = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Opens a session from the app's pool
        2. Yields it to the route handler
        3. On error: rolls back, then re-raises for the global error handler
        4. Always: closes the session (returns the connection to the pool)

    Nothing is committed: every endpoint is read-only.
    """
    async with database.session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
