"""
Async database connection management for CallWatch.

Provides SQLAlchemy async engine and session factory creation, schema
creation at startup, and a health-check helper. SQLite connections get
``PRAGMA foreign_keys=ON`` so alert references are enforced.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from cw_common.config import get_settings
from cw_common.db.orm_models import Base


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(dsn: str | None = None, echo: bool | None = None) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    Args:
        dsn: Database connection string.  Falls back to ``Settings.db_uri``.
        echo: Echo SQL.  Falls back to ``Settings.db_echo``.

    Returns:
        A configured ``AsyncEngine`` instance.
    """
    settings = get_settings()
    engine = create_async_engine(
        dsn or settings.db_uri,
        echo=settings.db_echo if echo is None else echo,
    )
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to *engine*.

    Args:
        engine: The async engine to bind sessions to.

    Returns:
        An ``async_sessionmaker`` that produces ``AsyncSession`` instances.
    """
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db(engine: AsyncEngine) -> None:
    """Create the ``rules``, ``calls`` and ``alerts`` tables if missing."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def check_database_health(engine: AsyncEngine) -> bool:
    """Execute a lightweight query to verify database connectivity.

    Returns:
        ``True`` if the database responds, ``False`` otherwise.
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception:  # noqa: BLE001 - health check must not raise
        return False
