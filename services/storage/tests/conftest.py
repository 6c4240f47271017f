"""Shared fixtures for storage tests.

Every test gets its own SQLite database file with the CallWatch schema.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from cw_common.db import build_engine, build_session_factory, init_db


@pytest.fixture()
async def db_engine(tmp_path: Path) -> AsyncIterator[AsyncEngine]:
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'storage.db'}", echo=False)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture()
async def db_session(db_engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    factory = build_session_factory(db_engine)
    async with factory() as session:
        yield session


@pytest.fixture()
def session_factory(db_engine: AsyncEngine):
    return build_session_factory(db_engine)
