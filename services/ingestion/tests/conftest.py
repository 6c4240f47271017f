"""Shared fixtures for ingestion workflow tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from cw_common.db import build_engine, build_session_factory, init_db
from cw_common.models import CallInput
from ingestion import IdempotencyStore


@pytest.fixture()
async def db_engine(tmp_path: Path) -> AsyncIterator[AsyncEngine]:
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'ingestion.db'}", echo=False)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture()
def session_factory(db_engine: AsyncEngine):
    return build_session_factory(db_engine)


@pytest.fixture()
async def db_session(session_factory) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest.fixture()
def idempotency() -> IdempotencyStore:
    return IdempotencyStore()


@pytest.fixture()
def call_input() -> CallInput:
    return CallInput(
        timestamp="2025-01-01T10:00:00Z",
        phone="555-0100",
        location="Springfield",
        transcript="please send help now",
    )
