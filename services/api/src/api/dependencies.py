"""
FastAPI dependency injection providers for CallWatch API.

Defines reusable Depends() callables for database sessions, the stores
built on them, the process-scoped idempotency store, and the ingestion
workflow.
"""

from __future__ import annotations

from typing import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ingestion import IdempotencyStore, IngestionWorkflow
from storage import AlertStore, CallStore, RuleStore


async def get_db_session(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield an ``AsyncSession`` from the app-level session factory.

    The factory is stored on ``request.app.state.db_session_factory``
    during startup.
    """
    factory = request.app.state.db_session_factory
    session = factory()
    try:
        yield session
    finally:
        await session.close()


def get_idempotency_store(request: Request) -> IdempotencyStore:
    """Return the shared idempotency store from app state."""
    return request.app.state.idempotency


def get_rule_store(db: AsyncSession = Depends(get_db_session)) -> RuleStore:
    return RuleStore(db)


def get_call_store(db: AsyncSession = Depends(get_db_session)) -> CallStore:
    return CallStore(db)


def get_alert_store(db: AsyncSession = Depends(get_db_session)) -> AlertStore:
    return AlertStore(db)


def get_ingestion_workflow(
    db: AsyncSession = Depends(get_db_session),
    idempotency: IdempotencyStore = Depends(get_idempotency_store),
) -> IngestionWorkflow:
    return IngestionWorkflow(db, idempotency)
