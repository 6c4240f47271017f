"""
Alert store for CallWatch.

Persists alerts to the ``alerts`` table with foreign-key references to
the matching rule and the triggering call, and serves filtered alert
listings.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cw_common.db.orm_models import AlertORM
from cw_common.models import Alert, AlertDraft
from cw_common.utils import new_id, utc_now_iso

logger = structlog.get_logger(__name__)


def _to_model(row: AlertORM) -> Alert:
    return Alert(
        id=row.id,
        rule_id=row.rule_id,
        call_id=row.call_id,
        created_at=row.created_at,
        matched_keywords=list(row.matched_keywords),
    )


class AlertStore:
    """Write and read access to alerts.

    Parameters
    ----------
    session:
        The ``AsyncSession`` used for every query.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create_alerts(
        self,
        drafts: Sequence[AlertDraft],
        *,
        created_at: str | None = None,
    ) -> list[Alert]:
        """Add one alert per draft to the current transaction.

        All alerts in the batch share one ``created_at`` timestamp. The
        caller commits; a referenced rule or call that does not exist
        fails the flush with an integrity error.
        """
        if not drafts:
            return []

        stamp = created_at or utc_now_iso()
        rows = [
            AlertORM(
                id=new_id("alert"),
                rule_id=draft.rule_id,
                call_id=draft.call_id,
                created_at=stamp,
                matched_keywords=list(draft.matched_keywords),
            )
            for draft in drafts
        ]
        self._session.add_all(rows)
        await self._session.flush()
        logger.info("alerts_created", count=len(rows), call_id=rows[0].call_id)
        return [_to_model(r) for r in rows]

    async def list_alerts(
        self,
        rule_id: str | None = None,
        call_id: str | None = None,
    ) -> list[Alert]:
        """Return alerts in insertion order, filtered by the given ids."""
        stmt = select(AlertORM).order_by(AlertORM.seq)
        if rule_id:
            stmt = stmt.where(AlertORM.rule_id == rule_id)
        if call_id:
            stmt = stmt.where(AlertORM.call_id == call_id)
        result = await self._session.execute(stmt)
        return [_to_model(r) for r in result.scalars().all()]

    async def get_alert(self, alert_id: str) -> Alert | None:
        """Return the alert with *alert_id*, or ``None``."""
        result = await self._session.execute(
            select(AlertORM).where(AlertORM.id == alert_id),
        )
        row = result.scalar_one_or_none()
        return _to_model(row) if row is not None else None
