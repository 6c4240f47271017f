"""
Call store for CallWatch.

Persists ingested calls to the ``calls`` table. ``save_call`` only
flushes: the ingestion workflow commits the call together with the
alerts it raises.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cw_common.db.orm_models import CallORM
from cw_common.models import Call, CallInput
from cw_common.utils import new_id


def _to_model(row: CallORM) -> Call:
    return Call(
        id=row.id,
        timestamp=row.timestamp,
        phone=row.phone,
        location=row.location,
        transcript=row.transcript,
    )


class CallStore:
    """Write and read access to ingested calls.

    Parameters
    ----------
    session:
        The ``AsyncSession`` used for every query.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save_call(self, data: CallInput) -> Call:
        """Assign an id to *data* and add it to the current transaction.

        *data* is expected to be validated already; every field must be set.
        """
        row = CallORM(
            id=new_id("call"),
            timestamp=data.timestamp,
            phone=data.phone,
            location=data.location,
            transcript=data.transcript,
        )
        self._session.add(row)
        await self._session.flush()
        return _to_model(row)

    async def get_call(self, call_id: str) -> Call | None:
        """Return the call with *call_id*, or ``None``."""
        result = await self._session.execute(
            select(CallORM).where(CallORM.id == call_id),
        )
        row = result.scalar_one_or_none()
        return _to_model(row) if row is not None else None

    async def list_calls(self) -> list[Call]:
        """Return all calls in insertion order."""
        result = await self._session.execute(select(CallORM).order_by(CallORM.seq))
        return [_to_model(r) for r in result.scalars().all()]
