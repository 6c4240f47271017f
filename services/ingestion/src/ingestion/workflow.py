"""
Call ingestion workflow for CallWatch.

Validates a call submission, persists the call, matches its transcript
against every enabled rule, and persists one alert per matching rule.
The call and its alerts are written in a single transaction: a storage
failure rolls all of them back and surfaces as ``InternalError``.
"""

from __future__ import annotations

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cw_common.errors import InternalError, ValidationError
from cw_common.metrics import (
    alerts_created_total,
    calls_ingested_total,
    idempotent_replays_total,
    ingest_failures_total,
)
from cw_common.models import AlertDraft, CallInput, IngestionResult
from nlp.keyword_engine import KeywordEngine
from storage import AlertStore, CallStore, RuleStore

from ingestion.idempotency import IdempotencyStore

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS: tuple[str, ...] = ("timestamp", "phone", "location", "transcript")


def validate_call_input(data: CallInput) -> CallInput:
    """Ensure every required call field is a non-blank string.

    Raises:
        ValidationError: Naming every missing field.
    """
    missing = [
        name
        for name in REQUIRED_FIELDS
        if not isinstance(getattr(data, name), str) or not getattr(data, name).strip()
    ]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")
    return data


class IngestionWorkflow:
    """Orchestrates call persistence, matching, and alert persistence.

    Args:
        session: Request-scoped ``AsyncSession``.
        idempotency: Process-scoped store of recorded results.
        engine: Keyword engine; a default instance is used when omitted.
    """

    def __init__(
        self,
        session: AsyncSession,
        idempotency: IdempotencyStore,
        engine: KeywordEngine | None = None,
    ) -> None:
        self._session = session
        self._idempotency = idempotency
        self._engine = engine or KeywordEngine()

    async def ingest(
        self,
        call_input: CallInput,
        idempotency_key: str | None = None,
    ) -> IngestionResult:
        """Ingest one call and return it with the alerts it raised."""
        result, _ = await self.execute(call_input, idempotency_key)
        return result

    async def execute(
        self,
        call_input: CallInput,
        idempotency_key: str | None = None,
    ) -> tuple[IngestionResult, bool]:
        """Ingest one call, reporting whether the result was replayed.

        Raises:
            ValidationError: If a required field is missing or blank.
            InternalError: If persisting the call or its alerts fails.
        """
        validate_call_input(call_input)

        if not idempotency_key:
            return await self._process(call_input), False

        result, replayed = await self._idempotency.run(
            idempotency_key,
            lambda: self._process(call_input),
        )
        if replayed:
            idempotent_replays_total.inc()
        return result, replayed

    async def _process(self, call_input: CallInput) -> IngestionResult:
        try:
            call = await CallStore(self._session).save_call(call_input)
            rules = await RuleStore(self._session).list(only_enabled=True)
            matches = self._engine.detect(call.transcript, rules)
            alerts = await AlertStore(self._session).create_alerts(
                [
                    AlertDraft(
                        rule_id=m.rule_id,
                        call_id=call.id,
                        matched_keywords=m.matched_keywords,
                    )
                    for m in matches
                ],
            )
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            ingest_failures_total.inc()
            logger.exception("call_ingest_failed")
            raise InternalError("failed to persist call") from exc

        calls_ingested_total.inc()
        alerts_created_total.inc(len(alerts))
        logger.info("call_ingested", call_id=call.id, alert_count=len(alerts))
        return IngestionResult(call=call, alerts=alerts)
