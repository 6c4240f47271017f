"""
Keyword rule store for CallWatch.

Persists rules to the ``rules`` table and maps rows back to the shared
``Rule`` model. Mutating operations commit their own transaction; an
unknown rule id is reported as ``None``.
"""

from __future__ import annotations

from typing import Any

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cw_common.db.orm_models import RuleORM
from cw_common.errors import ValidationError
from cw_common.models import Rule, RuleUpdate
from cw_common.utils import new_id

logger = structlog.get_logger(__name__)


def validate_name(name: Any) -> str:
    """Return *name* stripped, or raise if it is not a non-blank string."""
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("name must be a non-empty string")
    return name.strip()


def validate_keywords(keywords: Any) -> list[str]:
    """Return *keywords* stripped, or raise if any entry is unusable.

    A valid keyword list is a non-empty list whose entries are all
    non-blank strings.
    """
    if not isinstance(keywords, list) or not keywords:
        raise ValidationError("keywords must be a non-empty array of strings")
    cleaned: list[str] = []
    for keyword in keywords:
        if not isinstance(keyword, str) or not keyword.strip():
            raise ValidationError("keywords must contain only non-empty strings")
        cleaned.append(keyword.strip())
    return cleaned


def _to_model(row: RuleORM) -> Rule:
    return Rule(
        id=row.id,
        name=row.name,
        keywords=list(row.keywords),
        enabled=bool(row.enabled),
    )


class RuleStore:
    """CRUD access to keyword rules.

    Parameters
    ----------
    session:
        The ``AsyncSession`` used for every query.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _get_row(self, rule_id: str) -> RuleORM | None:
        result = await self._session.execute(
            select(RuleORM).where(RuleORM.id == rule_id),
        )
        return result.scalar_one_or_none()

    async def create(self, name: Any, keywords: Any, enabled: bool = True) -> Rule:
        """Validate and persist a new rule.

        Raises:
            ValidationError: If *name* is blank or *keywords* is not a
                non-empty list of non-blank strings.
        """
        row = RuleORM(
            id=new_id("rule"),
            name=validate_name(name),
            keywords=validate_keywords(keywords),
            enabled=bool(enabled),
        )
        self._session.add(row)
        await self._session.commit()
        logger.info("rule_created", rule_id=row.id, keywords=len(row.keywords))
        return _to_model(row)

    async def get(self, rule_id: str) -> Rule | None:
        """Return the rule with *rule_id*, or ``None``."""
        row = await self._get_row(rule_id)
        return _to_model(row) if row is not None else None

    async def list(self, only_enabled: bool = False) -> list[Rule]:
        """Return all rules, or only enabled ones, in insertion order."""
        stmt = select(RuleORM).order_by(RuleORM.seq)
        if only_enabled:
            stmt = stmt.where(RuleORM.enabled.is_(True))
        result = await self._session.execute(stmt)
        return [_to_model(r) for r in result.scalars().all()]

    async def update(self, rule_id: str, update: RuleUpdate) -> Rule | None:
        """Apply the fields set on *update* to the rule.

        Fields left unset are not touched; an update with no fields set
        returns the rule unchanged.

        Raises:
            ValidationError: If any supplied field is invalid. Nothing is
                applied in that case.
        """
        row = await self._get_row(rule_id)
        if row is None:
            return None

        changes = update.changes()
        if not changes:
            return _to_model(row)

        fields: dict[str, Any] = {}
        if "name" in changes:
            fields["name"] = validate_name(changes["name"])
        if "keywords" in changes:
            fields["keywords"] = validate_keywords(changes["keywords"])
        if "enabled" in changes:
            if not isinstance(changes["enabled"], bool):
                raise ValidationError("enabled must be a boolean")
            fields["enabled"] = changes["enabled"]

        for attr, value in fields.items():
            setattr(row, attr, value)
        await self._session.commit()

        logger.info("rule_updated", rule_id=rule_id, fields=sorted(changes))
        return _to_model(row)

    async def toggle(self, rule_id: str) -> Rule | None:
        """Flip the rule's ``enabled`` flag."""
        row = await self._get_row(rule_id)
        if row is None:
            return None
        row.enabled = not row.enabled
        await self._session.commit()
        logger.info("rule_toggled", rule_id=rule_id, enabled=row.enabled)
        return _to_model(row)
