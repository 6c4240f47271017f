"""
Keyword rule models for CallWatch.

Defines the stored ``Rule`` and the ``RuleUpdate`` record of optional
fields used for partial updates.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from cw_common.models.base import CamelModel


class Rule(CamelModel):
    """A named, toggleable set of keywords used to flag calls.

    Attributes:
        id: Unique identifier (``rule_`` prefix).
        name: Human-readable rule name.
        keywords: Case-insensitive match terms, in match-report order.
        enabled: Whether this rule participates in matching.
    """

    id: str = Field(..., description="Unique identifier.")
    name: str = Field(..., description="Human-readable rule name.")
    keywords: list[str] = Field(default_factory=list, description="Match terms.")
    enabled: bool = Field(default=True, description="Whether this rule is active.")


class RuleUpdate(CamelModel):
    """Partial update for a rule. Only fields explicitly set are applied.

    Values are checked by the rule store, which reports bad input as a
    ``ValidationError``.
    """

    name: Any = None
    keywords: Any = None
    enabled: Any = None

    def changes(self) -> dict[str, object]:
        """Return the explicitly supplied fields, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)
