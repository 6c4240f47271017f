"""
Alert and match models for CallWatch.

``RuleMatch`` is the pure output of the matching engine, ``AlertDraft``
is what the ingestion workflow hands to the alert store, and ``Alert``
is the persisted record.
"""

from __future__ import annotations

from pydantic import Field

from cw_common.models.base import CamelModel


class RuleMatch(CamelModel):
    """Keywords of one rule found in a transcript.

    Attributes:
        rule_id: Matching rule.
        matched_keywords: Matched keywords, in the rule's keyword order.
    """

    rule_id: str
    matched_keywords: list[str]


class AlertDraft(CamelModel):
    """An alert awaiting an id and creation timestamp."""

    rule_id: str
    call_id: str
    matched_keywords: list[str]


class Alert(CamelModel):
    """A stored alert linking a rule to a call.

    Attributes:
        id: Unique identifier (``alert_`` prefix).
        rule_id: Rule that matched.
        call_id: Call whose transcript matched.
        created_at: Server-assigned ISO-8601 UTC timestamp.
        matched_keywords: Keywords that triggered the alert.
    """

    id: str = Field(..., description="Unique identifier.")
    rule_id: str = Field(..., description="Rule that matched.")
    call_id: str = Field(..., description="Call whose transcript matched.")
    created_at: str = Field(..., description="Server-assigned creation timestamp.")
    matched_keywords: list[str] = Field(
        default_factory=list,
        description="Keywords that triggered the alert.",
    )
