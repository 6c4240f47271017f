"""
Shared Pydantic data models for CallWatch.

This package contains the cross-service data models for keyword rules,
ingested calls, and alerts.
"""

from cw_common.models.alert import Alert, AlertDraft, RuleMatch
from cw_common.models.call import Call, CallInput, IngestionResult
from cw_common.models.rule import Rule, RuleUpdate

__all__ = [
    "Alert",
    "AlertDraft",
    "Call",
    "CallInput",
    "IngestionResult",
    "Rule",
    "RuleMatch",
    "RuleUpdate",
]
