"""
CallWatch storage layer.

Stores for keyword rules, ingested calls, and alerts, all backed by the
relational tables defined in ``cw_common.db``.
"""

from storage.alert_store import AlertStore
from storage.call_store import CallStore
from storage.rule_store import RuleStore

__version__ = "0.1.0"

__all__ = ["AlertStore", "CallStore", "RuleStore"]
