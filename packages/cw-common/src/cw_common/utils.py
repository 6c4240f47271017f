"""
Shared utility functions for CallWatch.

Entity id generation and timestamp formatting used by the stores.
"""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4


def new_id(kind: str) -> str:
    """Return a fresh id prefixed by the entity kind, e.g. ``rule_3f2a...``."""
    return f"{kind}_{uuid4().hex}"


def utc_now_iso() -> str:
    """Return the current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()
