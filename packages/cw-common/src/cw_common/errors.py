"""
Error taxonomy for CallWatch.

``ValidationError`` covers missing or malformed client input and is
surfaced as HTTP 400. ``InternalError`` wraps storage or unexpected
failures and is surfaced as a generic HTTP 500. A missing entity is not
an exception: stores return ``None`` and routers answer 404.
"""

from __future__ import annotations


class CallWatchError(Exception):
    """Base class for all CallWatch errors."""


class ValidationError(CallWatchError):
    """Client input is missing or malformed."""


class InternalError(CallWatchError):
    """Storage or unexpected failure; details are logged, not returned."""
