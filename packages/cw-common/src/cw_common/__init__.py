"""
cw-common: Shared library for CallWatch.

Provides common data models, configuration management, database access,
error types, structured logging, and Prometheus metrics used by the
CallWatch services.
"""

from cw_common.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
