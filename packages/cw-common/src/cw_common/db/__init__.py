"""
Database connection and ORM utilities for CallWatch.

This package provides async database connection management via
SQLAlchemy, the ORM table definitions, and the string-list column codec.
"""

from cw_common.db.connection import (
    build_engine,
    build_session_factory,
    check_database_health,
    init_db,
)
from cw_common.db.orm_models import AlertORM, Base, CallORM, RuleORM
from cw_common.db.types import StringList, decode_string_list, encode_string_list

__all__ = [
    "AlertORM",
    "Base",
    "CallORM",
    "RuleORM",
    "StringList",
    "build_engine",
    "build_session_factory",
    "check_database_health",
    "decode_string_list",
    "encode_string_list",
    "init_db",
]
