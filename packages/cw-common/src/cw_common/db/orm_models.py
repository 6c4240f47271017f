"""
SQLAlchemy ORM models for CallWatch.

Defines the ``rules``, ``calls`` and ``alerts`` tables using SQLAlchemy
2.0 declarative style with ``mapped_column``. Alerts reference rules and
calls by id.
"""

from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from cw_common.db.types import StringList


# ── Base class ──


class Base(DeclarativeBase):
    """Declarative base for all CallWatch ORM models."""


# ── ORM models ──


class RuleORM(Base):
    """ORM model for the ``rules`` table."""

    __tablename__ = "rules"

    # Insertion order for listings; ids are random.
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    keywords: Mapped[list[str]] = mapped_column(StringList, nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class CallORM(Base):
    """ORM model for the ``calls`` table."""

    __tablename__ = "calls"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    timestamp: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(Text, nullable=False)
    transcript: Mapped[str] = mapped_column(Text, nullable=False)


class AlertORM(Base):
    """ORM model for the ``alerts`` table."""

    __tablename__ = "alerts"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    rule_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("rules.id"), nullable=False, index=True,
    )
    call_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("calls.id"), nullable=False, index=True,
    )
    created_at: Mapped[str] = mapped_column(Text, nullable=False)
    matched_keywords: Mapped[list[str]] = mapped_column(StringList, nullable=False)
