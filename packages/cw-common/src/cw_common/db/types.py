"""
Column types for CallWatch.

Keyword lists and matched-keyword lists live in a single TEXT column
encoded as a JSON array of strings. ``encode_string_list`` and
``decode_string_list`` are the only serialisation boundary; the
``StringList`` type applies them on bind and on result.
"""

from __future__ import annotations

import json
from typing import Any

from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator


def encode_string_list(values: list[str]) -> str:
    """Encode an ordered list of strings as a JSON array.

    Raises:
        ValueError: If *values* is not a list of strings.
    """
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ValueError("expected a list of strings")
    return json.dumps(values, ensure_ascii=False)


def decode_string_list(raw: str) -> list[str]:
    """Decode a JSON array of strings written by :func:`encode_string_list`.

    Raises:
        ValueError: If *raw* is not a JSON array of strings.
    """
    try:
        values = json.loads(raw)
    except (TypeError, json.JSONDecodeError) as exc:
        raise ValueError(f"invalid string list: {raw!r}") from exc
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ValueError(f"invalid string list: {raw!r}")
    return values


class StringList(TypeDecorator):
    """Ordered ``list[str]`` stored as JSON text."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Any, dialect):  # type: ignore[override]
        if value is None:
            return None
        return encode_string_list(list(value))

    def process_result_value(self, value: Any, dialect):  # type: ignore[override]
        if value is None:
            return None
        return decode_string_list(value)
