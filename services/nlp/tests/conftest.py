"""Shared fixtures for keyword engine tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from cw_common.models import Rule


@pytest.fixture()
def make_rule() -> Callable[..., Rule]:
    """Factory for ``Rule`` objects with sequential ids."""
    counter = {"n": 0}

    def _make(*keywords: str, name: str = "test_rule", enabled: bool = True) -> Rule:
        counter["n"] += 1
        return Rule(
            id=f"rule_{counter['n']}",
            name=name,
            keywords=list(keywords),
            enabled=enabled,
        )

    return _make
