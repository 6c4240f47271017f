"""
Integration test fixtures for CallWatch.

Runs the full API application (startup lifecycle included) against a
disposable SQLite database file.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from cw_common.config import Settings


@pytest.fixture()
def api_client(tmp_path: Path) -> Iterator[TestClient]:
    settings = Settings(
        _env_file=None,
        db_uri=f"sqlite+aiosqlite:///{tmp_path / 'integration.db'}",
        log_json=False,
    )
    with TestClient(create_app(settings)) as client:
        yield client
