"""Shared fixtures for API gateway tests.

Each test gets a fresh application bound to its own SQLite database
file; entering the ``TestClient`` context runs the startup lifecycle,
which creates the schema and the idempotency store.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.main import create_app
from cw_common.config import Settings


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        db_uri=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        log_json=False,
    )


@pytest.fixture()
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def create_rule(client: TestClient):
    """Create a rule through the API and return its JSON body."""

    def _create(name: str = "distress", keywords=None, enabled: bool = True) -> dict:
        resp = client.post(
            "/api/v1/rules",
            json={
                "name": name,
                "keywords": keywords if keywords is not None else ["help", "emergency"],
                "enabled": enabled,
            },
        )
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create


@pytest.fixture()
def call_payload() -> dict[str, str]:
    return {
        "timestamp": "2025-01-01T10:00:00Z",
        "phone": "555-0100",
        "location": "Springfield",
        "transcript": "please send help now",
    }
