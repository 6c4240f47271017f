"""
CORS middleware configuration for CallWatch API.

Configures Cross-Origin Resource Sharing headers so browser dashboards
can call the API.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


def add_cors(app: FastAPI) -> None:
    """Attach CORS middleware allowing all origins."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Idempotent-Replay"],
    )
