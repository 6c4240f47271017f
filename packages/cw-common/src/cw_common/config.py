"""
Environment-based configuration management for CallWatch.

Uses pydantic-settings to load configuration values from environment
variables and .env files. All services import their settings from this
module to ensure consistent configuration handling.

All environment variables are prefixed with ``CW_`` to avoid collisions.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from ``CW_``-prefixed environment variables.

    Attributes:
        db_uri: Async SQLAlchemy connection string.
        db_echo: Whether SQLAlchemy echoes emitted SQL.
        api_host: Bind address for the API gateway.
        api_port: Bind port for the API gateway.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_json: Render log lines as JSON (console renderer otherwise).
        idempotency_ttl_seconds: Lifetime of a recorded idempotent result.
            ``None`` keeps results for the life of the process.
    """

    model_config = SettingsConfigDict(
        env_prefix="CW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Database ──
    db_uri: str = Field(
        default="sqlite+aiosqlite:///./database.db",
        description="Async SQLAlchemy connection string.",
    )
    db_echo: bool = Field(default=False, description="Echo emitted SQL.")

    # ── API ──
    api_host: str = Field(default="0.0.0.0", description="API gateway bind address.")
    api_port: int = Field(default=3000, ge=1, le=65535, description="API gateway bind port.")

    # ── Logging ──
    log_level: str = Field(default="INFO", description="Logging level.")
    log_json: bool = Field(default=True, description="Render log lines as JSON.")

    # ── Idempotency ──
    idempotency_ttl_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Seconds an idempotent result is kept (None = process lifetime).",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached application settings singleton.

    Returns:
        The global ``Settings`` instance.
    """
    return Settings()
