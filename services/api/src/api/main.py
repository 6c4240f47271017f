"""
FastAPI application entry point for CallWatch API gateway.

Creates and configures the FastAPI app, registers routers, middleware,
error handlers, and the startup/shutdown lifecycle, and exposes the
ASGI application.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app
from sqlalchemy.exc import SQLAlchemyError

from api.middleware.cors import add_cors
from api.middleware.logging import LoggingMiddleware
from api.routers import alerts, calls, health, rules
from cw_common.config import Settings, get_settings
from cw_common.db import build_engine, build_session_factory, init_db
from cw_common.errors import InternalError, ValidationError
from cw_common.logging import configure_logging
from ingestion import IdempotencyStore

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup / shutdown lifecycle."""
    settings: Settings = app.state.settings

    # ── Startup ──
    engine = build_engine(settings.db_uri, echo=settings.db_echo)
    await init_db(engine)
    app.state.db_engine = engine
    app.state.db_session_factory = build_session_factory(engine)
    app.state.idempotency = IdempotencyStore(ttl_seconds=settings.idempotency_ttl_seconds)
    logger.info("api_starting", db_dialect=engine.dialect.name)

    yield

    # ── Shutdown ──
    logger.info("api_stopping")
    await engine.dispose()


async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # InternalError is logged where it is raised; raw storage errors here.
    if not isinstance(exc, InternalError):
        logger.error(
            "unhandled_storage_error",
            path=request.url.path,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, json=settings.log_json)

    app = FastAPI(
        title="CallWatch API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ── Routers (under /api/v1 prefix) ──
    api_prefix = "/api/v1"
    app.include_router(calls.router, prefix=api_prefix)
    app.include_router(rules.router, prefix=api_prefix)
    app.include_router(alerts.router, prefix=api_prefix)

    # Health is mounted at root (no /api/v1 prefix).
    app.include_router(health.router)

    # Prometheus metrics endpoint
    app.mount("/metrics", make_asgi_app())

    # ── Error handlers ──
    app.add_exception_handler(ValidationError, _validation_error_handler)
    app.add_exception_handler(InternalError, _internal_error_handler)
    app.add_exception_handler(SQLAlchemyError, _internal_error_handler)

    # ── Middleware (applied outermost-first) ──
    app.add_middleware(LoggingMiddleware)
    add_cors(app)

    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn using the configured bind address."""
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
