"""
Request logging middleware for CallWatch API.

Logs all incoming requests and responses with structured JSON format,
including latency and status codes, and records the request counter
and latency histogram.
"""

from __future__ import annotations

import time

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from cw_common.metrics import api_request_duration_seconds, api_requests_total

logger = structlog.get_logger(__name__)

# Metric label for requests that matched no route.
UNMATCHED_ENDPOINT = "unmatched"


def _endpoint(request: Request) -> str:
    """Route template (``/api/v1/rules/{rule_id}``), or ``unmatched``."""
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ENDPOINT)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log every HTTP request with method, path, status, and latency."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration = time.monotonic() - start
        endpoint = _endpoint(request)

        api_requests_total.labels(
            method=request.method, endpoint=endpoint, status=str(response.status_code),
        ).inc()
        api_request_duration_seconds.labels(
            method=request.method, endpoint=endpoint,
        ).observe(duration)
        logger.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round(duration * 1000, 2),
        )
        return response
