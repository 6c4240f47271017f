"""
Prometheus metrics helpers for CallWatch.

Shared metric definitions for the ingestion workflow and the API
gateway. Exposed by the API at ``/metrics``.
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram

# ── Ingestion ──
calls_ingested_total = Counter(
    "calls_ingested_total",
    "Total calls persisted by the ingestion workflow",
)
alerts_created_total = Counter(
    "alerts_created_total",
    "Total alerts persisted by the ingestion workflow",
)
idempotent_replays_total = Counter(
    "idempotent_replays_total",
    "Call submissions answered from a recorded idempotent result",
)
ingest_failures_total = Counter(
    "ingest_failures_total",
    "Call submissions that failed with a storage error",
)

# ── API ──
api_requests_total = Counter(
    "api_requests_total",
    "Total API requests received",
    ["method", "endpoint", "status"],
)
api_request_duration_seconds = Histogram(
    "api_request_duration_seconds",
    "API request latency in seconds",
    ["method", "endpoint"],
)
