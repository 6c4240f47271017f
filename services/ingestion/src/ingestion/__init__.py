"""
CallWatch Ingestion Workflow.

Stores submitted calls, matches their transcripts against enabled
keyword rules, and records the resulting alerts, with process-scoped
idempotent replay of repeated submissions.
"""

from __future__ import annotations

from ingestion.idempotency import IdempotencyStore
from ingestion.workflow import IngestionWorkflow, validate_call_input

__all__ = [
    "IdempotencyStore",
    "IngestionWorkflow",
    "validate_call_input",
]
