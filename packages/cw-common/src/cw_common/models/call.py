"""
Call models for CallWatch.

Defines the inbound ``CallInput`` payload, the stored ``Call`` record,
and the ``IngestionResult`` returned by the ingestion workflow.
"""

from __future__ import annotations

from pydantic import Field

from cw_common.models.alert import Alert
from cw_common.models.base import CamelModel


class CallInput(CamelModel):
    """A call submission before validation.

    Every field is optional here so that missing fields are reported by
    the ingestion workflow with a single explanatory message.
    """

    timestamp: str | None = None
    phone: str | None = None
    location: str | None = None
    transcript: str | None = None


class Call(CamelModel):
    """An ingested call record.

    Attributes:
        id: Unique identifier (``call_`` prefix).
        timestamp: Caller-supplied timestamp, stored verbatim.
        phone: Caller phone number.
        location: Caller location.
        transcript: Call transcript text.
    """

    id: str = Field(..., description="Unique identifier.")
    timestamp: str = Field(..., description="Caller-supplied timestamp.")
    phone: str = Field(..., description="Caller phone number.")
    location: str = Field(..., description="Caller location.")
    transcript: str = Field(..., description="Call transcript text.")


class IngestionResult(CamelModel):
    """The call stored by one ingestion plus the alerts it raised."""

    call: Call
    alerts: list[Alert] = Field(default_factory=list)
