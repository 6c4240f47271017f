"""
Call API schemas for CallWatch.

Response wrapper for call listings. Submission uses ``CallInput`` and
returns ``IngestionResult`` from ``cw_common.models`` directly.
"""

from __future__ import annotations

from cw_common.models import Call
from cw_common.models.base import CamelModel


class CallListResponse(CamelModel):
    calls: list[Call]
    total: int
