"""
Alert API schemas for CallWatch.

Response wrapper for filtered alert listings.
"""

from __future__ import annotations

from cw_common.models import Alert
from cw_common.models.base import CamelModel


class AlertListResponse(CamelModel):
    alerts: list[Alert]
    total: int
