"""
Alert retrieval API router for CallWatch.

Endpoints for listing alerts filtered by rule and/or call, and for
retrieving a single alert.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_alert_store
from api.schemas.alert_schemas import AlertListResponse
from cw_common.models import Alert
from storage import AlertStore

router = APIRouter(prefix="/alerts", tags=["alerts"])


@router.get("", response_model=AlertListResponse)
async def list_alerts(
    rule_id: Optional[str] = Query(None, alias="ruleId"),
    call_id: Optional[str] = Query(None, alias="callId"),
    store: AlertStore = Depends(get_alert_store),
) -> AlertListResponse:
    alerts = await store.list_alerts(rule_id=rule_id, call_id=call_id)
    return AlertListResponse(alerts=alerts, total=len(alerts))


@router.get("/{alert_id}", response_model=Alert)
async def get_alert(
    alert_id: str,
    store: AlertStore = Depends(get_alert_store),
) -> Alert:
    alert = await store.get_alert(alert_id)
    if alert is None:
        raise HTTPException(status_code=404, detail="Alert not found")
    return alert
