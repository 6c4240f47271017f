"""
Call submission API router for CallWatch.

``POST /calls`` runs the ingestion workflow: the call is stored,
matched against enabled rules, and any alerts are recorded. An
``Idempotency-Key`` header makes resubmission safe within the process
lifetime; replays carry ``Idempotent-Replay: true``.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, HTTPException, Response

from api.dependencies import get_call_store, get_ingestion_workflow
from api.schemas.call_schemas import CallListResponse
from cw_common.models import Call, CallInput, IngestionResult
from ingestion import IngestionWorkflow
from storage import CallStore

router = APIRouter(prefix="/calls", tags=["calls"])


@router.post("", status_code=201, response_model=IngestionResult)
async def submit_call(
    body: CallInput,
    response: Response,
    idempotency_key: str | None = Header(default=None),
    workflow: IngestionWorkflow = Depends(get_ingestion_workflow),
) -> IngestionResult:
    result, replayed = await workflow.execute(body, idempotency_key)
    if replayed:
        response.headers["Idempotent-Replay"] = "true"
    return result


@router.get("", response_model=CallListResponse)
async def list_calls(
    store: CallStore = Depends(get_call_store),
) -> CallListResponse:
    calls = await store.list_calls()
    return CallListResponse(calls=calls, total=len(calls))


@router.get("/{call_id}", response_model=Call)
async def get_call(
    call_id: str,
    store: CallStore = Depends(get_call_store),
) -> Call:
    call = await store.get_call(call_id)
    if call is None:
        raise HTTPException(status_code=404, detail="Call not found")
    return call
