"""
Keyword rule management API router for CallWatch.

Endpoints for creating, listing, reading, partially updating, and
toggling keyword rules. Rules are never deleted.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_rule_store
from api.schemas.rule_schemas import (
    RuleCreateRequest,
    RuleListResponse,
    RuleUpdateRequest,
)
from cw_common.errors import ValidationError
from cw_common.models import Rule, RuleUpdate
from storage import RuleStore

router = APIRouter(prefix="/rules", tags=["rules"])


@router.post("", status_code=201, response_model=Rule)
async def create_rule(
    body: RuleCreateRequest,
    store: RuleStore = Depends(get_rule_store),
) -> Rule:
    return await store.create(body.name, body.keywords, enabled=body.enabled)


@router.get("", response_model=RuleListResponse)
async def list_rules(
    enabled: str | None = Query(default=None, description="``true`` returns only enabled rules."),
    store: RuleStore = Depends(get_rule_store),
) -> RuleListResponse:
    rules = await store.list(only_enabled=enabled == "true")
    return RuleListResponse(rules=rules, total=len(rules))


@router.get("/{rule_id}", response_model=Rule)
async def get_rule(
    rule_id: str,
    store: RuleStore = Depends(get_rule_store),
) -> Rule:
    rule = await store.get(rule_id)
    if rule is None:
        raise HTTPException(status_code=404, detail="Rule not found")
    return rule


@router.patch("/{rule_id}", response_model=Rule)
async def update_rule(
    rule_id: str,
    body: RuleUpdateRequest,
    store: RuleStore = Depends(get_rule_store),
) -> Rule:
    if not body.model_fields_set:
        raise ValidationError("No fields to update")

    rule = await store.update(rule_id, RuleUpdate(**body.model_dump(exclude_unset=True)))
    if rule is None:
        raise HTTPException(status_code=404, detail="Rule not found")
    return rule


@router.post("/{rule_id}/toggle", response_model=Rule)
async def toggle_rule(
    rule_id: str,
    store: RuleStore = Depends(get_rule_store),
) -> Rule:
    rule = await store.toggle(rule_id)
    if rule is None:
        raise HTTPException(status_code=404, detail="Rule not found")
    return rule
