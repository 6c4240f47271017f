"""
Keyword rule API schemas for CallWatch.

Pydantic request/response models for keyword rule management. Request
fields are kept loose so the rule store can report malformed keywords
with a single explanatory 400 response.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from cw_common.models import Rule
from cw_common.models.base import CamelModel


class RuleCreateRequest(CamelModel):
    name: Any = None
    keywords: Any = None
    enabled: bool = Field(default=True)


class RuleUpdateRequest(CamelModel):
    name: Any = None
    keywords: Any = None
    enabled: Any = None


class RuleListResponse(CamelModel):
    rules: list[Rule]
    total: int
