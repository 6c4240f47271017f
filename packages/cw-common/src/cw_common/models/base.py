"""Common Pydantic configuration for CallWatch models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys (``ruleId``, ``createdAt``).

    Accepts both the alias and the Python field name on input and reads
    attributes straight off ORM rows.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
