"""Shared response types for use cases."""

import math

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    """Response carrying only a human-readable message."""

    message: str


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed to show total items, limit per page."""
    return math.ceil(total / limit) if limit else 0
