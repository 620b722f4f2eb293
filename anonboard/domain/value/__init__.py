"""Domain value objects for anonboard."""

from anonboard.domain.value.identifiers import (
    CommentId,
    PostId,
    ReactionId,
    ReportId,
    UserId,
)
from anonboard.domain.value.types import (
    PostCategory,
    PostCounter,
    ReactionChange,
    ReactionOutcome,
    ReactionType,
    ReportReason,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "ReactionId",
    "ReportId",
    # Types
    "PostCategory",
    "PostCounter",
    "ReactionType",
    "ReactionChange",
    "ReactionOutcome",
    "ReportReason",
]
