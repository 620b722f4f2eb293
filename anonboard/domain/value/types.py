"""Domain value objects for anonboard.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Optional

from anonboard.domain.value.common import ValueObject


class PostCounter(str, Enum):
    """Denormalized counters stored on a post.

    Values match the column names of the posts table.
    """

    LIKES = "likes"
    DISLIKES = "dislikes"
    COMMENT_COUNT = "comment_count"
    REPOST_COUNT = "repost_count"


class ReactionType(str, Enum):
    """Reaction a user can leave on a post."""

    LIKE = "like"
    DISLIKE = "dislike"

    @property
    def counter(self) -> PostCounter:
        """Post counter that tracks this reaction type."""
        if self is ReactionType.LIKE:
            return PostCounter.LIKES
        return PostCounter.DISLIKES


class PostCategory(str, Enum):
    """Topic a post is filed under."""

    POLITICS = "politics"
    GOVERNMENT = "government"
    EDUCATION = "education"
    SOCIAL = "social"
    GENERAL = "general"

    @classmethod
    def parse(cls, value: Optional[str]) -> "PostCategory":
        """Parse a category, falling back to GENERAL when unrecognised."""
        if value is None:
            return cls.GENERAL
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.GENERAL


class ReportReason(str, Enum):
    """Why a piece of content was reported."""

    SPAM = "spam"
    HARASSMENT = "harassment"
    HATE_SPEECH = "hate_speech"
    VIOLENCE = "violence"
    MISINFORMATION = "misinformation"
    OTHER = "other"


class ReactionChange(str, Enum):
    """What applying a reaction did to the user's reaction record."""

    ADDED = "added"
    REMOVED = "removed"
    UPDATED = "updated"
    UNCHANGED = "unchanged"  # lost a race with a concurrent request


class ReactionOutcome(ValueObject):
    """Post counters and the caller's reaction after a reaction is applied."""

    change: ReactionChange
    likes: int
    dislikes: int
    user_reaction: Optional[ReactionType] = None
