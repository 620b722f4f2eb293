"""Post aggregate root.

Posts are the primary content type on the board. A repost is a post of
its own that points back at the post it was made from.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from anonboard.domain.model.common import DomainModel
from anonboard.domain.value import PostCategory, PostId, UserId

POST_CONTENT_MAX_LENGTH = 5000


class Post(DomainModel):
    """Post aggregate root.

    Counters are denormalized and only ever changed through atomic
    deltas in the repository, so they never go below zero.
    """

    id: PostId
    content: str = Field(min_length=1, max_length=POST_CONTENT_MAX_LENGTH)
    author_id: UserId
    category: PostCategory = PostCategory.GENERAL
    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    repost_count: int = Field(default=0, ge=0)
    is_repost: bool = False
    original_post_id: Optional[PostId] = None
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_repost_reference(self) -> "Post":
        """A post is a repost exactly when it references an original."""
        if self.is_repost and self.original_post_id is None:
            raise ValueError("Reposts must reference the original post")
        if not self.is_repost and self.original_post_id is not None:
            raise ValueError("Only reposts may reference an original post")
        return self
