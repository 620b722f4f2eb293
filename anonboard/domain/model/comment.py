"""Comment entity.

Threads are two levels deep: top-level comments on a post and direct
replies to those comments.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from anonboard.domain.model.common import DomainModel
from anonboard.domain.value import CommentId, PostId, UserId

COMMENT_CONTENT_MAX_LENGTH = 1000


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post, or a reply when parent_comment_id is set.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=COMMENT_CONTENT_MAX_LENGTH)
    parent_comment_id: Optional[CommentId] = None
    likes: int = Field(default=0, ge=0)
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_reply(self) -> bool:
        """Whether this comment answers another comment."""
        return self.parent_comment_id is not None
