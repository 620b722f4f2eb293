"""In-memory comment repository for testing."""

from itertools import count
from typing import Optional, Sequence

from anonboard.domain.model.comment import Comment
from anonboard.domain.repository.comment import CommentRepository
from anonboard.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._sequence: dict[CommentId, int] = {}
        self._counter = count()

    def _order_key(self, comment: Comment) -> tuple:
        return (comment.created_at, self._sequence[comment.id])

    def _top_level_of(self, post_id: PostId) -> list[Comment]:
        return [
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.parent_comment_id is None and not c.is_deleted
        ]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_top_level(
        self,
        post_id: PostId,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find live top-level comments of a post, newest-first."""
        comments = self._top_level_of(post_id)
        comments.sort(key=self._order_key, reverse=True)
        return comments[offset : offset + limit]

    async def count_top_level(self, post_id: PostId) -> int:
        """Count live top-level comments of a post."""
        return len(self._top_level_of(post_id))

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> list[Comment]:
        """Find live replies to the given comments, oldest-first."""
        wanted = set(parent_ids)
        replies = [
            c
            for c in self._comments.values()
            if c.parent_comment_id in wanted and not c.is_deleted
        ]
        replies.sort(key=self._order_key)
        return replies

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        if comment.id not in self._sequence:
            self._sequence[comment.id] = next(self._counter)
        self._comments[comment.id] = comment
        return comment

    async def soft_delete(self, comment_id: CommentId) -> bool:
        """Mark a live comment as deleted."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return False
        self._comments[comment_id] = comment.model_copy(update={"is_deleted": True})
        return True
