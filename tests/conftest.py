"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from anonboard.domain.model.comment import Comment
from anonboard.domain.model.post import Post
from anonboard.domain.value import CommentId, PostCategory, PostId, UserId

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def make_post(
    author_id: UserId | None = None,
    content: str = "Test post",
    minutes: int = 0,
    **overrides,
) -> Post:
    """Helper to build a post for repository seeding.

    Args:
        author_id: Author (random when omitted)
        content: Post content
        minutes: Offset from BASE_TIME, so tests control ordering
        **overrides: Any other Post field

    Returns:
        Post ready to be saved
    """
    fields = dict(
        id=PostId(uuid4()),
        content=content,
        author_id=author_id or UserId(uuid4()),
        category=PostCategory.GENERAL,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )
    fields.update(overrides)
    return Post(**fields)


def make_comment(
    post_id: PostId,
    author_id: UserId | None = None,
    content: str = "Test comment",
    parent_comment_id: CommentId | None = None,
    minutes: int = 0,
    **overrides,
) -> Comment:
    """Helper to build a comment or reply for repository seeding."""
    fields = dict(
        id=CommentId(uuid4()),
        post_id=post_id,
        author_id=author_id or UserId(uuid4()),
        content=content,
        parent_comment_id=parent_comment_id,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )
    fields.update(overrides)
    return Comment(**fields)
