"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from anonboard.domain.model import Comment, Post, Reaction, Report, User
from anonboard.domain.value import (
    CommentId,
    PostCategory,
    PostId,
    ReactionId,
    ReactionType,
    ReportId,
    ReportReason,
    UserId,
)


def _uuid(value: Any) -> UUID:
    """Coerce a UUID column value (driver may return str or UUID)."""
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        anonymous_username=row["anonymous_username"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    original_post_id = row.get("original_post_id")
    return Post(
        id=PostId(_uuid(row["id"])),
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        category=PostCategory(row["category"]),
        likes=row["likes"],
        dislikes=row["dislikes"],
        comment_count=row["comment_count"],
        repost_count=row["repost_count"],
        is_repost=row["is_repost"],
        original_post_id=PostId(_uuid(original_post_id)) if original_post_id else None,
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = post.model_dump()
    data["category"] = post.category.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_comment_id = row.get("parent_comment_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_comment_id=(
            CommentId(_uuid(parent_comment_id)) if parent_comment_id else None
        ),
        likes=row["likes"],
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_reaction(row: Dict[str, Any]) -> Reaction:
    """Convert database row to Reaction domain model."""
    return Reaction(
        id=ReactionId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        post_id=PostId(_uuid(row["post_id"])),
        type=ReactionType(row["type"]),
        created_at=row["created_at"],
    )


def reaction_to_dict(reaction: Reaction) -> Dict[str, Any]:
    """Convert Reaction domain model to database dict."""
    data = reaction.model_dump()
    data["type"] = reaction.type.value
    return data


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model."""
    post_id = row.get("post_id")
    comment_id = row.get("comment_id")
    return Report(
        id=ReportId(_uuid(row["id"])),
        reporter_id=UserId(_uuid(row["reporter_id"])),
        post_id=PostId(_uuid(post_id)) if post_id else None,
        comment_id=CommentId(_uuid(comment_id)) if comment_id else None,
        reason=ReportReason(row["reason"]),
        description=row["description"],
        created_at=row["created_at"],
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Convert Report domain model to database dict."""
    data = report.model_dump()
    data["reason"] = report.reason.value
    return data
