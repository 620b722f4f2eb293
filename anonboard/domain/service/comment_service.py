"""Comment domain service."""

from collections import defaultdict
from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from anonboard.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from anonboard.domain.model.comment import COMMENT_CONTENT_MAX_LENGTH, Comment
from anonboard.domain.repository import CommentRepository
from anonboard.domain.value import CommentId, PostId, UserId

from .base import Service
from .moderation import ContentPolicy


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, content_policy: ContentPolicy
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            content_policy: Moderation policy applied to new comments
        """
        self.comment_repository = comment_repository
        self.content_policy = content_policy

    def prepare_content(self, content: str) -> str:
        """Trim, length-check and moderate comment text.

        Args:
            content: Raw comment text

        Returns:
            The trimmed text

        Raises:
            ValidationError: If the text is empty or too long
            ContentRejectedError: If the text fails moderation
        """
        text = (content or "").strip()
        if not text:
            raise ValidationError("Content is required")
        if len(text) > COMMENT_CONTENT_MAX_LENGTH:
            raise ValidationError(
                f"Content too long (max {COMMENT_CONTENT_MAX_LENGTH} characters)"
            )
        self.content_policy.ensure_allowed(text, "comment")
        return text

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_comment_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or a reply to a top-level comment.

        The caller is responsible for checking that the post is live.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment text, already passed through prepare_content
            parent_comment_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the parent comment doesn't exist or is deleted
            ValidationError: If the parent is itself a reply or is on another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_comment_id=str(parent_comment_id) if parent_comment_id else None,
        ):
            if parent_comment_id:
                parent = await self.comment_repository.find_by_id(parent_comment_id)
                if not parent or parent.is_deleted:
                    logfire.warn(
                        "Parent comment not found",
                        parent_comment_id=str(parent_comment_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_comment_id))
                if parent.is_reply:
                    logfire.warn(
                        "Reply to a reply rejected",
                        parent_comment_id=str(parent_comment_id),
                    )
                    raise ValidationError("Cannot reply to a reply")
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_comment_id=str(parent_comment_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this post"
                    )

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=content,
                parent_comment_id=parent_comment_id,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                is_reply=saved.is_reply,
            )
            return saved

    async def get_top_level_comments(
        self, post_id: PostId, limit: int = 20, offset: int = 0
    ) -> tuple[list[Comment], int]:
        """Get one page of live top-level comments, newest-first.

        Args:
            post_id: Post ID
            limit: Page size
            offset: Number of comments to skip

        Returns:
            Tuple of (page of comments, total top-level comments)
        """
        with logfire.span(
            "comment_service.get_top_level_comments",
            post_id=str(post_id),
            limit=limit,
            offset=offset,
        ):
            total = await self.comment_repository.count_top_level(post_id)
            comments = await self.comment_repository.find_top_level(
                post_id=post_id, limit=limit, offset=offset
            )
            logfire.info(
                "Top-level comments retrieved",
                post_id=str(post_id),
                count=len(comments),
                total=total,
            )
            return comments, total

    async def get_replies_by_parent(
        self, parent_ids: Sequence[CommentId]
    ) -> dict[CommentId, list[Comment]]:
        """Get live replies grouped by parent, each group oldest-first.

        Args:
            parent_ids: IDs of the top-level comments

        Returns:
            Mapping of parent ID to its replies (parents without replies are absent)
        """
        if not parent_ids:
            return {}

        with logfire.span(
            "comment_service.get_replies_by_parent", parent_count=len(parent_ids)
        ):
            # Single batch query (avoid N+1)
            replies = await self.comment_repository.find_replies(parent_ids)

            grouped: dict[CommentId, list[Comment]] = defaultdict(list)
            for reply in replies:
                if reply.parent_comment_id is not None:
                    grouped[reply.parent_comment_id].append(reply)
            return dict(grouped)

    async def delete_comment(self, user_id: UserId, comment_id: CommentId) -> Comment:
        """Soft-delete a comment owned by the user.

        Replies of a deleted comment are left as they are.

        Args:
            user_id: User requesting the deletion
            comment_id: Comment ID

        Returns:
            The comment as it was before deletion

        Raises:
            NotFoundError: If the comment doesn't exist or is already deleted
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment or comment.is_deleted:
                logfire.warn("Comment not found for deletion", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if comment.author_id != user_id:
                logfire.warn(
                    "User attempted to delete comment they don't own",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))

            deleted = await self.comment_repository.soft_delete(comment_id)
            if not deleted:
                # Deleted concurrently by another request
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                post_id=str(comment.post_id),
            )
            return comment
