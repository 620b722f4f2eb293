"""Get comments use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from anonboard.application.usecase.base import CamelModel, total_pages
from anonboard.domain.model.comment import Comment
from anonboard.domain.service import CommentService, UserService
from anonboard.domain.value import PostId


class ReplyItem(CamelModel):
    """Reply in response."""

    id: str
    content: str
    author: str
    likes: int
    created_at: datetime


class CommentItem(ReplyItem):
    """Top-level comment in response, with its replies oldest-first."""

    replies: list[ReplyItem] = []


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: PostId
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class GetCommentsResponse(CamelModel):
    """Get comments response."""

    comments: list[CommentItem]
    current_page: int
    total_pages: int
    total: int  # Top-level comments only


def to_reply_item(comment: Comment, author: str) -> ReplyItem:
    return ReplyItem(
        id=str(comment.id),
        content=comment.content,
        author=author,
        likes=comment.likes,
        created_at=comment.created_at,
    )


class GetCommentsUseCase:
    """Use case for reading one page of a post's two-level comment thread."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            user_service: User service for author display names
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Top-level comments are paginated newest-first. Replies to the
        comments on the page are fetched in one batch and attached
        oldest-first. Replies whose parent was deleted are not reachable.

        Args:
            request: Get comments request with post ID and pagination

        Returns:
            One page of the comment thread
        """
        with logfire.span(
            "get_comments.execute",
            post_id=str(request.post_id),
            page=request.page,
            limit=request.limit,
        ):
            comments, total = await self.comment_service.get_top_level_comments(
                post_id=request.post_id,
                limit=request.limit,
                offset=(request.page - 1) * request.limit,
            )
            replies_by_parent = await self.comment_service.get_replies_by_parent(
                [comment.id for comment in comments]
            )

            author_ids = [comment.author_id for comment in comments]
            for replies in replies_by_parent.values():
                author_ids.extend(reply.author_id for reply in replies)
            names = await self.user_service.get_display_names(author_ids)

            comment_items = [
                CommentItem(
                    id=str(comment.id),
                    content=comment.content,
                    author=names[comment.author_id],
                    likes=comment.likes,
                    created_at=comment.created_at,
                    replies=[
                        to_reply_item(reply, names[reply.author_id])
                        for reply in replies_by_parent.get(comment.id, [])
                    ],
                )
                for comment in comments
            ]

            return GetCommentsResponse(
                comments=comment_items,
                current_page=request.page,
                total_pages=total_pages(total, request.limit),
                total=total,
            )
