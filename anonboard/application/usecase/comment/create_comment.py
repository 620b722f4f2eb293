"""Create comment use case."""

import logfire
from pydantic import BaseModel

from anonboard.application.usecase.base import CamelModel
from anonboard.application.usecase.comment.get_comments import CommentItem
from anonboard.domain.service import CommentService, PostService, UserService
from anonboard.domain.value import CommentId, PostCounter, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: PostId
    content: str
    author_id: UserId  # User ID from authenticated user
    parent_comment_id: CommentId | None = None  # Parent comment ID for replies


class CreateCommentResponse(CamelModel):
    """Create comment response."""

    message: str = "Comment added"
    comment: CommentItem


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to a top-level comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Validate and moderate content via comment service
        2. Verify post exists and is live via post service
        3. Create comment (comment service validates the parent if replying)
        4. Atomically increment the post's comment count

        Args:
            request: Create comment request

        Returns:
            Create comment response with comment details

        Raises:
            ValidationError: If content or parent is invalid
            ContentRejectedError: If content fails moderation
            NotFoundError: If the post or parent comment is missing
        """
        with logfire.span(
            "create_comment.execute",
            post_id=str(request.post_id),
            author_id=str(request.author_id),
        ):
            content = self.comment_service.prepare_content(request.content)

            await self.post_service.get_live_post(request.post_id)

            comment = await self.comment_service.create_comment(
                post_id=request.post_id,
                author_id=request.author_id,
                content=content,
                parent_comment_id=request.parent_comment_id,
            )

            await self.post_service.apply_counter_deltas(
                request.post_id, {PostCounter.COMMENT_COUNT: 1}
            )

            names = await self.user_service.get_display_names([comment.author_id])
            return CreateCommentResponse(
                comment=CommentItem(
                    id=str(comment.id),
                    content=comment.content,
                    author=names[comment.author_id],
                    likes=comment.likes,
                    created_at=comment.created_at,
                )
            )
