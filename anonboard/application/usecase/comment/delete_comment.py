"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from anonboard.application.usecase.base import MessageResponse
from anonboard.domain.service import CommentService, PostService
from anonboard.domain.value import CommentId, PostCounter, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    user_id: UserId
    comment_id: CommentId


class DeleteCommentUseCase:
    """Use case for soft-deleting one's own comment."""

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: DeleteCommentRequest) -> MessageResponse:
        """Execute delete comment flow.

        The post's comment count drops by one (never below zero). Replies
        of the deleted comment stay counted.

        Raises:
            NotFoundError: If the comment doesn't exist or is already deleted
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "delete_comment.execute",
            comment_id=str(request.comment_id),
            user_id=str(request.user_id),
        ):
            comment = await self.comment_service.delete_comment(
                request.user_id, request.comment_id
            )
            await self.post_service.apply_counter_deltas(
                comment.post_id, {PostCounter.COMMENT_COUNT: -1}
            )
            return MessageResponse(message="Comment deleted")
