"""Delete post use case."""

from pydantic import BaseModel

from anonboard.application.usecase.base import MessageResponse
from anonboard.domain.service import PostService
from anonboard.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    user_id: UserId
    post_id: PostId


class DeletePostUseCase:
    """Use case for soft-deleting one's own post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> MessageResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist or is already deleted
            NotAuthorizedError: If the user is not the author
        """
        await self.post_service.delete_post(request.user_id, request.post_id)
        return MessageResponse(message="Post deleted successfully")
