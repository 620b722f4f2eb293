"""Get post use case."""

import logfire
from pydantic import BaseModel

from anonboard.application.usecase.base import CamelModel
from anonboard.application.usecase.post.items import PostItem, PostItemAssembler
from anonboard.domain.service import PostService
from anonboard.domain.value import PostId, UserId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: PostId
    user_id: UserId | None = None  # Current user ID (if authenticated)


class GetPostResponse(CamelModel):
    """Get post response."""

    post: PostItem


class GetPostUseCase:
    """Use case for reading a single live post."""

    def __init__(
        self, post_service: PostService, assembler: PostItemAssembler
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            assembler: Builds post items with author names and reactions
        """
        self.post_service = post_service
        self.assembler = assembler

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Args:
            request: Get post request

        Returns:
            The post with its author and the reader's reaction

        Raises:
            NotFoundError: If the post doesn't exist or is deleted
        """
        with logfire.span("get_post.execute", post_id=str(request.post_id)):
            post = await self.post_service.get_live_post(request.post_id)
            [item] = await self.assembler.assemble([post], viewer_id=request.user_id)
            return GetPostResponse(post=item)
