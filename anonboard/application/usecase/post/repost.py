"""Repost use case."""

import logfire
from pydantic import BaseModel

from anonboard.application.usecase.base import CamelModel
from anonboard.application.usecase.post.items import PostItem, PostItemAssembler
from anonboard.domain.service import PostService
from anonboard.domain.value import PostId, UserId


class RepostRequest(BaseModel):
    """Repost request."""

    user_id: UserId
    post_id: PostId  # Post being reposted


class RepostResponse(CamelModel):
    """Repost response."""

    message: str = "Reposted successfully"
    post: PostItem


class RepostUseCase:
    """Use case for reposting an existing post."""

    def __init__(
        self, post_service: PostService, assembler: PostItemAssembler
    ) -> None:
        """Initialize repost use case.

        Args:
            post_service: Post domain service
            assembler: Builds the returned post item
        """
        self.post_service = post_service
        self.assembler = assembler

    async def execute(self, request: RepostRequest) -> RepostResponse:
        """Execute repost flow.

        Raises:
            NotFoundError: If the source post doesn't exist or is deleted
        """
        with logfire.span(
            "repost.execute",
            post_id=str(request.post_id),
            user_id=str(request.user_id),
        ):
            repost = await self.post_service.repost(request.user_id, request.post_id)
            [item] = await self.assembler.assemble([repost], viewer_id=request.user_id)
            return RepostResponse(post=item)
