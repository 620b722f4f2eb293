"""Create post use case."""

import logfire
from pydantic import BaseModel

from anonboard.application.usecase.base import CamelModel
from anonboard.application.usecase.post.items import PostItem, PostItemAssembler
from anonboard.domain.service import PostService
from anonboard.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: UserId  # User ID from authenticated user
    content: str
    category: str | None = None


class CreatePostResponse(CamelModel):
    """Create post response."""

    message: str = "Post created successfully"
    post: PostItem


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(
        self, post_service: PostService, assembler: PostItemAssembler
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            assembler: Builds the returned post item
        """
        self.post_service = post_service
        self.assembler = assembler

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Validate and moderate content, pick category (via PostService)
        2. Save post
        3. Resolve the author's display name for the response

        Args:
            request: Create post request

        Returns:
            Create post response with post details

        Raises:
            ValidationError: If content is empty or too long
            ContentRejectedError: If content fails moderation
        """
        with logfire.span("create_post.execute", author_id=str(request.author_id)):
            post = await self.post_service.create_post(
                author_id=request.author_id,
                content=request.content,
                category=request.category,
            )
            [item] = await self.assembler.assemble([post])
            return CreatePostResponse(post=item)
