"""List posts use case."""

import logfire
from pydantic import BaseModel, Field

from anonboard.application.usecase.base import CamelModel, total_pages
from anonboard.application.usecase.post.items import PostItem, PostItemAssembler
from anonboard.domain.error import ValidationError
from anonboard.domain.service import PostService
from anonboard.domain.value import PostCategory, UserId

ALL_CATEGORIES = "all"


class ListPostsRequest(BaseModel):
    """List posts request."""

    category: str | None = None  # "all" or omitted means no filter
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)
    user_id: UserId | None = None  # Current user ID (if authenticated)


class ListPostsResponse(CamelModel):
    """List posts response."""

    posts: list[PostItem]
    current_page: int
    total_pages: int
    total: int


class ListPostsUseCase:
    """Use case for the newest-first post feed."""

    def __init__(
        self, post_service: PostService, assembler: PostItemAssembler
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            assembler: Builds post items with author names and reactions
        """
        self.post_service = post_service
        self.assembler = assembler

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request with filters and pagination

        Returns:
            One page of posts

        Raises:
            ValidationError: If the category is not recognised
        """
        with logfire.span(
            "list_posts.execute",
            category=request.category,
            page=request.page,
            limit=request.limit,
        ):
            category = None
            requested = (request.category or "").strip().lower()
            if requested and requested != ALL_CATEGORIES:
                try:
                    category = PostCategory(requested)
                except ValueError:
                    raise ValidationError(f"Invalid category: {request.category}")

            posts, total = await self.post_service.list_posts(
                category=category,
                limit=request.limit,
                offset=(request.page - 1) * request.limit,
            )

            # Batch lookups to avoid N+1
            items = await self.assembler.assemble(posts, viewer_id=request.user_id)

            return ListPostsResponse(
                posts=items,
                current_page=request.page,
                total_pages=total_pages(total, request.limit),
                total=total,
            )
