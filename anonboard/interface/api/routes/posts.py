"""Post routes."""

import logfire
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from anonboard.application.usecase.base import MessageResponse
from anonboard.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    RepostRequest,
    RepostResponse,
    RepostUseCase,
)
from anonboard.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from anonboard.domain.value import PostId
from anonboard.interface.api.identity import Caller

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    content: str
    category: str | None = None


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    caller: FromDishka[Caller],
    category: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> ListPostsResponse:
    """List live posts, newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        caller: Current caller from DI
        category: Category filter, "all" or omitted for every category
        page: Page number (1-based)
        limit: Posts per page

    Returns:
        One page of posts with the caller's reactions when signed in
    """
    try:
        return await list_posts_use_case.execute(
            ListPostsRequest(
                category=category, page=page, limit=limit, user_id=caller.user_id
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        )


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    caller: FromDishka[Caller],
) -> CreatePostResponse:
    """Create a new post.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated or the content is rejected
    """
    user_id = caller.require_user()

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                author_id=user_id, content=request.content, category=request.category
            )
        )
    except ValidationError as e:
        logfire.warn("Post creation rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    caller: FromDishka[Caller],
) -> GetPostResponse:
    """Get a single live post.

    Raises:
        HTTPException: 404 if the post doesn't exist or is deleted
    """
    try:
        return await get_post_use_case.execute(
            GetPostRequest(post_id=PostId(post_id), user_id=caller.user_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"{e.resource} not found"
        )
    except Exception as e:
        logfire.error("Unexpected error getting post", post_id=str(post_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        )


@router.post(
    "/{post_id}/repost",
    response_model=RepostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def repost(
    post_id: UUID,
    repost_use_case: FromDishka[RepostUseCase],
    caller: FromDishka[Caller],
) -> RepostResponse:
    """Repost an existing post.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated or the post is gone
    """
    user_id = caller.require_user()

    try:
        return await repost_use_case.execute(
            RepostRequest(user_id=user_id, post_id=PostId(post_id))
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"{e.resource} not found"
        )
    except Exception as e:
        logfire.error("Unexpected error reposting", post_id=str(post_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        )


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    caller: FromDishka[Caller],
) -> MessageResponse:
    """Soft-delete a post.

    Only the post author can delete.

    Raises:
        HTTPException: If not authenticated, not the author, or the post is gone
    """
    user_id = caller.require_user()

    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(user_id=user_id, post_id=PostId(post_id))
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized post delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized"
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"{e.resource} not found"
        )
    except Exception as e:
        logfire.error("Unexpected error deleting post", post_id=str(post_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        )
