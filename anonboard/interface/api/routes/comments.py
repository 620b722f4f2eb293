"""Comment routes."""

import logfire
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from anonboard.application.usecase.base import CamelModel, MessageResponse
from anonboard.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from anonboard.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from anonboard.domain.value import CommentId, PostId
from anonboard.interface.api.identity import Caller

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(CamelModel):
    """API request for creating a comment or reply."""

    content: str
    parent_comment_id: UUID | None = None


@router.get("/post/{post_id}", response_model=GetCommentsResponse)
async def get_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> GetCommentsResponse:
    """Get one page of a post's comment thread.

    Args:
        post_id: Post UUID
        get_comments_use_case: Get comments use case from DI
        page: Page of top-level comments (1-based)
        limit: Top-level comments per page

    Returns:
        Top-level comments newest-first, each with its replies oldest-first
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(post_id=PostId(post_id), page=page, limit=limit)
        )
    except Exception as e:
        logfire.error(
            "Unexpected error getting comments", post_id=str(post_id), error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        )


@router.post(
    "/post/{post_id}",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    caller: FromDishka[Caller],
) -> CreateCommentResponse:
    """Comment on a post, or reply to one of its top-level comments.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated, the content or parent is
            invalid, or the post or parent is gone
    """
    user_id = caller.require_user()

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=PostId(post_id),
                content=request.content,
                author_id=user_id,
                parent_comment_id=(
                    CommentId(request.parent_comment_id)
                    if request.parent_comment_id
                    else None
                ),
            )
        )
    except ValidationError as e:
        logfire.warn("Comment creation rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"{e.resource} not found"
        )
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        )


@router.delete("/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    caller: FromDishka[Caller],
) -> MessageResponse:
    """Soft-delete a comment.

    Only the comment author can delete.

    Raises:
        HTTPException: If not authenticated, not the author, or the comment is gone
    """
    user_id = caller.require_user()

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(user_id=user_id, comment_id=CommentId(comment_id))
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized"
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"{e.resource} not found"
        )
    except Exception as e:
        logfire.error(
            "Unexpected error deleting comment", comment_id=str(comment_id), error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        )
