"""Reaction routes."""

import logfire
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from anonboard.application.usecase.reaction import (
    GetReactionRequest,
    GetReactionResponse,
    GetReactionUseCase,
    ReactRequest,
    ReactResponse,
    ReactUseCase,
)
from anonboard.domain.error import ConflictError, NotFoundError, ValidationError
from anonboard.domain.value import PostId
from anonboard.interface.api.identity import Caller

router = APIRouter(prefix="/reactions", tags=["reactions"], route_class=DishkaRoute)


class ReactAPIRequest(BaseModel):
    """API request for reacting to a post."""

    type: str


@router.post("/{post_id}", response_model=ReactResponse)
async def react(
    post_id: UUID,
    request: ReactAPIRequest,
    react_use_case: FromDishka[ReactUseCase],
    caller: FromDishka[Caller],
) -> ReactResponse:
    """Like or dislike a post.

    Sending the reaction the caller already has removes it; sending the
    other one switches it.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated, the type is invalid, the post is
            gone, or a concurrent request created the same reaction
    """
    user_id = caller.require_user()

    try:
        return await react_use_case.execute(
            ReactRequest(user_id=user_id, post_id=PostId(post_id), type=request.type)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"{e.resource} not found"
        )
    except ConflictError as e:
        logfire.warn("Concurrent reaction conflict", post_id=str(post_id), error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error reacting", post_id=str(post_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        )


@router.get("/{post_id}", response_model=GetReactionResponse)
async def get_reaction(
    post_id: UUID,
    get_reaction_use_case: FromDishka[GetReactionUseCase],
    caller: FromDishka[Caller],
) -> GetReactionResponse:
    """Get the caller's reaction on a post.

    Requires authentication.
    """
    user_id = caller.require_user()

    try:
        return await get_reaction_use_case.execute(
            GetReactionRequest(user_id=user_id, post_id=PostId(post_id))
        )
    except Exception as e:
        logfire.error(
            "Unexpected error getting reaction", post_id=str(post_id), error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        )
