"""Report routes."""

import logfire
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from anonboard.application.usecase.base import CamelModel, MessageResponse
from anonboard.application.usecase.report import (
    SubmitReportRequest,
    SubmitReportUseCase,
)
from anonboard.domain.error import ValidationError
from anonboard.domain.value import CommentId, PostId
from anonboard.interface.api.identity import Caller

router = APIRouter(prefix="/reports", tags=["reports"], route_class=DishkaRoute)


class SubmitReportAPIRequest(CamelModel):
    """API request for reporting a post or comment."""

    post_id: UUID | None = None
    comment_id: UUID | None = None
    reason: str | None = None
    description: str | None = None


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def submit_report(
    request: SubmitReportAPIRequest,
    submit_report_use_case: FromDishka[SubmitReportUseCase],
    caller: FromDishka[Caller],
) -> MessageResponse:
    """Report a post or comment for review.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated, no target is given, or the
            reason is invalid
    """
    user_id = caller.require_user()

    try:
        return await submit_report_use_case.execute(
            SubmitReportRequest(
                reporter_id=user_id,
                post_id=PostId(request.post_id) if request.post_id else None,
                comment_id=CommentId(request.comment_id) if request.comment_id else None,
                reason=request.reason,
                description=request.description,
            )
        )
    except ValidationError as e:
        logfire.warn("Report rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error submitting report", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        )
