"""Submit report use case."""

import logfire
from pydantic import BaseModel

from anonboard.application.usecase.base import MessageResponse
from anonboard.domain.service import ReportService
from anonboard.domain.value import CommentId, PostId, UserId


class SubmitReportRequest(BaseModel):
    """Submit report request."""

    reporter_id: UserId
    post_id: PostId | None = None
    comment_id: CommentId | None = None
    reason: str | None = None
    description: str | None = None


class SubmitReportUseCase:
    """Use case for reporting a post or comment."""

    def __init__(self, report_service: ReportService) -> None:
        """Initialize submit report use case.

        Args:
            report_service: Report domain service
        """
        self.report_service = report_service

    async def execute(self, request: SubmitReportRequest) -> MessageResponse:
        """Execute submit report flow.

        Raises:
            ValidationError: If there is no target or the reason is invalid
        """
        report = await self.report_service.submit_report(
            reporter_id=request.reporter_id,
            reason=request.reason,
            post_id=request.post_id,
            comment_id=request.comment_id,
            description=request.description,
        )
        logfire.info("Report accepted", report_id=str(report.id))
        return MessageResponse(
            message="Report submitted. Thank you for helping keep the community safe."
        )
