"""Report domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from anonboard.domain.error import ValidationError
from anonboard.domain.model.report import REPORT_DESCRIPTION_MAX_LENGTH, Report
from anonboard.domain.repository import ReportRepository
from anonboard.domain.value import CommentId, PostId, ReportId, ReportReason, UserId

from .base import Service


class ReportService(Service):
    """Domain service for recording reports of abusive content."""

    def __init__(self, report_repository: ReportRepository) -> None:
        """Initialize report service.

        Args:
            report_repository: Report repository
        """
        self.report_repository = report_repository

    async def submit_report(
        self,
        reporter_id: UserId,
        reason: ReportReason | str | None,
        post_id: PostId | None = None,
        comment_id: CommentId | None = None,
        description: str | None = None,
    ) -> Report:
        """Record a report against a post and/or a comment.

        Targets are not checked for existence; the report is stored as an
        audit record and not processed further.

        Args:
            reporter_id: Reporting user
            reason: Why the content is being reported
            post_id: Reported post (optional)
            comment_id: Reported comment (optional)
            description: Free-text details (optional)

        Returns:
            The stored report

        Raises:
            ValidationError: If there is no target, or the reason or
                description is invalid
        """
        if post_id is None and comment_id is None:
            raise ValidationError("Must specify post or comment to report")
        if not reason:
            raise ValidationError("Reason is required")
        try:
            report_reason = ReportReason(reason)
        except ValueError:
            raise ValidationError("Invalid report reason")

        text = (description or "").strip()
        if len(text) > REPORT_DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                f"Description too long (max {REPORT_DESCRIPTION_MAX_LENGTH} characters)"
            )

        with logfire.span(
            "report_service.submit_report",
            reporter_id=str(reporter_id),
            post_id=str(post_id) if post_id else None,
            comment_id=str(comment_id) if comment_id else None,
            reason=report_reason.value,
        ):
            report = Report(
                id=ReportId(uuid4()),
                reporter_id=reporter_id,
                post_id=post_id,
                comment_id=comment_id,
                reason=report_reason,
                description=text,
                created_at=datetime.now(),
            )
            saved = await self.report_repository.save(report)
            logfire.info("Report submitted", report_id=str(saved.id))
            return saved
