"""Unit tests for ReportService."""

from uuid import uuid4

import pytest

from anonboard.domain.error import ValidationError
from anonboard.domain.repository import ReportRepository
from anonboard.domain.service import ReportService
from anonboard.domain.value import CommentId, PostId, ReportReason, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSubmitReport:
    """Tests for submit_report method."""

    @pytest.mark.asyncio
    async def test_report_on_post_is_stored(self, unit_env):
        """A valid report should be persisted with trimmed description."""
        # Arrange
        report_service = await unit_env.get(ReportService)
        report_repo = await unit_env.get(ReportRepository)
        post_id = PostId(uuid4())

        # Act
        report = await report_service.submit_report(
            reporter_id=UserId(uuid4()),
            reason="spam",
            post_id=post_id,
            description="  selling things  ",
        )

        # Assert
        assert report.reason == ReportReason.SPAM
        assert report.description == "selling things"
        assert await report_repo.find_by_id(report.id) == report

    @pytest.mark.asyncio
    async def test_report_on_comment_defaults_description(self, unit_env):
        """A comment-only report without description is valid."""
        report_service = await unit_env.get(ReportService)

        report = await report_service.submit_report(
            reporter_id=UserId(uuid4()),
            reason="harassment",
            comment_id=CommentId(uuid4()),
        )

        assert report.post_id is None
        assert report.description == ""

    @pytest.mark.asyncio
    async def test_target_required(self, unit_env):
        """Either a post or a comment must be reported."""
        # Arrange
        report_service = await unit_env.get(ReportService)
        report_repo = await unit_env.get(ReportRepository)

        # Act & Assert
        with pytest.raises(
            ValidationError, match="Must specify post or comment to report"
        ):
            await report_service.submit_report(UserId(uuid4()), "spam")
        assert report_repo.all() == []

    @pytest.mark.asyncio
    async def test_reason_required(self, unit_env):
        report_service = await unit_env.get(ReportService)

        with pytest.raises(ValidationError, match="Reason is required"):
            await report_service.submit_report(
                UserId(uuid4()), None, post_id=PostId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_unknown_reason_rejected(self, unit_env):
        report_service = await unit_env.get(ReportService)

        with pytest.raises(ValidationError, match="Invalid report reason"):
            await report_service.submit_report(
                UserId(uuid4()), "boring", post_id=PostId(uuid4())
            )
