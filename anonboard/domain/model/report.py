"""Report entity, a write-only record of flagged content."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from anonboard.domain.model.common import DomainModel
from anonboard.domain.value import CommentId, PostId, ReportId, ReportReason, UserId

REPORT_DESCRIPTION_MAX_LENGTH = 1000


class Report(DomainModel):
    """A user's report against a post, a comment, or both."""

    id: ReportId
    reporter_id: UserId
    post_id: Optional[PostId] = None
    comment_id: Optional[CommentId] = None
    reason: ReportReason
    description: str = Field(default="", max_length=REPORT_DESCRIPTION_MAX_LENGTH)
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_target(self) -> "Report":
        """Ensure the report points at something."""
        if self.post_id is None and self.comment_id is None:
            raise ValueError("A report must target a post or a comment")
        return self
