"""User record.

Accounts are issued elsewhere; the board only needs the anonymous
display name to show next to content.
"""

from datetime import datetime

from pydantic import Field

from anonboard.domain.model.common import DomainModel
from anonboard.domain.value import UserId

ANONYMOUS_DISPLAY_NAME = "Anonymous"


class User(DomainModel):
    """A board user, known only by a generated display name."""

    id: UserId
    anonymous_username: str = Field(min_length=1, max_length=100)
    created_at: datetime = Field(default_factory=datetime.now)
