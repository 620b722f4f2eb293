"""Reaction entity.

Each user holds at most one reaction per post.
"""

from datetime import datetime

from pydantic import Field

from anonboard.domain.model.common import DomainModel
from anonboard.domain.value import PostId, ReactionId, ReactionType, UserId


class Reaction(DomainModel):
    """Reaction entity.

    Business rules:
    - One reaction per user per post (enforced by database unique constraint)
    - The type is switched in place rather than replaced by a second record
    """

    id: ReactionId
    user_id: UserId
    post_id: PostId
    type: ReactionType
    created_at: datetime = Field(default_factory=datetime.now)
