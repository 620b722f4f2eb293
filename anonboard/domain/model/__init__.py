"""Domain model entities for anonboard."""

from anonboard.domain.model.comment import Comment
from anonboard.domain.model.post import Post
from anonboard.domain.model.reaction import Reaction
from anonboard.domain.model.report import Report
from anonboard.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Reaction",
    "Report",
]
