"""Repository interfaces for anonboard domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from anonboard.domain.repository.comment import CommentRepository
from anonboard.domain.repository.post import PostRepository
from anonboard.domain.repository.reaction import ReactionRepository
from anonboard.domain.repository.report import ReportRepository
from anonboard.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "ReactionRepository",
    "ReportRepository",
]
