"""PostgreSQL repository implementations."""

from anonboard.persistence.repository.comment import PostgresCommentRepository
from anonboard.persistence.repository.post import PostgresPostRepository
from anonboard.persistence.repository.reaction import PostgresReactionRepository
from anonboard.persistence.repository.report import PostgresReportRepository
from anonboard.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresReactionRepository",
    "PostgresReportRepository",
]
