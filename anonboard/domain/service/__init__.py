"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .moderation import ContentPolicy, DenylistContentPolicy
from .post_service import PostService
from .reaction_service import ReactionService
from .report_service import ReportService
from .user_service import UserService

__all__ = [
    "CommentService",
    "ContentPolicy",
    "DenylistContentPolicy",
    "JWTService",
    "PostService",
    "ReactionService",
    "ReportService",
    "Service",
    "UserService",
]
