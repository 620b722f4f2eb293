"""Domain layer DI providers."""

from dishka import Scope, provide

from anonboard.config import AuthSettings, ModerationSettings
from anonboard.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    ReportRepository,
    UserRepository,
)
from anonboard.domain.service import (
    CommentService,
    ContentPolicy,
    DenylistContentPolicy,
    JWTService,
    PostService,
    ReactionService,
    ReportService,
    UserService,
)
from anonboard.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_content_policy(self, moderation: ModerationSettings) -> ContentPolicy:
        """Provide the moderation policy for new posts and comments."""
        return DenylistContentPolicy(denylist=moderation.denylist)

    @provide
    def get_post_service(
        self, post_repository: PostRepository, content_policy: ContentPolicy
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, content_policy=content_policy
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, content_policy: ContentPolicy
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, content_policy=content_policy
        )

    @provide
    def get_reaction_service(
        self, reaction_repository: ReactionRepository, post_service: PostService
    ) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(
            reaction_repository=reaction_repository, post_service=post_service
        )

    @provide
    def get_report_service(self, report_repository: ReportRepository) -> ReportService:
        """Provide report domain service."""
        return ReportService(report_repository=report_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
