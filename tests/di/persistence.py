"""Mock persistence providers for testing."""

from dishka import Scope, provide

from anonboard.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    ReportRepository,
    UserRepository,
)
from anonboard.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemoryReactionRepository,
    InMemoryReportRepository,
    InMemoryUserRepository,
)
from anonboard.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so that state survives across the requests
    of one test client. Each test builds its own container, which keeps
    tests isolated from each other.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_reaction_repository(self) -> ReactionRepository:
        """Provide in-memory reaction repository."""
        return InMemoryReactionRepository()

    @provide(scope=Scope.APP)
    def get_report_repository(self) -> ReportRepository:
        """Provide in-memory report repository."""
        return InMemoryReportRepository()
