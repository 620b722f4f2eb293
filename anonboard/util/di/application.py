"""Application layer DI providers."""

from dishka import Scope, provide

from anonboard.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
)
from anonboard.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    PostItemAssembler,
    RepostUseCase,
)
from anonboard.application.usecase.reaction import GetReactionUseCase, ReactUseCase
from anonboard.application.usecase.report import SubmitReportUseCase
from anonboard.domain.service import (
    CommentService,
    PostService,
    ReactionService,
    ReportService,
    UserService,
)
from anonboard.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_post_item_assembler(
        self,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> PostItemAssembler:
        """Provide the post item assembler shared by post use cases."""
        return PostItemAssembler(
            post_service=post_service,
            user_service=user_service,
            reaction_service=reaction_service,
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self, post_service: PostService, assembler: PostItemAssembler
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service, assembler=assembler)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, assembler: PostItemAssembler
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, assembler=assembler)

    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, post_service: PostService, assembler: PostItemAssembler
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, assembler=assembler)

    @provide(scope=Scope.REQUEST)
    def get_repost_use_case(
        self, post_service: PostService, assembler: PostItemAssembler
    ) -> RepostUseCase:
        """Provide repost use case."""
        return RepostUseCase(post_service=post_service, assembler=assembler)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, post_service=post_service
        )

    # Reaction use cases
    @provide(scope=Scope.REQUEST)
    def get_react_use_case(self, reaction_service: ReactionService) -> ReactUseCase:
        """Provide react use case."""
        return ReactUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_get_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> GetReactionUseCase:
        """Provide get reaction use case."""
        return GetReactionUseCase(reaction_service=reaction_service)

    # Report use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_report_use_case(
        self, report_service: ReportService
    ) -> SubmitReportUseCase:
        """Provide submit report use case."""
        return SubmitReportUseCase(report_service=report_service)
