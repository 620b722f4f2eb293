"""Unit tests for CreateCommentUseCase and DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from anonboard.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from anonboard.domain.error import ContentRejectedError, NotFoundError, ValidationError
from anonboard.domain.repository import CommentRepository, PostRepository
from anonboard.domain.value import PostId, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_increments_post_count(self, unit_env):
        """Creating comment should increment post comment count."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                post_id=post.id, content="  Nice post  ", author_id=UserId(uuid4())
            )
        )

        # Assert
        assert response.message == "Comment added"
        assert response.comment.content == "Nice post"
        assert response.comment.author == "Anonymous"
        updated = await post_repo.find_by_id(post.id)
        assert updated.comment_count == 1

    @pytest.mark.asyncio
    async def test_reply_also_increments_post_count(self, unit_env):
        """Replies count towards the post's comment count."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        top = await use_case.execute(
            CreateCommentRequest(post_id=post.id, content="Top", author_id=UserId(uuid4()))
        )

        # Act
        await use_case.execute(
            CreateCommentRequest(
                post_id=post.id,
                content="Reply",
                author_id=UserId(uuid4()),
                parent_comment_id=top.comment.id,
            )
        )

        # Assert
        updated = await post_repo.find_by_id(post.id)
        assert updated.comment_count == 2

    @pytest.mark.asyncio
    async def test_content_checked_before_post_lookup(self, unit_env):
        """Empty content is reported even when the post doesn't exist."""
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError, match="Content is required"):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=PostId(uuid4()), content="  ", author_id=UserId(uuid4())
                )
            )

    @pytest.mark.asyncio
    async def test_moderation_rejects_without_persisting(self, unit_env):
        """Rejected comments are not stored and not counted."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post())

        # Act & Assert
        with pytest.raises(ContentRejectedError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=post.id, content="badword1", author_id=UserId(uuid4())
                )
            )
        assert await comment_repo.count_top_level(post.id) == 0
        assert (await post_repo.find_by_id(post.id)).comment_count == 0

    @pytest.mark.asyncio
    async def test_comment_on_deleted_post_raises_not_found(self, unit_env):
        """Deleted posts can't be commented on."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(is_deleted=True))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=post.id, content="Hello?", author_id=UserId(uuid4())
                )
            )


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_orphaned_reply_stays_counted(self, unit_env):
        """Deleting a parent leaves its reply counted but unlisted."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        user_x = UserId(uuid4())
        user_y = UserId(uuid4())

        c1 = await create.execute(
            CreateCommentRequest(post_id=post.id, content="c1", author_id=user_x)
        )
        await create.execute(
            CreateCommentRequest(
                post_id=post.id,
                content="r1",
                author_id=user_y,
                parent_comment_id=c1.comment.id,
            )
        )
        assert (await post_repo.find_by_id(post.id)).comment_count == 2

        # Act
        response = await delete.execute(
            DeleteCommentRequest(user_id=user_x, comment_id=c1.comment.id)
        )

        # Assert
        assert response.message == "Comment deleted"
        assert (await post_repo.find_by_id(post.id)).comment_count == 1
        thread = await get_comments.execute(GetCommentsRequest(post_id=post.id))
        assert thread.comments == []
        assert thread.total == 0

    @pytest.mark.asyncio
    async def test_count_never_goes_negative(self, unit_env):
        """Deleting a comment the counter never saw keeps the count at zero."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        author_id = UserId(uuid4())
        created = await create.execute(
            CreateCommentRequest(post_id=post.id, content="c", author_id=author_id)
        )
        # Reset the counter as if it had drifted
        await post_repo.save(
            (await post_repo.find_by_id(post.id)).model_copy(
                update={"comment_count": 0}
            )
        )

        # Act
        await delete.execute(
            DeleteCommentRequest(user_id=author_id, comment_id=created.comment.id)
        )

        # Assert
        assert (await post_repo.find_by_id(post.id)).comment_count == 0
