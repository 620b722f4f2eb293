"""Unit tests for GetCommentsUseCase."""

from uuid import uuid4

import pytest

from anonboard.application.usecase.comment import GetCommentsRequest, GetCommentsUseCase
from anonboard.domain.model import User
from anonboard.domain.repository import CommentRepository, UserRepository
from anonboard.domain.value import PostId, UserId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for the two-level paginated thread."""

    @pytest.mark.asyncio
    async def test_thread_shape_and_author_names(self, unit_env):
        """Top-level newest-first, replies oldest-first, names resolved."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        post_id = PostId(uuid4())
        named = await user_repo.save(
            User(id=UserId(uuid4()), anonymous_username="SilentFox7")
        )
        first = await comment_repo.save(
            make_comment(post_id, named.id, "first", minutes=1)
        )
        second = await comment_repo.save(make_comment(post_id, content="second", minutes=2))
        await comment_repo.save(
            make_comment(post_id, content="r2", parent_comment_id=first.id, minutes=6)
        )
        await comment_repo.save(
            make_comment(
                post_id, named.id, "r1", parent_comment_id=first.id, minutes=4
            )
        )

        # Act
        response = await use_case.execute(GetCommentsRequest(post_id=post_id))

        # Assert
        assert [c.id for c in response.comments] == [str(second.id), str(first.id)]
        assert response.comments[0].author == "Anonymous"
        assert response.comments[0].replies == []
        assert response.comments[1].author == "SilentFox7"
        assert [r.content for r in response.comments[1].replies] == ["r1", "r2"]
        assert response.comments[1].replies[0].author == "SilentFox7"
        assert response.total == 2
        assert response.total_pages == 1
        assert response.current_page == 1

    @pytest.mark.asyncio
    async def test_pagination_counts_top_level_only(self, unit_env):
        """Replies don't count towards total or pages."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        parents = [
            await comment_repo.save(make_comment(post_id, minutes=i)) for i in range(5)
        ]
        await comment_repo.save(
            make_comment(post_id, parent_comment_id=parents[0].id, minutes=10)
        )

        # Act
        page_two = await use_case.execute(
            GetCommentsRequest(post_id=post_id, page=2, limit=2)
        )

        # Assert
        assert page_two.total == 5
        assert page_two.total_pages == 3
        assert [c.id for c in page_two.comments] == [
            str(parents[2].id),
            str(parents[1].id),
        ]

    @pytest.mark.asyncio
    async def test_page_beyond_last_is_empty(self, unit_env):
        """Asking past the end returns no comments but keeps the totals."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        await comment_repo.save(make_comment(post_id))

        # Act
        response = await use_case.execute(
            GetCommentsRequest(post_id=post_id, page=5, limit=10)
        )

        # Assert
        assert response.comments == []
        assert response.total == 1
        assert response.total_pages == 1
        assert response.current_page == 5

    @pytest.mark.asyncio
    async def test_replies_of_deleted_parent_are_unreachable(self, unit_env):
        """A deleted top-level comment takes its replies out of the listing."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        parent = await comment_repo.save(make_comment(post_id, is_deleted=True))
        await comment_repo.save(make_comment(post_id, parent_comment_id=parent.id))

        # Act
        response = await use_case.execute(GetCommentsRequest(post_id=post_id))

        # Assert
        assert response.comments == []
        assert response.total == 0
