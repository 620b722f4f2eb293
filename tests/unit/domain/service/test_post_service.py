"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from anonboard.domain.error import (
    ContentRejectedError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from anonboard.domain.repository import PostRepository
from anonboard.domain.service import PostService
from anonboard.domain.value import PostCategory, PostId, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_create_post_trims_and_saves(self, unit_env):
        """Created post should be trimmed, saved and start with zero counters."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author_id = UserId(uuid4())

        # Act
        post = await post_service.create_post(author_id, "  Hello board  ", "politics")

        # Assert
        assert post.content == "Hello board"
        assert post.category == PostCategory.POLITICS
        assert (post.likes, post.dislikes, post.comment_count, post.repost_count) == (
            0,
            0,
            0,
            0,
        )
        assert await post_repo.find_by_id(post.id) == post

    @pytest.mark.asyncio
    @pytest.mark.parametrize("category", [None, "", "sports"])
    async def test_missing_or_unknown_category_defaults_to_general(
        self, unit_env, category
    ):
        """Unrecognised categories file the post under general."""
        post_service = await unit_env.get(PostService)

        post = await post_service.create_post(UserId(uuid4()), "Hello", category)

        assert post.category == PostCategory.GENERAL

    @pytest.mark.asyncio
    async def test_blank_content_rejected(self, unit_env):
        """Whitespace-only content should be rejected."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(ValidationError, match="Content is required"):
            await post_service.create_post(UserId(uuid4()), "   ")

    @pytest.mark.asyncio
    async def test_content_over_limit_rejected(self, unit_env):
        """Posts longer than 5000 characters should be rejected."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(ValidationError, match="too long"):
            await post_service.create_post(UserId(uuid4()), "a" * 5001)

    @pytest.mark.asyncio
    async def test_moderation_rejects_without_persisting(self, unit_env):
        """A rejected post must not be stored."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        # Act & Assert
        with pytest.raises(
            ContentRejectedError, match="Your post contains inappropriate language"
        ):
            await post_service.create_post(UserId(uuid4()), "hello badword1")
        assert await post_repo.count() == 0


class TestRepost:
    """Tests for repost method."""

    @pytest.mark.asyncio
    async def test_repost_copies_source_and_counts(self, unit_env):
        """Repost copies content and category and bumps the source counter."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        source = await post_repo.save(
            make_post(content="Original", category=PostCategory.EDUCATION)
        )
        reposter = UserId(uuid4())

        # Act
        repost = await post_service.repost(reposter, source.id)

        # Assert
        assert repost.author_id == reposter
        assert repost.content == "Original"
        assert repost.category == PostCategory.EDUCATION
        assert repost.is_repost is True
        assert repost.original_post_id == source.id
        updated_source = await post_repo.find_by_id(source.id)
        assert updated_source.repost_count == 1

    @pytest.mark.asyncio
    async def test_repost_of_repost_references_the_repost(self, unit_env):
        """Reposting a repost points at the repost it was made from."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        source = await post_repo.save(make_post())
        first = await post_service.repost(UserId(uuid4()), source.id)

        # Act
        second = await post_service.repost(UserId(uuid4()), first.id)

        # Assert
        assert second.original_post_id == first.id

    @pytest.mark.asyncio
    async def test_repost_of_deleted_post_raises_not_found(self, unit_env):
        """Deleted posts cannot be reposted."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        source = await post_repo.save(make_post(is_deleted=True))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await post_service.repost(UserId(uuid4()), source.id)


class TestDeletePost:
    """Tests for delete_post method."""

    @pytest.mark.asyncio
    async def test_author_soft_deletes(self, unit_env):
        """Deleting keeps the row and marks it deleted."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author_id = UserId(uuid4())
        post = await post_repo.save(make_post(author_id))

        # Act
        await post_service.delete_post(author_id, post.id)

        # Assert
        stored = await post_repo.find_by_id(post.id)
        assert stored is not None
        assert stored.is_deleted is True

    @pytest.mark.asyncio
    async def test_non_author_forbidden(self, unit_env):
        """Only the author may delete a post."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(UserId(uuid4()), post.id)

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        """Deleting a post that doesn't exist should fail."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.delete_post(UserId(uuid4()), PostId(uuid4()))

    @pytest.mark.asyncio
    async def test_deleting_twice_raises_not_found(self, unit_env):
        """An already-deleted post counts as missing."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author_id = UserId(uuid4())
        post = await post_repo.save(make_post(author_id))
        await post_service.delete_post(author_id, post.id)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await post_service.delete_post(author_id, post.id)


class TestListPosts:
    """Tests for list_posts method."""

    @pytest.mark.asyncio
    async def test_lists_live_posts_newest_first(self, unit_env):
        """Deleted posts are hidden; the rest come newest first."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        older = await post_repo.save(make_post(minutes=1))
        newer = await post_repo.save(make_post(minutes=2))
        await post_repo.save(make_post(minutes=3, is_deleted=True))

        # Act
        posts, total = await post_service.list_posts()

        # Assert
        assert [p.id for p in posts] == [newer.id, older.id]
        assert total == 2

    @pytest.mark.asyncio
    async def test_category_filter(self, unit_env):
        """Only posts in the requested category are listed."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        social = await post_repo.save(make_post(category=PostCategory.SOCIAL))
        await post_repo.save(make_post(category=PostCategory.POLITICS))

        # Act
        posts, total = await post_service.list_posts(category=PostCategory.SOCIAL)

        # Assert
        assert [p.id for p in posts] == [social.id]
        assert total == 1
