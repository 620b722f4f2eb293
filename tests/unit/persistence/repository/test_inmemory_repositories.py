"""Unit tests for in-memory repository semantics shared with PostgreSQL."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from anonboard.domain.model.reaction import Reaction
from anonboard.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryReactionRepository,
)
from anonboard.domain.value import (
    PostCounter,
    PostId,
    ReactionId,
    ReactionType,
    UserId,
)
from tests.conftest import make_post


class TestPostCounters:
    """Tests for apply_counter_deltas."""

    @pytest.mark.asyncio
    async def test_deltas_applied_together_and_floored(self):
        # Arrange
        repo = InMemoryPostRepository()
        post = await repo.save(make_post(likes=1))

        # Act
        updated = await repo.apply_counter_deltas(
            post.id, {PostCounter.LIKES: -3, PostCounter.DISLIKES: 2}
        )

        # Assert
        assert updated.likes == 0
        assert updated.dislikes == 2

    @pytest.mark.asyncio
    async def test_missing_post_returns_none(self):
        repo = InMemoryPostRepository()

        assert (
            await repo.apply_counter_deltas(PostId(uuid4()), {PostCounter.LIKES: 1})
            is None
        )

    @pytest.mark.asyncio
    async def test_soft_delete_only_once(self):
        repo = InMemoryPostRepository()
        post = await repo.save(make_post())

        assert await repo.soft_delete(post.id) is True
        assert await repo.soft_delete(post.id) is False


class TestReactionUniqueness:
    """Tests for the one-reaction-per-user-and-post rule."""

    @pytest.mark.asyncio
    async def test_duplicate_insert_raises_integrity_error(self):
        # Arrange
        repo = InMemoryReactionRepository()
        user_id = UserId(uuid4())
        post_id = PostId(uuid4())

        def reaction(reaction_type: ReactionType) -> Reaction:
            return Reaction(
                id=ReactionId(uuid4()),
                user_id=user_id,
                post_id=post_id,
                type=reaction_type,
            )

        await repo.save(reaction(ReactionType.LIKE))

        # Act & Assert
        with pytest.raises(IntegrityError):
            await repo.save(reaction(ReactionType.DISLIKE))

    @pytest.mark.asyncio
    async def test_conditional_switch_and_delete(self):
        # Arrange
        repo = InMemoryReactionRepository()
        user_id = UserId(uuid4())
        post_id = PostId(uuid4())
        await repo.save(
            Reaction(
                id=ReactionId(uuid4()),
                user_id=user_id,
                post_id=post_id,
                type=ReactionType.LIKE,
            )
        )

        # Act & Assert - stale expectations match nothing
        assert (
            await repo.switch_type(
                user_id, post_id, ReactionType.DISLIKE, ReactionType.LIKE
            )
            is False
        )
        assert await repo.delete_if_type(user_id, post_id, ReactionType.DISLIKE) is False

        assert (
            await repo.switch_type(
                user_id, post_id, ReactionType.LIKE, ReactionType.DISLIKE
            )
            is True
        )
        assert await repo.delete_if_type(user_id, post_id, ReactionType.DISLIKE) is True
        assert await repo.find_by_user_and_post(user_id, post_id) is None
