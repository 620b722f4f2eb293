"""Integration tests for the Postgres post and reaction repositories.

These run against a migrated database and are skipped unless
RUN_INTEGRATION_TESTS is set.
"""

import os
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from anonboard.domain.model.reaction import Reaction
from anonboard.domain.repository import PostRepository, ReactionRepository
from anonboard.domain.value import PostCounter, ReactionId, ReactionType, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.getenv("RUN_INTEGRATION_TESTS"),
    reason="requires a running database (set RUN_INTEGRATION_TESTS=1)",
)

integration_env = create_env_fixture(unmock={"persistence"})


class TestPostRepositoryIntegration:
    """Counter updates run as single SQL statements."""

    @pytest.mark.asyncio
    async def test_counter_deltas_are_floored_at_zero(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        post = await post_repo.save(make_post(likes=1))

        # Act
        updated = await post_repo.apply_counter_deltas(
            post.id, {PostCounter.LIKES: -3, PostCounter.DISLIKES: 2}
        )

        # Assert
        assert updated is not None
        assert updated.likes == 0
        assert updated.dislikes == 2

    @pytest.mark.asyncio
    async def test_soft_deleted_post_is_hidden_from_feed(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act
        deleted = await post_repo.soft_delete(post.id)
        deleted_again = await post_repo.soft_delete(post.id)
        feed = await post_repo.find_all(limit=100, offset=0)

        # Assert
        assert deleted is True
        assert deleted_again is False
        assert post.id not in [p.id for p in feed]
        stored = await post_repo.find_by_id(post.id)
        assert stored is not None
        assert stored.is_deleted is True


class TestReactionRepositoryIntegration:
    """Conditional reaction writes."""

    @pytest.mark.asyncio
    async def test_conditional_switch_and_delete(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        reaction_repo = await integration_env.get(ReactionRepository)
        post = await post_repo.save(make_post())
        user_id = UserId(uuid4())
        await reaction_repo.save(
            Reaction(
                id=ReactionId(uuid4()),
                user_id=user_id,
                post_id=post.id,
                type=ReactionType.LIKE,
            )
        )

        # Act
        stale_switch = await reaction_repo.switch_type(
            user_id, post.id, ReactionType.DISLIKE, ReactionType.LIKE
        )
        switched = await reaction_repo.switch_type(
            user_id, post.id, ReactionType.LIKE, ReactionType.DISLIKE
        )
        stale_delete = await reaction_repo.delete_if_type(
            user_id, post.id, ReactionType.LIKE
        )
        deleted = await reaction_repo.delete_if_type(
            user_id, post.id, ReactionType.DISLIKE
        )

        # Assert
        assert stale_switch is False
        assert switched is True
        assert stale_delete is False
        assert deleted is True
        assert await reaction_repo.find_by_user_and_post(user_id, post.id) is None

    @pytest.mark.asyncio
    async def test_duplicate_insert_leaves_session_usable(self, integration_env):
        """A rejected duplicate only rolls back its own savepoint."""
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        reaction_repo = await integration_env.get(ReactionRepository)
        session = await integration_env.get(AsyncSession)
        post = await post_repo.save(make_post())
        user_id = UserId(uuid4())

        def _reaction(reaction_type: ReactionType) -> Reaction:
            return Reaction(
                id=ReactionId(uuid4()),
                user_id=user_id,
                post_id=post.id,
                type=reaction_type,
            )

        await reaction_repo.save(_reaction(ReactionType.LIKE))

        # Act
        with pytest.raises(IntegrityError):
            await reaction_repo.save(_reaction(ReactionType.DISLIKE))

        # Assert
        assert session.is_active
        stored = await reaction_repo.find_by_user_and_post(user_id, post.id)
        assert stored is not None
        assert stored.type == ReactionType.LIKE
