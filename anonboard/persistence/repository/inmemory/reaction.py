"""In-memory reaction repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from anonboard.domain.model.reaction import Reaction
from anonboard.domain.repository.reaction import ReactionRepository
from anonboard.domain.value import PostId, ReactionType, UserId


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing.

    Reactions are keyed by (user, post), mirroring the unique constraint.
    """

    def __init__(self) -> None:
        self._reactions: dict[tuple[UserId, PostId], Reaction] = {}

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Reaction]:
        """Find a user's reaction on a post."""
        return self._reactions.get((user_id, post_id))

    async def find_by_user_and_posts(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> list[Reaction]:
        """Find a user's reactions on multiple posts (batch query)."""
        return [
            self._reactions[(user_id, pid)]
            for pid in set(post_ids)
            if (user_id, pid) in self._reactions
        ]

    async def save(self, reaction: Reaction) -> Reaction:
        """Save a reaction.

        Raises:
            IntegrityError: If the user already reacted to the post
        """
        key = (reaction.user_id, reaction.post_id)
        if key in self._reactions:
            raise IntegrityError("Duplicate reaction", None, Exception())

        self._reactions[key] = reaction
        return reaction

    async def delete_if_type(
        self, user_id: UserId, post_id: PostId, reaction_type: ReactionType
    ) -> bool:
        """Delete the reaction only if it still has the given type."""
        existing = self._reactions.get((user_id, post_id))
        if existing is None or existing.type != reaction_type:
            return False
        del self._reactions[(user_id, post_id)]
        return True

    async def switch_type(
        self,
        user_id: UserId,
        post_id: PostId,
        from_type: ReactionType,
        to_type: ReactionType,
    ) -> bool:
        """Change the reaction type in place if it still has from_type."""
        existing = self._reactions.get((user_id, post_id))
        if existing is None or existing.type != from_type:
            return False
        self._reactions[(user_id, post_id)] = existing.model_copy(
            update={"type": to_type}
        )
        return True
