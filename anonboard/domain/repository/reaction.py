"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from anonboard.domain.model.reaction import Reaction
from anonboard.domain.value import PostId, ReactionType, UserId


class ReactionRepository(ABC):
    """Repository for Reaction entity.

    Defines the contract for reaction persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Reaction]:
        """Find a user's reaction on a post.

        Args:
            user_id: The user's ID
            post_id: The post's ID

        Returns:
            The reaction if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_posts(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> List[Reaction]:
        """Find a user's reactions on multiple posts (batch query).

        Args:
            user_id: The user's ID
            post_ids: List of post IDs to check

        Returns:
            List of reactions by the user on the specified posts
        """
        pass

    @abstractmethod
    async def save(self, reaction: Reaction) -> Reaction:
        """Save a new reaction.

        Args:
            reaction: The reaction to save

        Returns:
            The saved reaction

        Raises:
            IntegrityError: If the user already reacted to the post
        """
        pass

    @abstractmethod
    async def delete_if_type(
        self, user_id: UserId, post_id: PostId, reaction_type: ReactionType
    ) -> bool:
        """Delete the user's reaction only if it still has the given type.

        Args:
            user_id: The user's ID
            post_id: The post's ID
            reaction_type: Type the stored reaction must have

        Returns:
            True if a reaction was deleted, False otherwise
        """
        pass

    @abstractmethod
    async def switch_type(
        self,
        user_id: UserId,
        post_id: PostId,
        from_type: ReactionType,
        to_type: ReactionType,
    ) -> bool:
        """Change the user's reaction type in place if it still has from_type.

        Args:
            user_id: The user's ID
            post_id: The post's ID
            from_type: Type the stored reaction must currently have
            to_type: New reaction type

        Returns:
            True if the reaction was updated, False otherwise
        """
        pass
