"""Reaction domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from anonboard.domain.error import ConflictError, ValidationError
from anonboard.domain.model.reaction import Reaction
from anonboard.domain.repository import ReactionRepository
from anonboard.domain.value import (
    PostCounter,
    PostId,
    ReactionChange,
    ReactionId,
    ReactionOutcome,
    ReactionType,
    UserId,
)

from .base import Service
from .post_service import PostService


class ReactionService(Service):
    """Domain service for like/dislike reactions on posts."""

    def __init__(
        self,
        reaction_repository: ReactionRepository,
        post_service: PostService,
    ) -> None:
        """Initialize reaction service.

        Args:
            reaction_repository: Reaction repository
            post_service: Post domain service
        """
        self.reaction_repository = reaction_repository
        self.post_service = post_service

    async def apply_reaction(
        self,
        user_id: UserId,
        post_id: PostId,
        reaction_type: ReactionType | str,
    ) -> ReactionOutcome:
        """Apply a like or dislike to a post.

        Reacting with no existing reaction adds one. Reacting with the same
        type again removes it (toggle off). Reacting with the other type
        switches the existing reaction in place. The post's counters follow
        in a single atomic update.

        Args:
            user_id: Reacting user
            post_id: Post being reacted to
            reaction_type: "like" or "dislike"

        Returns:
            The post's like/dislike counts and the user's resulting reaction

        Raises:
            ValidationError: If the reaction type is not recognised
            NotFoundError: If the post doesn't exist or is deleted
            ConflictError: If a concurrent request created the same reaction
        """
        try:
            new_type = ReactionType(reaction_type)
        except ValueError:
            raise ValidationError("Invalid reaction type")

        with logfire.span(
            "reaction_service.apply_reaction",
            post_id=str(post_id),
            user_id=str(user_id),
            reaction_type=new_type.value,
        ):
            post = await self.post_service.get_live_post(post_id)

            existing = await self.reaction_repository.find_by_user_and_post(
                user_id, post_id
            )
            deltas: dict[PostCounter, int] = {}
            user_reaction: ReactionType | None

            if existing is None:
                reaction = Reaction(
                    id=ReactionId(uuid4()),
                    user_id=user_id,
                    post_id=post_id,
                    type=new_type,
                    created_at=datetime.now(),
                )
                try:
                    await self.reaction_repository.save(reaction)
                except IntegrityError:
                    logfire.warn(
                        "Duplicate reaction attempt",
                        user_id=str(user_id),
                        post_id=str(post_id),
                    )
                    raise ConflictError("Reaction was changed by another request")
                deltas[new_type.counter] = 1
                change = ReactionChange.ADDED
                user_reaction = new_type

            elif existing.type == new_type:
                removed = await self.reaction_repository.delete_if_type(
                    user_id, post_id, new_type
                )
                if removed:
                    deltas[new_type.counter] = -1
                    change = ReactionChange.REMOVED
                    user_reaction = None
                else:
                    change = ReactionChange.UNCHANGED
                    user_reaction = await self.get_reaction(user_id, post_id)

            else:
                switched = await self.reaction_repository.switch_type(
                    user_id, post_id, existing.type, new_type
                )
                if switched:
                    deltas[existing.type.counter] = -1
                    deltas[new_type.counter] = 1
                    change = ReactionChange.UPDATED
                    user_reaction = new_type
                else:
                    change = ReactionChange.UNCHANGED
                    user_reaction = await self.get_reaction(user_id, post_id)

            if deltas:
                updated = await self.post_service.apply_counter_deltas(post_id, deltas)
            else:
                # Lost a race: report the counts as they stand now
                updated = await self.post_service.get_post_by_id(post_id)
            current = updated or post

            logfire.info(
                "Reaction applied",
                post_id=str(post_id),
                user_id=str(user_id),
                change=change.value,
                likes=current.likes,
                dislikes=current.dislikes,
            )
            return ReactionOutcome(
                change=change,
                likes=current.likes,
                dislikes=current.dislikes,
                user_reaction=user_reaction,
            )

    async def get_reaction(
        self, user_id: UserId, post_id: PostId
    ) -> ReactionType | None:
        """Get the user's current reaction on a post.

        Args:
            user_id: User ID
            post_id: Post ID

        Returns:
            The reaction type, or None if the user hasn't reacted
        """
        with logfire.span(
            "reaction_service.get_reaction", post_id=str(post_id), user_id=str(user_id)
        ):
            reaction = await self.reaction_repository.find_by_user_and_post(
                user_id, post_id
            )
            return reaction.type if reaction else None

    async def get_user_reactions_for_posts(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> dict[PostId, ReactionType]:
        """Look up the user's reactions on several posts.

        Args:
            user_id: User ID
            post_ids: List of post IDs to check

        Returns:
            Mapping of post ID to reaction type for posts the user reacted to
        """
        if not post_ids:
            return {}

        # Batch query to fetch all reactions at once (avoid N+1)
        reactions = await self.reaction_repository.find_by_user_and_posts(
            user_id=user_id, post_ids=post_ids
        )
        return {reaction.post_id: reaction.type for reaction in reactions}
