"""Get reaction use case."""

from pydantic import BaseModel

from anonboard.application.usecase.base import CamelModel
from anonboard.domain.service import ReactionService
from anonboard.domain.value import PostId, ReactionType, UserId


class GetReactionRequest(BaseModel):
    """Get reaction request."""

    user_id: UserId
    post_id: PostId


class GetReactionResponse(CamelModel):
    """Get reaction response."""

    reaction: ReactionType | None


class GetReactionUseCase:
    """Use case for reading the caller's reaction on a post."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize get reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: GetReactionRequest) -> GetReactionResponse:
        """Execute get reaction flow."""
        reaction = await self.reaction_service.get_reaction(
            request.user_id, request.post_id
        )
        return GetReactionResponse(reaction=reaction)
