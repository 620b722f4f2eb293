"""React to post use case."""

from pydantic import BaseModel

from anonboard.application.usecase.base import CamelModel
from anonboard.domain.service import ReactionService
from anonboard.domain.value import PostId, ReactionChange, ReactionType, UserId

CHANGE_MESSAGES = {
    ReactionChange.ADDED: "Reaction added",
    ReactionChange.REMOVED: "Reaction removed",
    ReactionChange.UPDATED: "Reaction updated",
    ReactionChange.UNCHANGED: "Reaction unchanged",
}


class ReactRequest(BaseModel):
    """React request."""

    user_id: UserId
    post_id: PostId
    type: str  # "like" or "dislike", validated by the reaction service


class ReactResponse(CamelModel):
    """React response."""

    message: str
    likes: int
    dislikes: int
    user_reaction: ReactionType | None


class ReactUseCase:
    """Use case for toggling a like or dislike on a post."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize react use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: ReactRequest) -> ReactResponse:
        """Execute react flow.

        Raises:
            ValidationError: If the reaction type is invalid
            NotFoundError: If the post doesn't exist or is deleted
            ConflictError: If a concurrent request created the same reaction
        """
        outcome = await self.reaction_service.apply_reaction(
            user_id=request.user_id,
            post_id=request.post_id,
            reaction_type=request.type,
        )
        return ReactResponse(
            message=CHANGE_MESSAGES[outcome.change],
            likes=outcome.likes,
            dislikes=outcome.dislikes,
            user_reaction=outcome.user_reaction,
        )
