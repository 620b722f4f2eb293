"""User domain service."""

from typing import Iterable

import logfire

from anonboard.domain.model.user import ANONYMOUS_DISPLAY_NAME
from anonboard.domain.repository import UserRepository
from anonboard.domain.value import UserId


class UserService:
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_display_names(self, user_ids: Iterable[UserId]) -> dict[UserId, str]:
        """Resolve anonymous display names for a set of users.

        Uses a single batch query. Users that can't be found are shown
        as "Anonymous".

        Args:
            user_ids: User IDs to resolve (duplicates are fine)

        Returns:
            Mapping of every requested user ID to a display name
        """
        unique_ids = list(set(user_ids))
        if not unique_ids:
            return {}

        with logfire.span("user_service.get_display_names", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            names = {user.id: user.anonymous_username for user in users}
            return {
                user_id: names.get(user_id, ANONYMOUS_DISPLAY_NAME)
                for user_id in unique_ids
            }
