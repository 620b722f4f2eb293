"""PostgreSQL implementation of Reaction repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from anonboard.domain.model import Reaction
from anonboard.domain.repository import ReactionRepository
from anonboard.domain.value import PostId, ReactionType, UserId
from anonboard.persistence.mappers import reaction_to_dict, row_to_reaction
from anonboard.persistence.tables import reactions_table


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Reaction]:
        """Find a user's reaction on a post."""
        stmt = select(reactions_table).where(
            and_(
                reactions_table.c.user_id == user_id,
                reactions_table.c.post_id == post_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reaction(row._asdict()) if row else None

    async def find_by_user_and_posts(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> List[Reaction]:
        """Find a user's reactions on multiple posts (batch query)."""
        if not post_ids:
            return []

        stmt = select(reactions_table).where(
            and_(
                reactions_table.c.user_id == user_id,
                reactions_table.c.post_id.in_(post_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_reaction(row._asdict()) for row in result.fetchall()]

    async def save(self, reaction: Reaction) -> Reaction:
        """Insert a reaction; the unique constraint rejects duplicates.

        The insert runs in a savepoint so a rejected duplicate leaves the
        request's transaction usable.
        """
        stmt = insert(reactions_table).values(**reaction_to_dict(reaction))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return reaction

    async def delete_if_type(
        self, user_id: UserId, post_id: PostId, reaction_type: ReactionType
    ) -> bool:
        """Delete the reaction only if it still has the given type."""
        stmt = delete(reactions_table).where(
            and_(
                reactions_table.c.user_id == user_id,
                reactions_table.c.post_id == post_id,
                reactions_table.c.type == reaction_type.value,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def switch_type(
        self,
        user_id: UserId,
        post_id: PostId,
        from_type: ReactionType,
        to_type: ReactionType,
    ) -> bool:
        """Change the reaction type in place if it still has from_type."""
        stmt = (
            update(reactions_table)
            .where(
                and_(
                    reactions_table.c.user_id == user_id,
                    reactions_table.c.post_id == post_id,
                    reactions_table.c.type == from_type.value,
                )
            )
            .values(type=to_type.value)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
