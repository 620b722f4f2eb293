"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from anonboard.domain.model import Comment
from anonboard.domain.repository import CommentRepository
from anonboard.domain.value import CommentId, PostId
from anonboard.persistence.mappers import comment_to_dict, row_to_comment
from anonboard.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _top_level_of(self, post_id: PostId) -> list:
        return [
            comments_table.c.post_id == post_id,
            comments_table.c.parent_comment_id.is_(None),
            comments_table.c.is_deleted.is_(False),
        ]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level(
        self,
        post_id: PostId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find live top-level comments of a post, newest-first."""
        stmt = (
            select(comments_table)
            .where(*self._top_level_of(post_id))
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_top_level(self, post_id: PostId) -> int:
        """Count live top-level comments of a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(*self._top_level_of(post_id))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find live replies to the given comments, oldest-first."""
        if not parent_ids:
            return []

        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_comment_id.in_(parent_ids))
            .where(comments_table.c.is_deleted.is_(False))
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def soft_delete(self, comment_id: CommentId) -> bool:
        """Mark a live comment as deleted."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.is_deleted.is_(False))
            .values(is_deleted=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
