"""PostgreSQL implementation of Post repository."""

from typing import List, Mapping, Optional, Sequence

import logfire
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from anonboard.domain.model import Post
from anonboard.domain.repository.post import PostRepository
from anonboard.domain.value import PostCategory, PostCounter, PostId
from anonboard.persistence.mappers import post_to_dict, row_to_post
from anonboard.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _filters(self, category: Optional[PostCategory], include_deleted: bool) -> list:
        conditions = []
        if not include_deleted:
            conditions.append(posts_table.c.is_deleted.is_(False))
        if category is not None:
            conditions.append(posts_table.c.category == category.value)
        return conditions

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find several posts in a single query."""
        if not post_ids:
            return []

        stmt = select(posts_table).where(posts_table.c.id.in_(post_ids))
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_all(
        self,
        category: Optional[PostCategory] = None,
        include_deleted: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts newest-first with filtering and pagination."""
        with logfire.span(
            "post_repository.find_all",
            category=category.value if category else None,
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(posts_table)
                .where(*self._filters(category, include_deleted))
                .order_by(posts_table.c.created_at.desc(), posts_table.c.id.desc())
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def count(
        self,
        category: Optional[PostCategory] = None,
        include_deleted: bool = False,
    ) -> int:
        """Count posts matching the given filters."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(*self._filters(category, include_deleted))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, post: Post) -> Post:
        """Insert a new post."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            stmt = posts_table.insert().values(**post_to_dict(post))
            await self.session.execute(stmt)
            await self.session.flush()
            logfire.info(
                "Post inserted", post_id=str(post.id), is_repost=post.is_repost
            )
            return post

    async def soft_delete(self, post_id: PostId) -> bool:
        """Mark a live post as deleted."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .where(posts_table.c.is_deleted.is_(False))
            .values(is_deleted=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def apply_counter_deltas(
        self, post_id: PostId, deltas: Mapping[PostCounter, int]
    ) -> Optional[Post]:
        """Atomically add deltas to counters in one UPDATE, flooring at 0."""
        if not deltas:
            return await self.find_by_id(post_id)

        values = {
            counter.value: func.greatest(posts_table.c[counter.value] + delta, 0)
            for counter, delta in deltas.items()
        }
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(**values)
            .returning(*posts_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_post(row._asdict()) if row else None
