"""In-memory post repository for testing."""

from itertools import count
from typing import Mapping, Optional, Sequence

from anonboard.domain.model.post import Post
from anonboard.domain.repository.post import PostRepository
from anonboard.domain.value import PostCategory, PostCounter, PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._sequence: dict[PostId, int] = {}
        self._counter = count()

    def _matching(
        self, category: Optional[PostCategory], include_deleted: bool
    ) -> list[Post]:
        posts = list(self._posts.values())
        if category is not None:
            posts = [p for p in posts if p.category == category]
        if not include_deleted:
            posts = [p for p in posts if not p.is_deleted]
        return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> list[Post]:
        """Find several posts by ID."""
        return [self._posts[pid] for pid in set(post_ids) if pid in self._posts]

    async def find_all(
        self,
        category: Optional[PostCategory] = None,
        include_deleted: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts newest-first with filtering and pagination."""
        posts = self._matching(category, include_deleted)
        # Insertion order breaks timestamp ties
        posts.sort(key=lambda p: (p.created_at, self._sequence[p.id]), reverse=True)
        return posts[offset : offset + limit]

    async def count(
        self,
        category: Optional[PostCategory] = None,
        include_deleted: bool = False,
    ) -> int:
        """Count posts matching the given filters."""
        return len(self._matching(category, include_deleted))

    async def save(self, post: Post) -> Post:
        """Save a post."""
        if post.id not in self._sequence:
            self._sequence[post.id] = next(self._counter)
        self._posts[post.id] = post
        return post

    async def soft_delete(self, post_id: PostId) -> bool:
        """Mark a live post as deleted."""
        post = self._posts.get(post_id)
        if post is None or post.is_deleted:
            return False
        self._posts[post_id] = post.model_copy(update={"is_deleted": True})
        return True

    async def apply_counter_deltas(
        self, post_id: PostId, deltas: Mapping[PostCounter, int]
    ) -> Optional[Post]:
        """Add deltas to the post's counters, flooring each at 0."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        updates = {
            counter.value: max(0, getattr(post, counter.value) + delta)
            for counter, delta in deltas.items()
        }
        updated = post.model_copy(update=updates)
        self._posts[post_id] = updated
        return updated
