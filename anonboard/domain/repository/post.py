"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Mapping, Optional, Sequence

from anonboard.domain.model.post import Post
from anonboard.domain.value import PostCategory, PostCounter, PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, including soft-deleted posts.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find several posts in a single query (batch lookup).

        Args:
            post_ids: IDs of the posts to load

        Returns:
            The posts that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        category: Optional[PostCategory] = None,
        include_deleted: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts newest-first with filtering and pagination.

        Args:
            category: Filter by category (None for all categories)
            include_deleted: Whether to include soft-deleted posts
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        category: Optional[PostCategory] = None,
        include_deleted: bool = False,
    ) -> int:
        """Count posts matching the given filters.

        Args:
            category: Filter by category (None for all categories)
            include_deleted: Whether to include soft-deleted posts

        Returns:
            Total number of posts matching the criteria
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def soft_delete(self, post_id: PostId) -> bool:
        """Mark a live post as deleted.

        Args:
            post_id: The post ID

        Returns:
            True if the post was live and is now deleted, False otherwise
        """
        pass

    @abstractmethod
    async def apply_counter_deltas(
        self, post_id: PostId, deltas: Mapping[PostCounter, int]
    ) -> Optional[Post]:
        """Atomically add deltas to the post's counters, flooring each at 0.

        All deltas are applied in a single SQL statement, never as a
        read-modify-write.

        Args:
            post_id: The post ID
            deltas: Amount to add to each counter (may be negative)

        Returns:
            The updated post, or None if the post doesn't exist
        """
        pass
