"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from anonboard.domain.model.comment import Comment
from anonboard.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, including soft-deleted comments.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(
        self,
        post_id: PostId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find live top-level comments of a post, newest-first.

        Args:
            post_id: The post ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            One page of top-level comments
        """
        pass

    @abstractmethod
    async def count_top_level(self, post_id: PostId) -> int:
        """Count live top-level comments of a post.

        Args:
            post_id: The post ID

        Returns:
            Number of top-level comments
        """
        pass

    @abstractmethod
    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find live replies to any of the given comments, oldest-first.

        Args:
            parent_ids: IDs of the parent comments

        Returns:
            All matching replies in a single batch
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: CommentId) -> bool:
        """Mark a live comment as deleted.

        Args:
            comment_id: The comment ID

        Returns:
            True if the comment was live and is now deleted, False otherwise
        """
        pass
