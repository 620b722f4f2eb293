"""Post domain service."""

from datetime import datetime
from typing import Mapping, Optional, Sequence
from uuid import uuid4

import logfire

from anonboard.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from anonboard.domain.model.post import POST_CONTENT_MAX_LENGTH, Post
from anonboard.domain.repository import PostRepository
from anonboard.domain.value import PostCategory, PostCounter, PostId, UserId

from .base import Service
from .moderation import ContentPolicy


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self, post_repository: PostRepository, content_policy: ContentPolicy
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            content_policy: Moderation policy applied to new posts
        """
        self.post_repository = post_repository
        self.content_policy = content_policy

    async def create_post(
        self, author_id: UserId, content: str, category: Optional[str] = None
    ) -> Post:
        """Create a new post.

        Content is trimmed, length-checked and moderated, in that order.
        An omitted or unrecognised category files the post under general.

        Args:
            author_id: Author user ID
            content: Raw post content
            category: Category name (optional)

        Returns:
            Created post

        Raises:
            ValidationError: If content is empty or too long
            ContentRejectedError: If content fails moderation
        """
        with logfire.span(
            "post_service.create_post",
            author_id=str(author_id),
            category=category,
        ):
            text = (content or "").strip()
            if not text:
                raise ValidationError("Content is required")
            if len(text) > POST_CONTENT_MAX_LENGTH:
                raise ValidationError(
                    f"Content too long (max {POST_CONTENT_MAX_LENGTH} characters)"
                )
            self.content_policy.ensure_allowed(text, "post")

            post = Post(
                id=PostId(uuid4()),
                content=text,
                author_id=author_id,
                category=PostCategory.parse(category),
                created_at=datetime.now(),
            )

            saved = await self.post_repository.save(post)
            logfire.info(
                "Post created",
                post_id=str(saved.id),
                category=saved.category.value,
            )
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found (deleted or not), None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id))
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_live_post(self, post_id: PostId) -> Post:
        """Get a post that exists and has not been deleted.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post doesn't exist or is deleted
        """
        post = await self.get_post_by_id(post_id)
        if post is None or post.is_deleted:
            raise NotFoundError("Post", str(post_id))
        return post

    async def get_live_posts_by_ids(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, Post]:
        """Batch-load live posts, keyed by ID.

        Missing and deleted posts are simply absent from the result.

        Args:
            post_ids: Post IDs to load

        Returns:
            Mapping of post ID to post
        """
        if not post_ids:
            return {}

        with logfire.span("post_service.get_live_posts_by_ids", count=len(post_ids)):
            posts = await self.post_repository.find_by_ids(list(set(post_ids)))
            return {post.id: post for post in posts if not post.is_deleted}

    async def list_posts(
        self,
        category: Optional[PostCategory] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Post], int]:
        """List live posts newest-first.

        Args:
            category: Category filter (None for all categories)
            limit: Page size
            offset: Number of posts to skip

        Returns:
            Tuple of (page of posts, total matching posts)
        """
        with logfire.span(
            "post_service.list_posts",
            category=category.value if category else None,
            limit=limit,
            offset=offset,
        ):
            total = await self.post_repository.count(
                category=category, include_deleted=False
            )
            posts = await self.post_repository.find_all(
                category=category,
                include_deleted=False,
                limit=limit,
                offset=offset,
            )
            logfire.info("Posts listed", count=len(posts), total=total)
            return posts, total

    async def repost(self, user_id: UserId, post_id: PostId) -> Post:
        """Repost an existing post.

        The repost copies content and category from the source and points
        back at it. The source's repost count goes up by one. Reposted
        content has already passed moderation, so it is not checked again.

        Args:
            user_id: User making the repost
            post_id: Post being reposted

        Returns:
            The new repost

        Raises:
            NotFoundError: If the source doesn't exist or is deleted
        """
        with logfire.span(
            "post_service.repost", post_id=str(post_id), user_id=str(user_id)
        ):
            source = await self.get_live_post(post_id)

            repost = Post(
                id=PostId(uuid4()),
                content=source.content,
                author_id=user_id,
                category=source.category,
                is_repost=True,
                original_post_id=source.id,
                created_at=datetime.now(),
            )
            saved = await self.post_repository.save(repost)

            await self.apply_counter_deltas(source.id, {PostCounter.REPOST_COUNT: 1})

            logfire.info(
                "Post reposted", repost_id=str(saved.id), original_id=str(source.id)
            )
            return saved

    async def delete_post(self, user_id: UserId, post_id: PostId) -> None:
        """Soft-delete a post owned by the user.

        Args:
            user_id: User requesting the deletion
            post_id: Post ID

        Raises:
            NotFoundError: If the post doesn't exist or is already deleted
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.get_live_post(post_id)

            if post.author_id != user_id:
                logfire.warn(
                    "User attempted to delete post they don't own",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(user_id))

            deleted = await self.post_repository.soft_delete(post_id)
            if not deleted:
                # Deleted concurrently by another request
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post deleted", post_id=str(post_id))

    async def apply_counter_deltas(
        self, post_id: PostId, deltas: Mapping[PostCounter, int]
    ) -> Post | None:
        """Atomically adjust a post's counters.

        Uses a single SQL-level update to avoid race conditions. Counters
        are floored at zero.

        Args:
            post_id: Post ID
            deltas: Amount to add to each counter

        Returns:
            Updated post, or None if the post doesn't exist
        """
        with logfire.span(
            "post_service.apply_counter_deltas",
            post_id=str(post_id),
            deltas={counter.value: delta for counter, delta in deltas.items()},
        ):
            updated = await self.post_repository.apply_counter_deltas(post_id, deltas)
            if updated is None:
                logfire.warn("Post not found for counter update", post_id=str(post_id))
            return updated
