"""Post item shape shared by the feed, single-post and write responses."""

from datetime import datetime
from typing import Sequence

from anonboard.application.usecase.base import CamelModel
from anonboard.domain.model.post import Post
from anonboard.domain.service import PostService, ReactionService, UserService
from anonboard.domain.value import ReactionType, UserId


class OriginalPostSummary(CamelModel):
    """The post a repost was made from."""

    id: str
    content: str
    author: str


class PostItem(CamelModel):
    """Post as shown to readers."""

    id: str
    content: str
    author: str
    category: str
    likes: int
    dislikes: int
    comment_count: int
    repost_count: int
    is_repost: bool
    original_post_id: str | None = None
    original_post: OriginalPostSummary | None = None
    user_reaction: ReactionType | None = None
    created_at: datetime


class PostItemAssembler:
    """Turns posts into PostItems with a fixed number of batch lookups.

    Author names, originals of reposts and the reader's reactions are each
    loaded with a single query regardless of how many posts are shown.
    """

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> None:
        self.post_service = post_service
        self.user_service = user_service
        self.reaction_service = reaction_service

    async def assemble(
        self, posts: Sequence[Post], viewer_id: UserId | None = None
    ) -> list[PostItem]:
        if not posts:
            return []

        # Originals are weak references: missing or deleted ones show as null
        original_ids = [p.original_post_id for p in posts if p.original_post_id]
        originals = await self.post_service.get_live_posts_by_ids(original_ids)

        author_ids = [p.author_id for p in posts]
        author_ids.extend(original.author_id for original in originals.values())
        names = await self.user_service.get_display_names(author_ids)

        reactions = {}
        if viewer_id is not None:
            reactions = await self.reaction_service.get_user_reactions_for_posts(
                user_id=viewer_id, post_ids=[p.id for p in posts]
            )

        items = []
        for post in posts:
            original = (
                originals.get(post.original_post_id) if post.original_post_id else None
            )
            items.append(
                PostItem(
                    id=str(post.id),
                    content=post.content,
                    author=names[post.author_id],
                    category=post.category.value,
                    likes=post.likes,
                    dislikes=post.dislikes,
                    comment_count=post.comment_count,
                    repost_count=post.repost_count,
                    is_repost=post.is_repost,
                    original_post_id=(
                        str(post.original_post_id) if post.original_post_id else None
                    ),
                    original_post=(
                        OriginalPostSummary(
                            id=str(original.id),
                            content=original.content,
                            author=names[original.author_id],
                        )
                        if original
                        else None
                    ),
                    user_reaction=reactions.get(post.id),
                    created_at=post.created_at,
                )
            )
        return items
