"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .items import OriginalPostSummary, PostItem, PostItemAssembler
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .repost import RepostRequest, RepostResponse, RepostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "OriginalPostSummary",
    "PostItem",
    "PostItemAssembler",
    "RepostRequest",
    "RepostResponse",
    "RepostUseCase",
]
