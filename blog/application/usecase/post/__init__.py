"""Post use cases."""

from .count_posts import CountPostsResponse, CountPostsUseCase
from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase, PostResponse
from .list_posts import (
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostListItem,
)
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CountPostsResponse",
    "CountPostsUseCase",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostListItem",
    "PostResponse",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
