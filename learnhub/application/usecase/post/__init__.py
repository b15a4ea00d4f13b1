"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .items import PostItem, PostPage
from .list_posts import (
    ListFeedRequest,
    ListFeedUseCase,
    ListUserPostsRequest,
    ListUserPostsUseCase,
    SearchPostsRequest,
    SearchPostsUseCase,
)
from .update_post import (
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListFeedRequest",
    "ListFeedUseCase",
    "ListUserPostsRequest",
    "ListUserPostsUseCase",
    "PostItem",
    "PostPage",
    "SearchPostsRequest",
    "SearchPostsUseCase",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
