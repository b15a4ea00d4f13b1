"""Like and bookmark use cases."""

from .bookmark import (
    BookmarkPostUseCase,
    BookmarkRequest,
    BookmarkResponse,
    RemoveBookmarkUseCase,
)
from .like import LikePostUseCase, LikeRequest, LikeResponse, UnlikePostUseCase
from .list_reactions import (
    ListBookmarksUseCase,
    ListLikedPostsUseCase,
    ListReactionsRequest,
)

__all__ = [
    "BookmarkPostUseCase",
    "BookmarkRequest",
    "BookmarkResponse",
    "LikePostUseCase",
    "LikeRequest",
    "LikeResponse",
    "ListBookmarksUseCase",
    "ListLikedPostsUseCase",
    "ListReactionsRequest",
    "RemoveBookmarkUseCase",
    "UnlikePostUseCase",
]
