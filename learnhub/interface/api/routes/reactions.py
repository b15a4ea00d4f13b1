"""Like and bookmark routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status

from learnhub.application.usecase.post import PostPage
from learnhub.application.usecase.reaction import (
    BookmarkPostUseCase,
    BookmarkRequest,
    BookmarkResponse,
    LikePostUseCase,
    LikeRequest,
    LikeResponse,
    ListBookmarksUseCase,
    ListLikedPostsUseCase,
    ListReactionsRequest,
    RemoveBookmarkUseCase,
    UnlikePostUseCase,
)
from learnhub.domain.error import DomainError
from learnhub.interface.api.identity import CurrentUser, get_current_user
from learnhub.interface.error import to_http_exception
from learnhub.persistence.error import StoreError

router = APIRouter(tags=["reactions"], route_class=DishkaRoute)


@router.post(
    "/posts/{post_id}/like",
    response_model=LikeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def like_post(
    post_id: str,
    like_post_use_case: FromDishka[LikePostUseCase],
    user: CurrentUser = Depends(get_current_user),
) -> LikeResponse:
    """Like a post. 409 if already liked."""
    try:
        return await like_post_use_case.execute(
            LikeRequest(post_id=post_id, user_id=user.user_id)
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.delete("/posts/{post_id}/like", response_model=LikeResponse)
async def unlike_post(
    post_id: str,
    unlike_post_use_case: FromDishka[UnlikePostUseCase],
    user: CurrentUser = Depends(get_current_user),
) -> LikeResponse:
    """Remove a like. 404 if the post was not liked."""
    try:
        return await unlike_post_use_case.execute(
            LikeRequest(post_id=post_id, user_id=user.user_id)
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.get("/users/me/posts/like", response_model=PostPage)
async def list_liked_posts(
    list_liked_posts_use_case: FromDishka[ListLikedPostsUseCase],
    cursor: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    user: CurrentUser = Depends(get_current_user),
) -> PostPage:
    """Posts the authenticated user liked, most recent first.

    The cursor is the post ID returned as ``next_cursor``.
    """
    try:
        return await list_liked_posts_use_case.execute(
            ListReactionsRequest(user_id=user.user_id, cursor=cursor, limit=limit)
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.post(
    "/posts/{post_id}/bookmark",
    response_model=BookmarkResponse,
    status_code=status.HTTP_201_CREATED,
)
async def bookmark_post(
    post_id: str,
    bookmark_post_use_case: FromDishka[BookmarkPostUseCase],
    user: CurrentUser = Depends(get_current_user),
) -> BookmarkResponse:
    """Bookmark a post. 409 if already bookmarked."""
    try:
        return await bookmark_post_use_case.execute(
            BookmarkRequest(post_id=post_id, user_id=user.user_id)
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.delete("/posts/{post_id}/bookmark", response_model=BookmarkResponse)
async def remove_bookmark(
    post_id: str,
    remove_bookmark_use_case: FromDishka[RemoveBookmarkUseCase],
    user: CurrentUser = Depends(get_current_user),
) -> BookmarkResponse:
    """Remove a bookmark. 404 if the post was not bookmarked."""
    try:
        return await remove_bookmark_use_case.execute(
            BookmarkRequest(post_id=post_id, user_id=user.user_id)
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.get("/users/bookmarks", response_model=PostPage)
async def list_bookmarks(
    list_bookmarks_use_case: FromDishka[ListBookmarksUseCase],
    cursor: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    user: CurrentUser = Depends(get_current_user),
) -> PostPage:
    """Bookmarks of the authenticated user, most recent first.

    The cursor is the post ID returned as ``next_cursor``.
    """
    try:
        return await list_bookmarks_use_case.execute(
            ListReactionsRequest(user_id=user.user_id, cursor=cursor, limit=limit)
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)
