"""Post routes: creation, editing, feed, search and per-user listings."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from learnhub.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListFeedRequest,
    ListFeedUseCase,
    ListUserPostsRequest,
    ListUserPostsUseCase,
    PostItem,
    PostPage,
    SearchPostsRequest,
    SearchPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from learnhub.domain.error import DomainError
from learnhub.interface.api.identity import (
    CurrentUser,
    get_current_user,
    get_optional_user,
)
from learnhub.interface.error import to_http_exception
from learnhub.persistence.error import StoreError

router = APIRouter(tags=["posts"], route_class=DishkaRoute)


def _viewer_id(viewer: CurrentUser | None) -> str | None:
    return viewer.user_id if viewer else None


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=300)
    content: str | None = Field(default=None, max_length=10000)
    tag_names: list[str] = Field(default_factory=list, max_length=5)
    file_url: str | None = None


class UpdatePostAPIRequest(BaseModel):
    """API request for editing a post; omitted fields keep their value."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    content: str | None = Field(default=None, max_length=10000)
    tag_names: list[str] | None = Field(default=None, max_length=5)


@router.post("/posts", response_model=PostItem, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    user: CurrentUser = Depends(get_current_user),
) -> PostItem:
    """Create a post. Requires authentication."""
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                title=request.title,
                content=request.content,
                tag_names=request.tag_names,
                file_url=request.file_url,
                author_id=user.user_id,
            )
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.get("/posts", response_model=PostPage)
async def list_feed(
    list_feed_use_case: FromDishka[ListFeedUseCase],
    tag: str | None = Query(default=None),
    cursor: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    viewer: CurrentUser | None = Depends(get_optional_user),
) -> PostPage:
    """Newest-first feed of visible posts.

    Args:
        list_feed_use_case: Feed use case from DI
        tag: Only posts with this tag
        cursor: ``next_cursor`` of the previous page
        limit: Page size (clamped to the configured maximum)
        viewer: Signed-in user, if any; fills is_liked and is_bookmarked

    Returns:
        Page of posts
    """
    try:
        return await list_feed_use_case.execute(
            ListFeedRequest(
                tag=tag, cursor=cursor, limit=limit, viewer_id=_viewer_id(viewer)
            )
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.get("/search/posts", response_model=PostPage)
async def search_posts(
    search_posts_use_case: FromDishka[SearchPostsUseCase],
    q: str = Query(default=""),
    tag: str | None = Query(default=None),
    cursor: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    viewer: CurrentUser | None = Depends(get_optional_user),
) -> PostPage:
    """Case-insensitive search over post titles and content."""
    try:
        return await search_posts_use_case.execute(
            SearchPostsRequest(
                query=q,
                tag=tag,
                cursor=cursor,
                limit=limit,
                viewer_id=_viewer_id(viewer),
            )
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.get("/posts/{post_id}", response_model=PostItem)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    viewer: CurrentUser | None = Depends(get_optional_user),
) -> PostItem:
    """Get a single post, with the viewer's likes and bookmarks if signed in."""
    try:
        return await get_post_use_case.execute(
            GetPostRequest(post_id=post_id, viewer_id=_viewer_id(viewer))
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.get("/users/me/posts", response_model=PostPage)
async def list_my_posts(
    list_user_posts_use_case: FromDishka[ListUserPostsUseCase],
    cursor: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    user: CurrentUser = Depends(get_current_user),
) -> PostPage:
    """Posts of the authenticated user, with total."""
    try:
        return await list_user_posts_use_case.execute(
            ListUserPostsRequest(
                user_id=user.user_id,
                cursor=cursor,
                limit=limit,
                viewer_id=user.user_id,
            )
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.get("/users/{user_id}/posts", response_model=PostPage)
async def list_user_posts(
    user_id: str,
    list_user_posts_use_case: FromDishka[ListUserPostsUseCase],
    cursor: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    viewer: CurrentUser | None = Depends(get_optional_user),
) -> PostPage:
    """Posts of a user, newest first, with total."""
    try:
        return await list_user_posts_use_case.execute(
            ListUserPostsRequest(
                user_id=user_id,
                cursor=cursor,
                limit=limit,
                viewer_id=_viewer_id(viewer),
            )
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.patch("/posts/{post_id}", response_model=PostItem)
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    user: CurrentUser = Depends(get_current_user),
) -> PostItem:
    """Edit a post within the edit window. Authors and admins only."""
    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=post_id,
                title=request.title,
                content=request.content,
                tag_names=request.tag_names,
                user_id=user.user_id,
                role=user.role,
            )
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.delete("/posts/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    user: CurrentUser = Depends(get_current_user),
) -> DeletePostResponse:
    """Delete a post with its comments and reactions. Authors and moderators."""
    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=post_id, user_id=user.user_id, role=user.role)
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)
