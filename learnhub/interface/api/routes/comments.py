"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from learnhub.application.usecase.comment import (
    CommentItem,
    CommentPage,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    GetUserCommentsRequest,
    GetUserCommentsUseCase,
)
from learnhub.domain.error import DomainError, MismatchError, NotAuthorizedError
from learnhub.interface.api.identity import CurrentUser, get_current_user
from learnhub.interface.error import to_http_exception
from learnhub.persistence.error import StoreError

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=10000)
    parent_id: int | None = None  # Comment being answered, for replies


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    user: CurrentUser = Depends(get_current_user),
) -> CommentItem:
    """Create a comment on a post or reply to another comment.

    Requires authentication. Answering a reply attaches the new comment to
    the top-level comment and mentions the reply's author.

    Args:
        post_id: Post UUID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        user: Authenticated user

    Returns:
        Created comment as stored

    Raises:
        HTTPException: 400 for malformed input or a parent on another post,
            404 if the post or parent does not exist
    """
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=post_id,
                content=request.content,
                parent_id=request.parent_id,
                author_id=user.user_id,
            )
        )
    except MismatchError as e:
        logfire.warn("Comment parent on another post", error=str(e))
        raise to_http_exception(e)
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.get("/posts/{post_id}/comments", response_model=CommentPage)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    cursor: str | None = Query(default=None),
    limit: str | None = Query(default=None),
) -> CommentPage:
    """Top-level comments of a post, newest first, with reply counts.

    ``pagination.total`` counts all comments of the post, replies included.
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(post_id=post_id, cursor=cursor, limit=limit)
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.get("/comments/{comment_id}/replies", response_model=CommentPage)
async def get_replies(
    comment_id: str,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
    cursor: str | None = Query(default=None),
    limit: str | None = Query(default=None),
) -> CommentPage:
    """Replies to a comment, oldest first, with reply count as total."""
    try:
        return await get_replies_use_case.execute(
            GetRepliesRequest(comment_id=comment_id, cursor=cursor, limit=limit)
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    user: CurrentUser = Depends(get_current_user),
) -> DeleteCommentResponse:
    """Delete a comment. Only its author or a moderator may do so."""
    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(
                comment_id=comment_id, user_id=user.user_id, role=user.role
            )
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment deletion attempt", error=str(e))
        raise to_http_exception(e)
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.get("/users/{user_id}/comments", response_model=CommentPage)
async def get_user_comments(
    user_id: str,
    get_user_comments_use_case: FromDishka[GetUserCommentsUseCase],
    cursor: str | None = Query(default=None),
    limit: str | None = Query(default=None),
) -> CommentPage:
    """Comments written by a user, newest first."""
    try:
        return await get_user_comments_use_case.execute(
            GetUserCommentsRequest(user_id=user_id, cursor=cursor, limit=limit)
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)
