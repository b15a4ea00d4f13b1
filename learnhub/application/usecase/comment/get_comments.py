"""Comment listing use cases: a post's thread, replies and a user's comments."""

import logfire
from pydantic import BaseModel

from learnhub.application.usecase.comment.items import CommentItem, CommentPage
from learnhub.application.usecase.common import (
    PaginationInfo,
    parse_comment_id,
    parse_uuid,
)
from learnhub.config import PaginationSettings
from learnhub.domain.pagination import parse_cursor, parse_limit
from learnhub.domain.service import CommentService, CommentThreadService
from learnhub.domain.value import PostId, UserId


class GetCommentsRequest(BaseModel):
    """Top-level comments of a post."""

    post_id: str
    cursor: str | None = None
    limit: str | int | None = None


class GetRepliesRequest(BaseModel):
    """Replies to a top-level comment."""

    comment_id: str | int
    cursor: str | None = None
    limit: str | int | None = None


class GetUserCommentsRequest(BaseModel):
    """Comments written by a user."""

    user_id: str
    cursor: str | None = None
    limit: str | int | None = None


class GetCommentsUseCase:
    """Use case for a post's top-level comments with reply counts."""

    def __init__(
        self, thread_service: CommentThreadService, pagination: PaginationSettings
    ) -> None:
        """Initialize get comments use case.

        Args:
            thread_service: Comment thread reads
            pagination: Page size settings
        """
        self.thread_service = thread_service
        self.pagination = pagination

    async def execute(self, request: GetCommentsRequest) -> CommentPage:
        """Execute get comments flow.

        The total counts every comment of the post, replies included.

        Args:
            request: Get comments request

        Returns:
            Newest-first page of top-level comments

        Raises:
            ValidationError: If post ID, limit or cursor are malformed
            NotFoundError: If the post does not exist
        """
        limits = self.pagination.comments
        post_id = PostId(parse_uuid(request.post_id, "post_id"))
        limit = parse_limit(request.limit, limits.default, limits.maximum)

        with logfire.span("get_comments.execute", post_id=request.post_id, limit=limit):
            page = await self.thread_service.get_top_level_comments(
                post_id=post_id, cursor=parse_cursor(request.cursor), limit=limit
            )
            # One grouped count instead of one query per comment
            reply_counts = await self.thread_service.count_replies(
                [comment.id for comment in page.data]
            )

            return CommentPage(
                data=[
                    CommentItem.from_comment(c, reply_count=reply_counts.get(c.id, 0))
                    for c in page.data
                ],
                pagination=PaginationInfo.of(page),
            )


class GetRepliesUseCase:
    """Use case for the replies of a top-level comment."""

    def __init__(
        self, thread_service: CommentThreadService, pagination: PaginationSettings
    ) -> None:
        self.thread_service = thread_service
        self.pagination = pagination

    async def execute(self, request: GetRepliesRequest) -> CommentPage:
        """Execute get replies flow.

        Raises:
            ValidationError: If comment ID, limit or cursor are malformed
        """
        limits = self.pagination.replies
        page = await self.thread_service.get_replies(
            parent_id=parse_comment_id(request.comment_id),
            cursor=parse_cursor(request.cursor),
            limit=parse_limit(request.limit, limits.default, limits.maximum),
        )
        return CommentPage(
            data=[CommentItem.from_comment(c) for c in page.data],
            pagination=PaginationInfo.of(page),
        )


class GetUserCommentsUseCase:
    """Use case for a user's comments, newest first."""

    def __init__(
        self, comment_service: CommentService, pagination: PaginationSettings
    ) -> None:
        self.comment_service = comment_service
        self.pagination = pagination

    async def execute(self, request: GetUserCommentsRequest) -> CommentPage:
        limits = self.pagination.user_comments
        page = await self.comment_service.get_comments_by_author(
            author_id=UserId(parse_uuid(request.user_id, "user_id")),
            cursor=parse_cursor(request.cursor),
            limit=parse_limit(request.limit, limits.default, limits.maximum),
        )
        return CommentPage(
            data=[CommentItem.from_comment(c) for c in page.data],
            pagination=PaginationInfo.of(page),
        )
