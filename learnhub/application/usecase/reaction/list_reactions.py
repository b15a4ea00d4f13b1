"""Liked posts and bookmarks listings.

Both relations are keyed by ``(user_id, post_id)``. Clients only ever see
the post ID as cursor; the user half of the key is always the user whose
list is being read, so it is filled in here.
"""

from typing import Any

import logfire
from pydantic import BaseModel

from learnhub.application.usecase.common import PaginationInfo, parse_uuid
from learnhub.application.usecase.post.items import PostPage, enrich
from learnhub.config import PaginationSettings
from learnhub.domain.model import Post
from learnhub.domain.pagination import Page, parse_cursor, parse_limit
from learnhub.domain.service import EngagementService, ReactionService
from learnhub.domain.value import UserId


class ListReactionsRequest(BaseModel):
    """Liked posts / bookmarks request."""

    user_id: str
    cursor: str | None = None  # Post ID of the last item of the previous page
    limit: str | int | None = None


def relation_cursor(user_id: UserId, cursor: str | None) -> dict[str, Any] | None:
    """Complete ``(user_id, post_id)`` cursor from the client's post ID."""
    post_id = parse_cursor(cursor)
    if post_id is None:
        return None
    return {"user_id": str(user_id), "post_id": post_id}


async def _to_response(
    page: Page[Post], engagement_service: EngagementService, user_id: UserId
) -> PostPage:
    next_cursor = page.next_cursor["post_id"] if page.next_cursor else None
    return PostPage(
        data=await enrich(page.data, engagement_service, user_id),
        pagination=PaginationInfo(has_more=page.has_more, next_cursor=next_cursor),
    )


class ListLikedPostsUseCase:
    """Use case for the posts a user liked, most recent first."""

    def __init__(
        self,
        reaction_service: ReactionService,
        engagement_service: EngagementService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize liked posts use case.

        Args:
            reaction_service: Like and bookmark domain service
            engagement_service: Per-viewer post figures
            pagination: Page size settings
        """
        self.reaction_service = reaction_service
        self.engagement_service = engagement_service
        self.pagination = pagination

    async def execute(self, request: ListReactionsRequest) -> PostPage:
        """Execute liked posts flow.

        Raises:
            ValidationError: If user ID, limit or cursor are malformed
        """
        limits = self.pagination.likes
        user_id = UserId(parse_uuid(request.user_id, "user_id"))
        with logfire.span("list_liked_posts.execute", user_id=request.user_id):
            page = await self.reaction_service.get_liked_posts(
                user_id=user_id,
                cursor=relation_cursor(user_id, request.cursor),
                limit=parse_limit(request.limit, limits.default, limits.maximum),
            )
            return await _to_response(page, self.engagement_service, user_id)


class ListBookmarksUseCase:
    """Use case for a user's bookmarks, most recent first."""

    def __init__(
        self,
        reaction_service: ReactionService,
        engagement_service: EngagementService,
        pagination: PaginationSettings,
    ) -> None:
        self.reaction_service = reaction_service
        self.engagement_service = engagement_service
        self.pagination = pagination

    async def execute(self, request: ListReactionsRequest) -> PostPage:
        """Execute bookmarks flow.

        Raises:
            ValidationError: If user ID, limit or cursor are malformed
        """
        limits = self.pagination.bookmarks
        user_id = UserId(parse_uuid(request.user_id, "user_id"))
        with logfire.span("list_bookmarks.execute", user_id=request.user_id):
            page = await self.reaction_service.get_bookmarked_posts(
                user_id=user_id,
                cursor=relation_cursor(user_id, request.cursor),
                limit=parse_limit(request.limit, limits.default, limits.maximum),
            )
            return await _to_response(page, self.engagement_service, user_id)
