"""Post listing use cases: feed, posts by user and search."""

import logfire
from pydantic import BaseModel

from learnhub.application.usecase.common import PaginationInfo, parse_uuid
from learnhub.application.usecase.post.items import PostPage, enrich, viewer_of
from learnhub.config import PaginationSettings
from learnhub.domain.model import Post
from learnhub.domain.pagination import Page, parse_cursor, parse_limit
from learnhub.domain.service import EngagementService, PostService
from learnhub.domain.value import UserId


class ListFeedRequest(BaseModel):
    """Feed request."""

    tag: str | None = None
    cursor: str | None = None
    limit: str | int | None = None
    viewer_id: str | None = None


class ListUserPostsRequest(BaseModel):
    """Posts by user request."""

    user_id: str
    cursor: str | None = None
    limit: str | int | None = None
    viewer_id: str | None = None


class SearchPostsRequest(BaseModel):
    """Search request."""

    query: str = ""
    tag: str | None = None
    cursor: str | None = None
    limit: str | int | None = None
    viewer_id: str | None = None


async def _to_response(
    page: Page[Post], engagement_service: EngagementService, viewer: str | None
) -> PostPage:
    return PostPage(
        data=await enrich(page.data, engagement_service, viewer_of(viewer)),
        pagination=PaginationInfo.of(page),
    )


class ListFeedUseCase:
    """Use case for the newest-first feed of visible posts."""

    def __init__(
        self,
        post_service: PostService,
        engagement_service: EngagementService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize feed use case.

        Args:
            post_service: Post domain service
            engagement_service: Per-viewer post figures
            pagination: Page size settings
        """
        self.post_service = post_service
        self.engagement_service = engagement_service
        self.pagination = pagination

    async def execute(self, request: ListFeedRequest) -> PostPage:
        """Execute feed flow.

        Args:
            request: Feed request with optional tag filter

        Returns:
            Page of posts

        Raises:
            ValidationError: If limit or cursor are malformed
        """
        limits = self.pagination.feed
        with logfire.span("list_feed.execute", tag=request.tag):
            page = await self.post_service.get_feed(
                cursor=parse_cursor(request.cursor),
                limit=parse_limit(request.limit, limits.default, limits.maximum),
                tag=request.tag,
            )
            return await _to_response(page, self.engagement_service, request.viewer_id)


class ListUserPostsUseCase:
    """Use case for a user's posts, with total."""

    def __init__(
        self,
        post_service: PostService,
        engagement_service: EngagementService,
        pagination: PaginationSettings,
    ) -> None:
        self.post_service = post_service
        self.engagement_service = engagement_service
        self.pagination = pagination

    async def execute(self, request: ListUserPostsRequest) -> PostPage:
        """Execute posts-by-user flow.

        Raises:
            ValidationError: If user ID, limit or cursor are malformed
        """
        limits = self.pagination.user_posts
        author_id = UserId(parse_uuid(request.user_id, "user_id"))
        page = await self.post_service.get_posts_by_author(
            author_id=author_id,
            cursor=parse_cursor(request.cursor),
            limit=parse_limit(request.limit, limits.default, limits.maximum),
        )
        return await _to_response(page, self.engagement_service, request.viewer_id)


class SearchPostsUseCase:
    """Use case for searching posts by title or content."""

    def __init__(
        self,
        post_service: PostService,
        engagement_service: EngagementService,
        pagination: PaginationSettings,
    ) -> None:
        self.post_service = post_service
        self.engagement_service = engagement_service
        self.pagination = pagination

    async def execute(self, request: SearchPostsRequest) -> PostPage:
        """Execute search flow.

        Raises:
            ValidationError: If limit or cursor are malformed
        """
        limits = self.pagination.search
        with logfire.span("search_posts.execute", query=request.query, tag=request.tag):
            page = await self.post_service.search_posts(
                query=request.query,
                cursor=parse_cursor(request.cursor),
                limit=parse_limit(request.limit, limits.default, limits.maximum),
                tag=request.tag,
            )
            return await _to_response(page, self.engagement_service, request.viewer_id)
