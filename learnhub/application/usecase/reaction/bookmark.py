"""Bookmark use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from learnhub.application.usecase.common import parse_uuid
from learnhub.domain.service import ReactionService
from learnhub.domain.value import PostId, UserId


class BookmarkRequest(BaseModel):
    """Bookmark/remove bookmark request."""

    post_id: str
    user_id: str  # Set from the authenticated user


class BookmarkResponse(BaseModel):
    """Bookmark response."""

    post_id: str
    bookmarked: bool
    created_at: datetime | None = None


class BookmarkPostUseCase:
    """Use case for bookmarking a post."""

    def __init__(self, reaction_service: ReactionService) -> None:
        self.reaction_service = reaction_service

    async def execute(self, request: BookmarkRequest) -> BookmarkResponse:
        """Execute bookmark flow.

        Raises:
            NotFoundError: If the post does not exist
            AlreadyExistsError: If the post is already bookmarked
        """
        bookmark = await self.reaction_service.bookmark_post(
            user_id=UserId(UUID(request.user_id)),
            post_id=PostId(parse_uuid(request.post_id, "post_id")),
        )
        return BookmarkResponse(
            post_id=str(bookmark.post_id),
            bookmarked=True,
            created_at=bookmark.created_at,
        )


class RemoveBookmarkUseCase:
    """Use case for removing a bookmark."""

    def __init__(self, reaction_service: ReactionService) -> None:
        self.reaction_service = reaction_service

    async def execute(self, request: BookmarkRequest) -> BookmarkResponse:
        """Execute remove bookmark flow.

        Raises:
            NotFoundError: If the post is not bookmarked
        """
        await self.reaction_service.remove_bookmark(
            user_id=UserId(UUID(request.user_id)),
            post_id=PostId(parse_uuid(request.post_id, "post_id")),
        )
        return BookmarkResponse(post_id=request.post_id, bookmarked=False)
