"""Like and unlike use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from learnhub.application.usecase.common import parse_uuid
from learnhub.domain.service import ReactionService
from learnhub.domain.value import PostId, UserId


class LikeRequest(BaseModel):
    """Like/unlike request."""

    post_id: str
    user_id: str  # Set from the authenticated user


class LikeResponse(BaseModel):
    """Like response."""

    post_id: str
    liked: bool
    created_at: datetime | None = None


class LikePostUseCase:
    """Use case for liking a post."""

    def __init__(self, reaction_service: ReactionService) -> None:
        self.reaction_service = reaction_service

    async def execute(self, request: LikeRequest) -> LikeResponse:
        """Execute like flow.

        Raises:
            NotFoundError: If the post does not exist
            AlreadyExistsError: If the user already likes the post
        """
        like = await self.reaction_service.like_post(
            user_id=UserId(UUID(request.user_id)),
            post_id=PostId(parse_uuid(request.post_id, "post_id")),
        )
        return LikeResponse(
            post_id=str(like.post_id), liked=True, created_at=like.created_at
        )


class UnlikePostUseCase:
    """Use case for removing a like."""

    def __init__(self, reaction_service: ReactionService) -> None:
        self.reaction_service = reaction_service

    async def execute(self, request: LikeRequest) -> LikeResponse:
        """Execute unlike flow.

        Raises:
            NotFoundError: If the user does not like the post
        """
        await self.reaction_service.unlike_post(
            user_id=UserId(UUID(request.user_id)),
            post_id=PostId(parse_uuid(request.post_id, "post_id")),
        )
        return LikeResponse(post_id=request.post_id, liked=False)
