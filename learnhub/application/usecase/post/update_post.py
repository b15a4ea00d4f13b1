"""Update and delete post use cases."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from learnhub.application.usecase.common import parse_uuid
from learnhub.application.usecase.post.items import PostItem, enrich
from learnhub.domain.service import EngagementService, PostService
from learnhub.domain.value import PostId, UserId, UserRole


class UpdatePostRequest(BaseModel):
    """Update post request; omitted fields keep their value."""

    post_id: str
    title: str | None = Field(default=None, min_length=1, max_length=300)
    content: str | None = Field(default=None, max_length=10000)
    tag_names: list[str] | None = Field(default=None, max_length=5)
    user_id: str  # Set from the authenticated user
    role: UserRole = UserRole.STUDENT


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str
    role: UserRole = UserRole.STUDENT


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    deleted: bool


class UpdatePostUseCase:
    """Use case for editing a post shortly after creating it."""

    def __init__(
        self, post_service: PostService, engagement_service: EngagementService
    ) -> None:
        self.post_service = post_service
        self.engagement_service = engagement_service

    async def execute(self, request: UpdatePostRequest) -> PostItem:
        """Execute update post flow.

        Raises:
            ValidationError: If the post ID is malformed
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the user may not edit the post
            EditWindowExpiredError: If the post is too old to edit
        """
        post_id = PostId(parse_uuid(request.post_id, "post_id"))
        user_id = UserId(UUID(request.user_id))
        with logfire.span("update_post.execute", post_id=request.post_id):
            post = await self.post_service.update_post(
                post_id=post_id,
                user_id=user_id,
                role=request.role,
                title=request.title,
                content=request.content,
                tag_names=request.tag_names,
            )
            (item,) = await enrich([post], self.engagement_service, user_id)
            return item


class DeletePostUseCase:
    """Use case for deleting a post (owner or moderator)."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            ValidationError: If the post ID is malformed
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the user may not delete the post
        """
        post_id = PostId(parse_uuid(request.post_id, "post_id"))
        await self.post_service.delete_post(
            post_id=post_id,
            user_id=UserId(UUID(request.user_id)),
            role=request.role,
        )
        return DeletePostResponse(post_id=request.post_id, deleted=True)
