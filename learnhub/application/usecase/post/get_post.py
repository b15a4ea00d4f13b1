"""Get post use case."""

from pydantic import BaseModel

from learnhub.application.usecase.common import parse_uuid
from learnhub.application.usecase.post.items import PostItem, enrich, viewer_of
from learnhub.domain.error import NotFoundError
from learnhub.domain.service import EngagementService, PostService
from learnhub.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str
    viewer_id: str | None = None  # Set from the authenticated user, if any


class GetPostUseCase:
    """Use case for fetching a single visible post."""

    def __init__(
        self, post_service: PostService, engagement_service: EngagementService
    ) -> None:
        self.post_service = post_service
        self.engagement_service = engagement_service

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Execute get post flow.

        Hidden posts are reported as missing.

        Raises:
            NotFoundError: If the post does not exist or is hidden
        """
        post_id = PostId(parse_uuid(request.post_id, "post_id"))
        viewer_id = viewer_of(request.viewer_id)
        post = await self.post_service.require_post(post_id)
        if post.hidden:
            raise NotFoundError("Post", request.post_id)
        (item,) = await enrich([post], self.engagement_service, viewer_id)
        return item
