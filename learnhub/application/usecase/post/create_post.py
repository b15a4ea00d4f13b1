"""Create post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from learnhub.application.usecase.post.items import PostItem
from learnhub.domain.service import PostService
from learnhub.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str = Field(min_length=1, max_length=300)
    content: str | None = Field(default=None, max_length=10000)
    tag_names: list[str] = Field(default_factory=list, max_length=5)
    file_url: str | None = None
    author_id: str  # Set from the authenticated user


class CreatePostUseCase:
    """Use case for creating a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            Created post
        """
        with logfire.span("create_post.execute", author_id=request.author_id):
            post = await self.post_service.create_post(
                author_id=UserId(UUID(request.author_id)),
                title=request.title,
                content=request.content,
                tag_names=request.tag_names,
                file_url=request.file_url,
            )
            return PostItem.from_post(post)
