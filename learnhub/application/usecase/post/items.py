"""Post response items."""

from datetime import datetime
from typing import Sequence

from pydantic import BaseModel

from learnhub.application.usecase.common import PaginationInfo, parse_uuid
from learnhub.domain.model import Post, PostEngagement
from learnhub.domain.service import EngagementService
from learnhub.domain.value import UserId


class PostItem(BaseModel):
    """Post item in responses.

    Engagement fields are relative to the user reading the post; anonymous
    readers see counts only.
    """

    post_id: str
    title: str
    content: str | None
    author_id: str
    tag_names: list[str]
    file_url: str | None
    created_at: datetime
    like_count: int = 0
    comment_count: int = 0
    is_liked: bool = False
    is_bookmarked: bool = False

    @classmethod
    def from_post(
        cls, post: Post, engagement: PostEngagement | None = None
    ) -> "PostItem":
        engagement = engagement or PostEngagement()
        return cls(
            post_id=str(post.id),
            title=post.title,
            content=post.content,
            author_id=str(post.author_id),
            tag_names=list(post.tag_names),
            file_url=post.file_url,
            created_at=post.created_at,
            **engagement.model_dump(),
        )


class PostPage(BaseModel):
    """A page of posts."""

    data: list[PostItem]
    pagination: PaginationInfo


def viewer_of(raw: str | None) -> UserId | None:
    """Parse the optional ID of the user reading a listing."""
    return UserId(parse_uuid(raw, "viewer_id")) if raw else None


async def enrich(
    posts: Sequence[Post],
    engagement_service: EngagementService,
    viewer_id: UserId | None,
) -> list[PostItem]:
    """Response items for posts, with engagement fetched in one batch."""
    engagement = await engagement_service.for_posts([p.id for p in posts], viewer_id)
    return [PostItem.from_post(post, engagement.get(post.id)) for post in posts]
