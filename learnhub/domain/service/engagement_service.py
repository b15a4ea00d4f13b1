"""Per-viewer engagement figures for posts."""

from typing import Sequence

import logfire

from learnhub.domain.model.post import PostEngagement
from learnhub.domain.repository import (
    BookmarkRepository,
    CommentRepository,
    LikeRepository,
)
from learnhub.domain.value import PostId, UserId

from .base import Service


class EngagementService(Service):
    """Counts likes and comments of posts and the viewer's own reactions.

    Every figure for a batch of posts comes from one query per table.
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        bookmark_repository: BookmarkRepository,
        comment_repository: CommentRepository,
    ) -> None:
        self.like_repository = like_repository
        self.bookmark_repository = bookmark_repository
        self.comment_repository = comment_repository

    async def for_posts(
        self, post_ids: Sequence[PostId], viewer_id: UserId | None = None
    ) -> dict[PostId, PostEngagement]:
        """Engagement of several posts as seen by one viewer.

        Args:
            post_ids: Post IDs
            viewer_id: User looking at the posts; anonymous viewers never
                have liked or bookmarked anything

        Returns:
            Engagement for every requested post ID
        """
        ids = list(dict.fromkeys(post_ids))
        if not ids:
            return {}
        with logfire.span("engagement_service.for_posts", count=len(ids)):
            likes = await self.like_repository.count_by_post(ids)
            comments = await self.comment_repository.count_by_post(ids)
            liked: set[PostId] = set()
            bookmarked: set[PostId] = set()
            if viewer_id is not None:
                liked = await self.like_repository.post_ids_of(viewer_id, ids)
                bookmarked = await self.bookmark_repository.post_ids_of(viewer_id, ids)
            return {
                pid: PostEngagement(
                    like_count=likes.get(pid, 0),
                    comment_count=comments.get(pid, 0),
                    is_liked=pid in liked,
                    is_bookmarked=pid in bookmarked,
                )
                for pid in ids
            }
