"""Paginated reads over comment threads."""

from typing import Sequence

import logfire

from learnhub.domain.error import NotFoundError
from learnhub.domain.model.comment import Comment
from learnhub.domain.pagination import (
    Filter,
    IntCursorCodec,
    Page,
    PageRequest,
    SinglePageFetcher,
    asc,
    check_limit,
    desc,
)
from learnhub.domain.repository import CommentRepository, PostRepository
from learnhub.domain.value import CommentId, PostId

from .base import Service


class CommentThreadService(Service):
    """Serves the two read shapes of a thread.

    Top-level comments are listed newest first; replies are listed oldest
    first so they read as a conversation. Both use the same keyset
    pagination over comment ids.
    """

    def __init__(
        self, comment_repository: CommentRepository, post_repository: PostRepository
    ) -> None:
        """Initialize thread service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self._pages = SinglePageFetcher(comment_repository, IntCursorCodec())

    async def get_top_level_comments(
        self, post_id: PostId, cursor: str | int | None, limit: int
    ) -> Page[Comment]:
        """Page through a post's top-level comments, newest first.

        The page total counts every comment of the post, replies included.

        Args:
            post_id: Post ID
            cursor: ID of the last comment of the previous page
            limit: Page size

        Returns:
            Page of top-level comments with total

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "thread_service.get_top_level_comments",
            post_id=str(post_id),
            limit=limit,
        ):
            # Reject malformed input before any store access
            check_limit(limit)
            self._pages.decode_cursor(cursor)

            post = await self.post_repository.find_unique({"id": post_id})
            if post is None:
                raise NotFoundError("Post", str(post_id))

            page = await self._pages.paginate(
                PageRequest(
                    where=Filter.where(post_id=post_id, parent_id=None),
                    order=(desc("created_at"),),
                    cursor=cursor,
                    limit=limit,
                )
            )
            total = await self.comment_repository.count(Filter.where(post_id=post_id))

            logfire.info(
                "Top-level comments retrieved",
                post_id=str(post_id),
                count=len(page.data),
                total=total,
            )
            return page.with_total(total)

    async def get_replies(
        self, parent_id: CommentId, cursor: str | int | None, limit: int
    ) -> Page[Comment]:
        """Page through the replies of a comment, oldest first.

        Args:
            parent_id: Top-level comment ID
            cursor: ID of the last reply of the previous page
            limit: Page size

        Returns:
            Page of replies with the parent's reply count as total
        """
        with logfire.span(
            "thread_service.get_replies", parent_id=parent_id, limit=limit
        ):
            page = await self._pages.paginate(
                PageRequest(
                    where=Filter.where(parent_id=parent_id),
                    order=(asc("created_at"),),
                    cursor=cursor,
                    limit=limit,
                )
            )
            total = await self.comment_repository.count(
                Filter.where(parent_id=parent_id)
            )

            logfire.info(
                "Replies retrieved",
                parent_id=parent_id,
                count=len(page.data),
                total=total,
            )
            return page.with_total(total)

    async def count_replies(
        self, parent_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Reply counts for a batch of top-level comments."""
        if not parent_ids:
            return {}
        return await self.comment_repository.count_replies(parent_ids)
