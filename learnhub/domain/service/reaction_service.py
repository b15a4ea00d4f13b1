"""Like and bookmark domain service."""

from datetime import datetime
from typing import Any, Mapping

import logfire

from learnhub.domain.error import AlreadyExistsError, NotFoundError
from learnhub.domain.model.post import Post
from learnhub.domain.pagination import (
    CompoundCursorCodec,
    CompoundPageFetcher,
    Filter,
    Page,
    PageRequest,
    UUIDCursorCodec,
    desc,
)
from learnhub.domain.repository import (
    POST_HIDDEN,
    BookmarkRepository,
    Collection,
    LikeRepository,
)
from learnhub.domain.model.reaction import Bookmark, Like
from learnhub.domain.value import PostId, UserId

from .base import Service
from .post_service import PostService


def relation_cursor_codec() -> CompoundCursorCodec:
    """Codec for ``(user_id, post_id)`` cursors."""
    return CompoundCursorCodec(
        {"user_id": UUIDCursorCodec(), "post_id": UUIDCursorCodec()}
    )


class ReactionService(Service):
    """Likes and bookmarks: user-to-post relations keyed by ``(user_id, post_id)``."""

    def __init__(
        self,
        like_repository: LikeRepository,
        bookmark_repository: BookmarkRepository,
        post_service: PostService,
    ) -> None:
        """Initialize reaction service.

        Args:
            like_repository: Like repository
            bookmark_repository: Bookmark repository
            post_service: Post domain service
        """
        self.like_repository = like_repository
        self.bookmark_repository = bookmark_repository
        self.post_service = post_service
        self._like_pages = CompoundPageFetcher(like_repository, relation_cursor_codec())
        self._bookmark_pages = CompoundPageFetcher(
            bookmark_repository, relation_cursor_codec()
        )

    async def like_post(self, user_id: UserId, post_id: PostId) -> Like:
        """Like a post.

        Raises:
            NotFoundError: If the post does not exist
            AlreadyExistsError: If the user already likes the post
        """
        with logfire.span(
            "reaction_service.like_post", user_id=str(user_id), post_id=str(post_id)
        ):
            return await self._add(self.like_repository, "Like", user_id, post_id)

    async def unlike_post(self, user_id: UserId, post_id: PostId) -> None:
        """Remove a like.

        Raises:
            NotFoundError: If the user does not like the post
        """
        with logfire.span(
            "reaction_service.unlike_post", user_id=str(user_id), post_id=str(post_id)
        ):
            await self._remove(self.like_repository, "Like", user_id, post_id)

    async def bookmark_post(self, user_id: UserId, post_id: PostId) -> Bookmark:
        """Bookmark a post.

        Raises:
            NotFoundError: If the post does not exist
            AlreadyExistsError: If the post is already bookmarked
        """
        with logfire.span(
            "reaction_service.bookmark_post", user_id=str(user_id), post_id=str(post_id)
        ):
            return await self._add(
                self.bookmark_repository, "Bookmark", user_id, post_id
            )

    async def remove_bookmark(self, user_id: UserId, post_id: PostId) -> None:
        """Remove a bookmark.

        Raises:
            NotFoundError: If the post is not bookmarked
        """
        with logfire.span(
            "reaction_service.remove_bookmark",
            user_id=str(user_id),
            post_id=str(post_id),
        ):
            await self._remove(self.bookmark_repository, "Bookmark", user_id, post_id)

    async def get_liked_posts(
        self, user_id: UserId, cursor: Mapping[str, Any] | None, limit: int
    ) -> Page[Post]:
        """Page through the posts a user liked, most recently liked first.

        Args:
            user_id: User ID
            cursor: Complete ``(user_id, post_id)`` key of the last like of
                the previous page
            limit: Page size

        Returns:
            Page of posts; ``next_cursor`` is the compound key of the last like
        """
        with logfire.span(
            "reaction_service.get_liked_posts", user_id=str(user_id), limit=limit
        ):
            page = await self._like_pages.paginate(
                PageRequest(
                    where=self._visible_of(user_id),
                    order=(desc("created_at"),),
                    cursor=cursor,
                    limit=limit,
                )
            )
            return await self._project_posts(page)

    async def get_bookmarked_posts(
        self, user_id: UserId, cursor: Mapping[str, Any] | None, limit: int
    ) -> Page[Post]:
        """Page through a user's bookmarks, most recently saved first.

        Args:
            user_id: User ID
            cursor: Complete ``(user_id, post_id)`` key of the last bookmark
                of the previous page
            limit: Page size

        Returns:
            Page of posts; ``next_cursor`` is the compound key of the last
            bookmark
        """
        with logfire.span(
            "reaction_service.get_bookmarked_posts", user_id=str(user_id), limit=limit
        ):
            page = await self._bookmark_pages.paginate(
                PageRequest(
                    where=self._visible_of(user_id),
                    order=(desc("created_at"),),
                    cursor=cursor,
                    limit=limit,
                )
            )
            return await self._project_posts(page)

    async def _add(
        self, repository: Collection, resource: str, user_id: UserId, post_id: PostId
    ) -> Any:
        await self.post_service.require_post(post_id)

        key = {"user_id": user_id, "post_id": post_id}
        if await repository.find_unique(key) is not None:
            logfire.warn(
                f"Duplicate {resource.lower()} attempt",
                user_id=str(user_id),
                post_id=str(post_id),
            )
            raise AlreadyExistsError(resource, f"{user_id}/{post_id}")

        saved = await repository.create({**key, "created_at": datetime.now()})
        logfire.info(f"{resource} added", user_id=str(user_id), post_id=str(post_id))
        return saved

    async def _remove(
        self, repository: Collection, resource: str, user_id: UserId, post_id: PostId
    ) -> None:
        deleted = await repository.delete({"user_id": user_id, "post_id": post_id})
        if not deleted:
            logfire.warn(
                f"{resource} not found for removal",
                user_id=str(user_id),
                post_id=str(post_id),
            )
            raise NotFoundError(resource, f"{user_id}/{post_id}")
        logfire.info(f"{resource} removed", user_id=str(user_id), post_id=str(post_id))

    @staticmethod
    def _visible_of(user_id: UserId) -> Filter:
        # Hidden posts are excluded in the query so pages stay full
        return Filter.where(user_id=user_id, **{POST_HIDDEN: False})

    async def _project_posts(self, page: Page[Like] | Page[Bookmark]) -> Page[Post]:
        posts = await self.post_service.get_posts_by_ids(
            [row.post_id for row in page.data]
        )
        return Page(
            data=[posts[row.post_id] for row in page.data if row.post_id in posts],
            has_more=page.has_more,
            next_cursor=page.next_cursor,
            total=page.total,
        )
