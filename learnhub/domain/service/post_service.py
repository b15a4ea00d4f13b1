"""Post domain service."""

from datetime import datetime, timedelta
from typing import Sequence
from uuid import uuid4

import logfire

from learnhub.domain.error import (
    EditWindowExpiredError,
    NotAuthorizedError,
    NotFoundError,
)
from learnhub.domain.model.post import Post
from learnhub.domain.pagination import (
    Condition,
    Filter,
    Op,
    Page,
    PageRequest,
    SinglePageFetcher,
    UUIDCursorCodec,
    desc,
)
from learnhub.domain.repository import PostRepository
from learnhub.domain.value import PostId, UserId, UserRole

from .base import Service

EDIT_WINDOW = timedelta(minutes=5)


def normalize_tags(tag_names: Sequence[str]) -> list[str]:
    """Trim, lowercase and de-duplicate tags, keeping first-seen order."""
    return list(dict.fromkeys(t.strip().lower() for t in tag_names if t.strip()))


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self, post_repository: PostRepository, edit_window: timedelta = EDIT_WINDOW
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            edit_window: How long after creation a post may be edited
        """
        self.post_repository = post_repository
        self.edit_window = edit_window
        self._pages = SinglePageFetcher(post_repository, UUIDCursorCodec())

    async def create_post(
        self,
        author_id: UserId,
        title: str,
        content: str | None = None,
        tag_names: Sequence[str] = (),
        file_url: str | None = None,
    ) -> Post:
        """Create a post.

        Args:
            author_id: Author user ID
            title: Post title
            content: Post body
            tag_names: Tags, de-duplicated and lowercased
            file_url: Reference to an uploaded resource

        Returns:
            Created post
        """
        tags = normalize_tags(tag_names)
        with logfire.span(
            "post_service.create_post", author_id=str(author_id), title=title
        ):
            # Validate through the model before touching the store
            post = Post(
                id=PostId(uuid4()),
                title=title,
                content=content,
                author_id=author_id,
                tag_names=tags,
                file_url=file_url,
                created_at=datetime.now(),
            )
            saved = await self.post_repository.create(post.model_dump())
            logfire.info("Post created", post_id=str(saved.id), tags=tags)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_unique({"id": post_id})

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def require_post(self, post_id: PostId) -> Post:
        """Get a post by ID or fail.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        return post

    async def update_post(
        self,
        post_id: PostId,
        user_id: UserId,
        role: UserRole = UserRole.STUDENT,
        title: str | None = None,
        content: str | None = None,
        tag_names: Sequence[str] | None = None,
    ) -> Post:
        """Change the title, content or tags of a post.

        Authors may edit their own posts and admins any post, in both cases
        only within the edit window after creation. Omitted fields keep
        their value.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the user may not edit the post
            EditWindowExpiredError: If the edit window has closed
        """
        with logfire.span(
            "post_service.update_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.require_post(post_id)
            if post.owner_id != user_id and role is not UserRole.ADMIN:
                logfire.warn(
                    "Unauthorized post edit attempt",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(user_id), "edit")

            age = datetime.now(post.created_at.tzinfo) - post.created_at
            if age > self.edit_window:
                logfire.warn(
                    "Edit window expired", post_id=str(post_id), age=str(age)
                )
                raise EditWindowExpiredError(str(post_id))

            changes: dict = {}
            if title is not None:
                changes["title"] = title
            if content is not None:
                changes["content"] = content
            if tag_names is not None:
                changes["tag_names"] = normalize_tags(tag_names)
            if not changes:
                return post

            # Validate through the model before touching the store
            Post(**{**post.model_dump(), **changes})
            updated = await self.post_repository.update({"id": post_id}, changes)
            if updated is None:
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post updated", post_id=str(post_id), fields=list(changes))
            return updated

    async def delete_post(
        self,
        post_id: PostId,
        user_id: UserId,
        role: UserRole = UserRole.STUDENT,
    ) -> None:
        """Delete a post with its comments, reactions and reports.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the user neither owns the post nor
                may moderate
        """
        with logfire.span(
            "post_service.delete_post",
            post_id=str(post_id),
            user_id=str(user_id),
            role=role.value,
        ):
            post = await self.require_post(post_id)
            if post.owner_id != user_id and not role.can_moderate:
                logfire.warn(
                    "Unauthorized post deletion attempt",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(user_id))

            await self.post_repository.delete({"id": post_id})
            logfire.info("Post deleted", post_id=str(post_id))

    async def set_hidden(
        self, post_id: PostId, hidden: bool, user_id: UserId, role: UserRole
    ) -> Post:
        """Hide a post from listings or show it again.

        Raises:
            NotAuthorizedError: If the user may not moderate
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "post_service.set_hidden", post_id=str(post_id), hidden=hidden
        ):
            if not role.can_moderate:
                raise NotAuthorizedError(
                    "post", str(post_id), str(user_id), "moderate"
                )
            updated = await self.post_repository.update(
                {"id": post_id}, {"hidden": hidden}
            )
            if updated is None:
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post visibility changed", post_id=str(post_id), hidden=hidden)
            return updated

    async def get_posts_by_ids(self, post_ids: Sequence[PostId]) -> dict[PostId, Post]:
        """Look up several posts at once, keyed by ID."""
        if not post_ids:
            return {}
        posts = await self.post_repository.find_by_ids(post_ids)
        return {post.id: post for post in posts}

    async def get_feed(
        self, cursor: str | None, limit: int, tag: str | None = None
    ) -> Page[Post]:
        """Page through visible posts, newest first.

        Args:
            cursor: ID of the last post of the previous page
            limit: Page size
            tag: Only posts carrying this tag

        Returns:
            Page of posts
        """
        with logfire.span("post_service.get_feed", limit=limit, tag=tag):
            return await self._pages.paginate(
                PageRequest(
                    where=self._visible(tag),
                    order=(desc("created_at"),),
                    cursor=cursor,
                    limit=limit,
                )
            )

    async def get_posts_by_author(
        self, author_id: UserId, cursor: str | None, limit: int
    ) -> Page[Post]:
        """Page through a user's visible posts, newest first, with total.

        Args:
            author_id: Author user ID
            cursor: ID of the last post of the previous page
            limit: Page size

        Returns:
            Page of posts with the user's visible post count as total
        """
        with logfire.span(
            "post_service.get_posts_by_author", author_id=str(author_id), limit=limit
        ):
            where = Filter.where(author_id=author_id, hidden=False)
            page = await self._pages.paginate(
                PageRequest(
                    where=where,
                    order=(desc("created_at"),),
                    cursor=cursor,
                    limit=limit,
                )
            )
            total = await self.post_repository.count(where)
            logfire.info(
                "Author posts retrieved",
                author_id=str(author_id),
                count=len(page.data),
                total=total,
            )
            return page.with_total(total)

    async def search_posts(
        self, query: str, cursor: str | None, limit: int, tag: str | None = None
    ) -> Page[Post]:
        """Search visible posts by title or content, newest first.

        Matching is a case-insensitive substring match.

        Args:
            query: Search text
            cursor: ID of the last post of the previous page
            limit: Page size
            tag: Only posts carrying this tag

        Returns:
            Page of matching posts
        """
        text = query.strip()
        with logfire.span("post_service.search_posts", query=text, limit=limit, tag=tag):
            where = self._visible(tag)
            if text:
                where = where.or_any(
                    [
                        Condition(field="title", op=Op.ICONTAINS, value=text),
                        Condition(field="content", op=Op.ICONTAINS, value=text),
                    ]
                )
            page = await self._pages.paginate(
                PageRequest(
                    where=where,
                    order=(desc("created_at"),),
                    cursor=cursor,
                    limit=limit,
                )
            )
            logfire.info("Search completed", query=text, count=len(page.data))
            return page

    @staticmethod
    def _visible(tag: str | None) -> Filter:
        where = Filter.where(hidden=False)
        if tag and tag.strip():
            where = where.and_(
                Condition(field="tag_names", op=Op.HAS, value=tag.strip().lower())
            )
        return where
