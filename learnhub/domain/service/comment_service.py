"""Comment domain service."""

from datetime import datetime

import logfire

from learnhub.domain.error import NotAuthorizedError, NotFoundError
from learnhub.domain.model.comment import Comment
from learnhub.domain.pagination import (
    Filter,
    IntCursorCodec,
    Page,
    PageRequest,
    SinglePageFetcher,
    desc,
)
from learnhub.domain.repository import CommentRepository
from learnhub.domain.value import CommentId, PostId, UserId, UserRole

from .base import Service
from .comment_tree import CommentTree


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, comment_tree: CommentTree
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            comment_tree: Placement rules for new comments
        """
        self.comment_repository = comment_repository
        self.comment_tree = comment_tree
        self._pages = SinglePageFetcher(comment_repository, IntCursorCodec())

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        A reply to a reply is stored under the top-level ancestor and
        mentions the author of the reply that was answered.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment text
            parent_id: Parent declared by the client (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If post or parent comment does not exist
            MismatchError: If the parent belongs to another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=parent_id,
        ):
            target = await self.comment_tree.place(post_id, parent_id)

            saved = await self.comment_repository.create(
                {
                    "post_id": post_id,
                    "author_id": author_id,
                    "content": content,
                    "parent_id": target.parent_id,
                    "mentioned_user_id": target.mentioned_user_id,
                    "created_at": datetime.now(),
                }
            )
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=str(post_id),
                position=target.position.value,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment_by_id", comment_id=comment_id):
            comment = await self.comment_repository.find_unique({"id": comment_id})
            if comment:
                logfire.info("Comment found", comment_id=comment_id)
            else:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment

    async def delete_comment(
        self,
        comment_id: CommentId,
        user_id: UserId,
        role: UserRole = UserRole.STUDENT,
    ) -> None:
        """Delete a comment; replies of a top-level comment go with it.

        Args:
            comment_id: Comment ID
            user_id: User requesting the deletion
            role: Role of that user

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user neither owns the comment nor
                may moderate
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=comment_id,
            user_id=str(user_id),
            role=role.value,
        ):
            comment = await self.comment_repository.find_unique({"id": comment_id})
            if comment is None:
                raise NotFoundError("Comment", str(comment_id))

            if comment.owner_id != user_id and not role.can_moderate:
                logfire.warn(
                    "Unauthorized comment deletion attempt",
                    comment_id=comment_id,
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))

            await self.comment_repository.delete({"id": comment_id})
            logfire.info("Comment deleted", comment_id=comment_id)

    async def set_hidden(
        self, comment_id: CommentId, hidden: bool, user_id: UserId, role: UserRole
    ) -> Comment:
        """Hide a comment from threads or show it again.

        Raises:
            NotAuthorizedError: If the user may not moderate
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.set_hidden", comment_id=comment_id, hidden=hidden
        ):
            if not role.can_moderate:
                raise NotAuthorizedError(
                    "comment", str(comment_id), str(user_id), "moderate"
                )
            updated = await self.comment_repository.update(
                {"id": comment_id}, {"hidden": hidden}
            )
            if updated is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info(
                "Comment visibility changed", comment_id=comment_id, hidden=hidden
            )
            return updated

    async def get_comments_by_author(
        self, author_id: UserId, cursor: str | int | None, limit: int
    ) -> Page[Comment]:
        """Page through a user's comments, newest first.

        Args:
            author_id: Author user ID
            cursor: ID of the last comment of the previous page
            limit: Page size

        Returns:
            Page of comments
        """
        with logfire.span(
            "comment_service.get_comments_by_author",
            author_id=str(author_id),
            limit=limit,
        ):
            return await self._pages.paginate(
                PageRequest(
                    where=Filter.where(author_id=author_id),
                    order=(desc("id"),),
                    cursor=cursor,
                    limit=limit,
                )
            )
