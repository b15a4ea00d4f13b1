"""Comment placement rules."""

import logfire

from learnhub.domain.error import MismatchError, NotFoundError
from learnhub.domain.repository import CommentRepository, PostRepository
from learnhub.domain.value import CommentId, PostId, ThreadPosition

from .base import Service
from .reply_mention import ReplyTarget, resolve_reply_target


class CommentTree(Service):
    """Validates and places new comments in a two-level thread."""

    def __init__(
        self, comment_repository: CommentRepository, post_repository: PostRepository
    ) -> None:
        """Initialize comment tree.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    async def place(
        self, post_id: PostId, declared_parent_id: CommentId | None = None
    ) -> ReplyTarget:
        """Check preconditions and resolve where a new comment goes.

        The referenced parent rows are read with a row lock, so they cannot
        be deleted between this check and the insert that follows in the
        same transaction.

        Args:
            post_id: Target post
            declared_parent_id: Parent chosen by the client, if any

        Returns:
            Placement of the new comment

        Raises:
            NotFoundError: If the post or the declared parent does not exist
            MismatchError: If the declared parent belongs to another post
        """
        with logfire.span(
            "comment_tree.place",
            post_id=str(post_id),
            declared_parent_id=declared_parent_id,
        ):
            post = await self.post_repository.find_unique({"id": post_id})
            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            if declared_parent_id is None:
                return resolve_reply_target(None)

            parent = await self.comment_repository.find_unique(
                {"id": declared_parent_id}, for_update=True
            )
            if parent is None:
                logfire.warn(
                    "Parent comment not found",
                    parent_id=declared_parent_id,
                    post_id=str(post_id),
                )
                raise NotFoundError("Comment", str(declared_parent_id))

            if parent.post_id != post_id:
                logfire.warn(
                    "Parent comment does not belong to post",
                    parent_id=declared_parent_id,
                    parent_post_id=str(parent.post_id),
                    target_post_id=str(post_id),
                )
                raise MismatchError(str(declared_parent_id), str(post_id))

            target = resolve_reply_target(parent)

            if target.position is ThreadPosition.PARENT_IS_REPLY:
                # The stored parent is the ancestor, so lock that row too
                ancestor = await self.comment_repository.find_unique(
                    {"id": target.parent_id}, for_update=True
                )
                if ancestor is None:
                    raise NotFoundError("Comment", str(target.parent_id))
                logfire.info(
                    "Reply reparented",
                    declared_parent_id=declared_parent_id,
                    parent_id=target.parent_id,
                    mentioned_user_id=str(target.mentioned_user_id),
                )

            return target
