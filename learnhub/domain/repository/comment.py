"""Comment repository interface."""

from abc import abstractmethod
from typing import Sequence

from learnhub.domain.model.comment import Comment
from learnhub.domain.repository.collection import Collection
from learnhub.domain.value import CommentId, PostId


class CommentRepository(Collection[Comment]):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    key_fields = ("id",)

    @abstractmethod
    async def count_replies(
        self, parent_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count replies for several top-level comments in one query.

        Args:
            parent_ids: Top-level comment IDs

        Returns:
            Mapping of every requested ID to its reply count
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count all comments, replies included, of several posts.

        Args:
            post_ids: Post IDs

        Returns:
            Mapping of every requested post ID to its comment count
        """
        pass
