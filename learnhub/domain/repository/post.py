"""Post repository interface."""

from abc import abstractmethod
from typing import Sequence

from learnhub.domain.model.post import Post
from learnhub.domain.repository.collection import Collection
from learnhub.domain.value import PostId


class PostRepository(Collection[Post]):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    key_fields = ("id",)

    @abstractmethod
    async def find_by_ids(self, post_ids: Sequence[PostId]) -> list[Post]:
        """Find several posts in a single query.

        Args:
            post_ids: Post IDs to look up

        Returns:
            Posts found, in no particular order
        """
        pass
