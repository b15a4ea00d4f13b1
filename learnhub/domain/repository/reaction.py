"""Like and bookmark repository interfaces."""

from abc import abstractmethod
from typing import Sequence, TypeVar

from learnhub.domain.model.reaction import Bookmark, Like
from learnhub.domain.repository.collection import Collection
from learnhub.domain.value import PostId, UserId

T = TypeVar("T")

# Filter field resolved against the related post rather than the relation
# row, e.g. ``Filter.where(user_id=u, post_hidden=False)``
POST_HIDDEN = "post_hidden"


class PostRelationRepository(Collection[T]):
    """User-to-post relation keyed by ``(user_id, post_id)``.

    Besides the relation's own fields, filters may use ``POST_HIDDEN`` so
    that rows pointing at hidden posts are excluded inside the query,
    before the page limit applies.
    """

    key_fields = ("user_id", "post_id")

    @abstractmethod
    async def count_by_post(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count relation rows for several posts in one query.

        Args:
            post_ids: Post IDs

        Returns:
            Mapping of every requested post ID to its row count
        """
        pass

    @abstractmethod
    async def post_ids_of(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> set[PostId]:
        """Which of ``post_ids`` the user has a relation row for.

        Args:
            user_id: User ID
            post_ids: Candidate post IDs

        Returns:
            Subset of ``post_ids``
        """
        pass


class LikeRepository(PostRelationRepository[Like]):
    """Repository for likes, keyed by ``(user_id, post_id)``."""


class BookmarkRepository(PostRelationRepository[Bookmark]):
    """Repository for bookmarks, keyed by ``(user_id, post_id)``."""
