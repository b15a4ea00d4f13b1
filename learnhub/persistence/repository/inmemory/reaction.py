"""In-memory like and bookmark repositories for testing."""

from typing import Any, Sequence, TypeVar

from learnhub.domain.model.reaction import Bookmark, Like
from learnhub.domain.repository.reaction import (
    POST_HIDDEN,
    BookmarkRepository,
    LikeRepository,
)
from learnhub.domain.value import PostId, UserId

from .collection import InMemoryCollection

T = TypeVar("T")


class InMemoryPostRelation(InMemoryCollection[T]):
    """Shared lookups of the ``(user_id, post_id)`` relation tables."""

    def _field(self, row: T, name: str) -> Any:
        if name == POST_HIDDEN:
            post = self.database.table("posts").get((row.post_id,))
            return post.hidden if post is not None else None
        return super()._field(row, name)

    async def count_by_post(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count rows for several posts."""
        counts = {pid: 0 for pid in post_ids}
        for row in self._rows.values():
            if row.post_id in counts:
                counts[row.post_id] += 1
        return counts

    async def post_ids_of(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> set[PostId]:
        """Which of ``post_ids`` the user has a row for."""
        return {pid for pid in post_ids if (user_id, pid) in self._rows}


class InMemoryLikeRepository(InMemoryPostRelation[Like], LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    table_name = "likes"
    model = Like


class InMemoryBookmarkRepository(InMemoryPostRelation[Bookmark], BookmarkRepository):
    """In-memory implementation of BookmarkRepository for testing."""

    table_name = "bookmarks"
    model = Bookmark
