"""PostgreSQL implementations of Like and Bookmark repositories."""

from typing import Sequence, TypeVar

from sqlalchemy import func, select
from sqlalchemy.sql.elements import ColumnElement

from learnhub.domain.model import Bookmark, Like
from learnhub.domain.pagination import Condition
from learnhub.domain.repository import POST_HIDDEN, BookmarkRepository, LikeRepository
from learnhub.domain.value import PostId, UserId
from learnhub.persistence.mappers import row_to_bookmark, row_to_like
from learnhub.persistence.repository.collection import PostgresCollection
from learnhub.persistence.tables import bookmarks_table, likes_table, posts_table

T = TypeVar("T")


class PostgresPostRelation(PostgresCollection[T]):
    """Shared queries of the ``(user_id, post_id)`` relation tables."""

    def _condition(self, condition: Condition) -> ColumnElement:
        if condition.field == POST_HIDDEN:
            return (
                select(posts_table.c.id)
                .where(
                    posts_table.c.id == self.table.c.post_id,
                    posts_table.c.hidden.is_(bool(condition.value)),
                )
                .exists()
            )
        return super()._condition(condition)

    async def count_by_post(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count rows for several posts in one query."""
        counts = {PostId(pid): 0 for pid in post_ids}
        if not counts:
            return counts

        stmt = (
            select(self.table.c.post_id, func.count())
            .where(self.table.c.post_id.in_(list(counts)))
            .group_by(self.table.c.post_id)
        )
        result = await self._execute(stmt)
        for post_id, count in result.fetchall():
            counts[PostId(post_id)] = count
        return counts

    async def post_ids_of(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> set[PostId]:
        """Which of ``post_ids`` the user has a row for."""
        if not post_ids:
            return set()
        stmt = select(self.table.c.post_id).where(
            self.table.c.user_id == user_id,
            self.table.c.post_id.in_(list(post_ids)),
        )
        result = await self._execute(stmt)
        return {PostId(post_id) for (post_id,) in result.fetchall()}


class PostgresLikeRepository(PostgresPostRelation[Like], LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    table = likes_table
    to_model = staticmethod(row_to_like)


class PostgresBookmarkRepository(PostgresPostRelation[Bookmark], BookmarkRepository):
    """PostgreSQL implementation of BookmarkRepository."""

    table = bookmarks_table
    to_model = staticmethod(row_to_bookmark)
