"""PostgreSQL implementation of Comment repository."""

from typing import Sequence

from sqlalchemy import func, select

from learnhub.domain.model import Comment
from learnhub.domain.repository import CommentRepository
from learnhub.domain.value import CommentId, PostId
from learnhub.persistence.mappers import row_to_comment
from learnhub.persistence.repository.collection import PostgresCollection
from learnhub.persistence.tables import comments_table


class PostgresCommentRepository(PostgresCollection[Comment], CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Deleting a top-level comment removes its replies through the
    ``ON DELETE CASCADE`` foreign key on ``parent_id``.
    """

    table = comments_table
    to_model = staticmethod(row_to_comment)

    async def count_replies(
        self, parent_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count replies for several top-level comments in one query."""
        counts = {CommentId(pid): 0 for pid in parent_ids}
        if not counts:
            return counts

        stmt = (
            select(comments_table.c.parent_id, func.count())
            .where(comments_table.c.parent_id.in_(list(counts)))
            .group_by(comments_table.c.parent_id)
        )
        result = await self._execute(stmt)
        for parent_id, count in result.fetchall():
            counts[CommentId(parent_id)] = count
        return counts

    async def count_by_post(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count comments, replies included, for several posts in one query."""
        counts = {PostId(pid): 0 for pid in post_ids}
        if not counts:
            return counts

        stmt = (
            select(comments_table.c.post_id, func.count())
            .where(comments_table.c.post_id.in_(list(counts)))
            .group_by(comments_table.c.post_id)
        )
        result = await self._execute(stmt)
        for post_id, count in result.fetchall():
            counts[PostId(post_id)] = count
        return counts
