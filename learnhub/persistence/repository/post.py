"""PostgreSQL implementation of Post repository."""

from typing import Sequence

from sqlalchemy import select

from learnhub.domain.model import Post
from learnhub.domain.repository import PostRepository
from learnhub.domain.value import PostId
from learnhub.persistence.mappers import row_to_post
from learnhub.persistence.repository.collection import PostgresCollection
from learnhub.persistence.tables import posts_table


class PostgresPostRepository(PostgresCollection[Post], PostRepository):
    """PostgreSQL implementation of PostRepository."""

    table = posts_table
    to_model = staticmethod(row_to_post)

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> list[Post]:
        """Find several posts in a single query."""
        if not post_ids:
            return []
        stmt = select(posts_table).where(posts_table.c.id.in_(list(post_ids)))
        result = await self._execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]
