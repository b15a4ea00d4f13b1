"""In-memory post repository for testing."""

from typing import Any, Mapping, Sequence

from learnhub.domain.model.post import Post
from learnhub.domain.repository.post import PostRepository
from learnhub.domain.value import PostId

from .collection import InMemoryCollection


class InMemoryPostRepository(InMemoryCollection[Post], PostRepository):
    """In-memory implementation of PostRepository for testing."""

    table_name = "posts"
    model = Post

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> list[Post]:
        """Find several posts at once."""
        return [self._rows[(pid,)] for pid in post_ids if (pid,) in self._rows]

    async def save(self, post: Post) -> Post:
        """Store a post as is, replacing any previous version.

        Lets tests seed rows with fields such as ``hidden`` or ``created_at``
        that the create path does not take.
        """
        self._rows[(post.id,)] = post
        return post

    async def delete(self, key: Mapping[str, Any]) -> bool:
        """Delete a post together with the rows the foreign keys cascade to."""
        deleted = await super().delete(key)
        if deleted:
            post_ids = {key["id"]}
            comments = self.database.delete_where("comments", "post_id", post_ids)
            for table in ("likes", "bookmarks", "reports"):
                self.database.delete_where(table, "post_id", post_ids)
            self.database.delete_where(
                "reports", "comment_id", {comment.id for comment in comments}
            )
        return deleted
