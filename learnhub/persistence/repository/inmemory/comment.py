"""In-memory comment repository for testing."""

from typing import Any, Mapping, Sequence

from learnhub.domain.model.comment import Comment
from learnhub.domain.repository.comment import CommentRepository
from learnhub.domain.value import CommentId, PostId

from .collection import InMemoryCollection


class InMemoryCommentRepository(InMemoryCollection[Comment], CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    table_name = "comments"
    model = Comment

    def _prepare(self, data: Mapping[str, Any]) -> dict[str, Any]:
        prepared = dict(data)
        if prepared.get("id") is None:
            prepared["id"] = CommentId(self.database.next_id(self.table_name))
        return prepared

    async def count_replies(
        self, parent_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count replies for several top-level comments."""
        counts = {pid: 0 for pid in parent_ids}
        for comment in self._rows.values():
            if comment.parent_id in counts:
                counts[comment.parent_id] += 1
        return counts

    async def count_by_post(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count comments, replies included, for several posts."""
        counts = {pid: 0 for pid in post_ids}
        for comment in self._rows.values():
            if comment.post_id in counts:
                counts[comment.post_id] += 1
        return counts

    async def delete(self, key: Mapping[str, Any]) -> bool:
        """Delete a comment with its replies and their reports, as the
        foreign key cascades do."""
        deleted = await super().delete(key)
        if deleted:
            replies = self.database.delete_where(
                self.table_name, "parent_id", {key["id"]}
            )
            removed = {key["id"]} | {reply.id for reply in replies}
            self.database.delete_where("reports", "comment_id", removed)
        return deleted
