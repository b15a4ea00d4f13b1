"""Comment response items."""

from datetime import datetime

from pydantic import BaseModel

from learnhub.application.usecase.common import PaginationInfo
from learnhub.domain.model import Comment


class CommentItem(BaseModel):
    """Comment item in responses."""

    comment_id: int
    post_id: str
    author_id: str
    content: str
    parent_id: int | None
    mentioned_user_id: str | None
    created_at: datetime
    reply_count: int | None = None  # Only on top-level listings

    @classmethod
    def from_comment(
        cls, comment: Comment, reply_count: int | None = None
    ) -> "CommentItem":
        return cls(
            comment_id=comment.id,
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            content=comment.content,
            parent_id=comment.parent_id,
            mentioned_user_id=(
                str(comment.mentioned_user_id) if comment.mentioned_user_id else None
            ),
            created_at=comment.created_at,
            reply_count=reply_count,
        )


class CommentPage(BaseModel):
    """A page of comments."""

    data: list[CommentItem]
    pagination: PaginationInfo
