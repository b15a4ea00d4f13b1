"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from learnhub.application.usecase.comment.items import CommentItem
from learnhub.application.usecase.common import parse_comment_id, parse_uuid
from learnhub.domain.service import CommentService
from learnhub.domain.value import PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str
    content: str = Field(min_length=1, max_length=10000)
    parent_id: str | int | None = None  # Comment being answered, if any
    author_id: str  # Set from the authenticated user


class CreateCommentUseCase:
    """Use case for creating a comment or a reply."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Answering a reply stores the new comment under the top-level
        comment and mentions the reply's author.

        Args:
            request: Create comment request

        Returns:
            Created comment as stored

        Raises:
            ValidationError: If post or parent IDs are malformed
            NotFoundError: If the post or parent comment does not exist
            MismatchError: If the parent comment belongs to another post
        """
        post_id = PostId(parse_uuid(request.post_id, "post_id"))
        parent_id = (
            parse_comment_id(request.parent_id, "parent_id")
            if request.parent_id not in (None, "")
            else None
        )

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
            parent_id=parent_id,
        )
        return CommentItem.from_comment(comment)
