"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from learnhub.application.usecase.common import parse_comment_id
from learnhub.domain.service import CommentService
from learnhub.domain.value import UserId, UserRole


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str | int
    user_id: str
    role: UserRole = UserRole.STUDENT


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: int
    deleted: bool


class DeleteCommentUseCase:
    """Use case for deleting a comment (owner or moderator)."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            ValidationError: If the comment ID is malformed
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user may not delete the comment
        """
        comment_id = parse_comment_id(request.comment_id)
        await self.comment_service.delete_comment(
            comment_id=comment_id,
            user_id=UserId(UUID(request.user_id)),
            role=request.role,
        )
        return DeleteCommentResponse(comment_id=comment_id, deleted=True)
