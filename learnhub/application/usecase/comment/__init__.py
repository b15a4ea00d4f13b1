"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comments import (
    GetCommentsRequest,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    GetUserCommentsRequest,
    GetUserCommentsUseCase,
)
from .items import CommentItem, CommentPage

__all__ = [
    "CommentItem",
    "CommentPage",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsUseCase",
    "GetRepliesRequest",
    "GetRepliesUseCase",
    "GetUserCommentsRequest",
    "GetUserCommentsUseCase",
]
