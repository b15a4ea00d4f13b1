"""Domain value objects for LearnHub."""

from learnhub.domain.value.identifiers import CommentId, PostId, ReportId, UserId
from learnhub.domain.value.types import (
    ReportReason,
    ReportStatus,
    ResourceType,
    ThreadPosition,
    UserRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "ReportId",
    # Types
    "ReportReason",
    "ReportStatus",
    "ResourceType",
    "ThreadPosition",
    "UserRole",
]
