"""Repository interfaces for LearnHub domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from learnhub.domain.repository.collection import Collection
from learnhub.domain.repository.comment import CommentRepository
from learnhub.domain.repository.post import PostRepository
from learnhub.domain.repository.reaction import (
    POST_HIDDEN,
    BookmarkRepository,
    LikeRepository,
    PostRelationRepository,
)
from learnhub.domain.repository.report import ReportRepository

__all__ = [
    "POST_HIDDEN",
    "BookmarkRepository",
    "Collection",
    "CommentRepository",
    "LikeRepository",
    "PostRelationRepository",
    "PostRepository",
    "ReportRepository",
]
