"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .database import InMemoryDatabase
from .post import InMemoryPostRepository
from .reaction import InMemoryBookmarkRepository, InMemoryLikeRepository
from .report import InMemoryReportRepository

__all__ = [
    "InMemoryBookmarkRepository",
    "InMemoryCommentRepository",
    "InMemoryDatabase",
    "InMemoryLikeRepository",
    "InMemoryPostRepository",
    "InMemoryReportRepository",
]
