"""PostgreSQL repository implementations."""

from learnhub.persistence.repository.collection import PostgresCollection
from learnhub.persistence.repository.comment import PostgresCommentRepository
from learnhub.persistence.repository.post import PostgresPostRepository
from learnhub.persistence.repository.reaction import (
    PostgresBookmarkRepository,
    PostgresLikeRepository,
    PostgresPostRelation,
)
from learnhub.persistence.repository.report import PostgresReportRepository

__all__ = [
    "PostgresBookmarkRepository",
    "PostgresCollection",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
    "PostgresPostRelation",
    "PostgresPostRepository",
    "PostgresReportRepository",
]
