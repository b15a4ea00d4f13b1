"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from learnhub.domain.model import Bookmark, Comment, Like, Post, Report
from learnhub.domain.value import (
    CommentId,
    PostId,
    ReportId,
    ReportReason,
    ReportStatus,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        content=row.get("content"),
        author_id=UserId(_uuid(row["author_id"])),
        tag_names=list(row.get("tag_names") or []),
        file_url=row.get("file_url"),
        created_at=row["created_at"],
        hidden=row.get("hidden", False),
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    mentioned = row.get("mentioned_user_id")
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(row["parent_id"]) if row.get("parent_id") else None,
        mentioned_user_id=UserId(_uuid(mentioned)) if mentioned else None,
        created_at=row["created_at"],
        hidden=row.get("hidden", False),
    )


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        user_id=UserId(_uuid(row["user_id"])),
        post_id=PostId(_uuid(row["post_id"])),
        created_at=row["created_at"],
    )


def row_to_bookmark(row: Dict[str, Any]) -> Bookmark:
    """Convert database row to Bookmark domain model."""
    return Bookmark(
        user_id=UserId(_uuid(row["user_id"])),
        post_id=PostId(_uuid(row["post_id"])),
        created_at=row["created_at"],
    )


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model."""
    post_id = row.get("post_id")
    return Report(
        id=ReportId(row["id"]),
        reporter_id=UserId(_uuid(row["reporter_id"])),
        reason=ReportReason(row["reason"]),
        post_id=PostId(_uuid(post_id)) if post_id else None,
        comment_id=row.get("comment_id"),
        status=ReportStatus(row.get("status") or ReportStatus.PENDING),
        moderator_notes=row.get("moderator_notes"),
        created_at=row["created_at"],
    )
