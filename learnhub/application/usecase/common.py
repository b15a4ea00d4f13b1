"""Request parsing and response shapes shared by the use cases."""

import re
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from learnhub.domain.error import ValidationError
from learnhub.domain.pagination import CursorValue, Page
from learnhub.domain.value import CommentId

_DIGITS = re.compile(r"^\d+$")


class PaginationInfo(BaseModel):
    """Pagination block of a list response."""

    has_more: bool
    next_cursor: CursorValue | None = None
    total: int | None = None

    @classmethod
    def of(cls, page: Page[Any]) -> "PaginationInfo":
        return cls(has_more=page.has_more, next_cursor=page.next_cursor, total=page.total)


def parse_uuid(raw: str, name: str) -> UUID:
    """Parse a client-supplied UUID.

    Raises:
        ValidationError: If ``raw`` is not a UUID
    """
    try:
        return UUID(str(raw).strip())
    except ValueError:
        raise ValidationError(f"{name} must be a valid UUID") from None


def parse_comment_id(raw: str | int, name: str = "comment_id") -> CommentId:
    """Parse a client-supplied comment ID.

    Raises:
        ValidationError: If ``raw`` is not a positive integer
    """
    if isinstance(raw, int) and not isinstance(raw, bool) and raw > 0:
        return CommentId(raw)
    if isinstance(raw, str) and _DIGITS.match(raw.strip()) and int(raw) > 0:
        return CommentId(int(raw))
    raise ValidationError(f"{name} must be a positive integer")
