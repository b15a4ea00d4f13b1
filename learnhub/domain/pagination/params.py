"""Parsing of client-supplied pagination parameters."""

import re
from typing import Any

from learnhub.domain.error import ValidationError

_INTEGER = re.compile(r"^-?\d+$")


def parse_limit(raw: Any, default: int, maximum: int) -> int:
    """Normalize a page size.

    Missing values fall back to ``default``; values above ``maximum`` are
    clamped. Zero, negatives and non-numeric input are rejected.

    Args:
        raw: Limit as received (query string or int), or None
        default: Limit used when none is supplied
        maximum: Largest page the endpoint serves

    Returns:
        Limit between 1 and ``maximum``

    Raises:
        ValidationError: If the limit is not a positive integer
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return min(default, maximum)

    if isinstance(raw, bool):
        raise ValidationError("limit must be a number")
    if isinstance(raw, int):
        value = raw
    elif _INTEGER.match(str(raw).strip()):
        value = int(str(raw).strip())
    else:
        raise ValidationError("limit must be a number")

    if value <= 0:
        raise ValidationError("limit must be greater than 0")
    return min(value, maximum)


def parse_cursor(raw: str | None) -> str | None:
    """Treat an empty cursor the same as no cursor."""
    if raw is None or not raw.strip():
        return None
    return raw.strip()
