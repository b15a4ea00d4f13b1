"""Cursor-based pagination engine."""

from learnhub.domain.pagination.cursor import (
    CompoundCursorCodec,
    CursorCodec,
    CursorValue,
    IntCursorCodec,
    UUIDCursorCodec,
)
from learnhub.domain.pagination.fetcher import (
    CompoundPageFetcher,
    check_limit,
    PageFetcher,
    SinglePageFetcher,
)
from learnhub.domain.pagination.page import Page, PageAssembler, PageRequest
from learnhub.domain.pagination.params import parse_cursor, parse_limit
from learnhub.domain.pagination.query import (
    Condition,
    Filter,
    Op,
    SortDirection,
    SortKey,
    asc,
    desc,
    with_tiebreak,
)

__all__ = [
    # Cursors
    "CursorCodec",
    "CursorValue",
    "IntCursorCodec",
    "UUIDCursorCodec",
    "CompoundCursorCodec",
    # Fetchers
    "PageFetcher",
    "SinglePageFetcher",
    "CompoundPageFetcher",
    "check_limit",
    # Pages
    "Page",
    "PageAssembler",
    "PageRequest",
    "parse_limit",
    "parse_cursor",
    # Queries
    "Condition",
    "Filter",
    "Op",
    "SortDirection",
    "SortKey",
    "asc",
    "desc",
    "with_tiebreak",
]
