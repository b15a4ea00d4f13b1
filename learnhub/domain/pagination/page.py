"""Page request/result types and the page assembler."""

from typing import Any, Callable, Generic, Sequence, TypeVar

from pydantic import Field

from learnhub.domain.pagination.cursor import CursorValue
from learnhub.domain.pagination.query import Filter, SortKey
from learnhub.domain.value.common import ValueObject

T = TypeVar("T")
U = TypeVar("U")


class PageRequest(ValueObject):
    """One page worth of query: filter, order, cursor and limit.

    ``cursor`` is the client's opaque value; fetchers decode it.
    """

    where: Filter = Field(default_factory=Filter)
    order: tuple[SortKey, ...] = ()
    cursor: Any = None
    limit: int


class Page(ValueObject, Generic[T]):
    """A page of rows plus the information needed to fetch the next one."""

    data: list[T]
    has_more: bool
    next_cursor: CursorValue | None = None
    total: int | None = None  # Only set when an endpoint asks for a grand total

    def with_total(self, total: int) -> "Page[T]":
        """Return a copy carrying an independently counted total."""
        return self.model_copy(update={"total": total})

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        """Project every row, keeping the pagination metadata."""
        return Page(
            data=[fn(row) for row in self.data],
            has_more=self.has_more,
            next_cursor=self.next_cursor,
            total=self.total,
        )


class PageAssembler:
    """Turns over-fetched rows into a client-facing page.

    Expects up to ``limit + 1`` rows: the extra row only signals that more
    pages exist and is never returned nor used for the cursor.
    """

    def assemble(
        self,
        rows: Sequence[T],
        limit: int,
        cursor_of: Callable[[T], CursorValue],
    ) -> Page[T]:
        """Build a page from raw rows.

        Args:
            rows: Rows returned by the fetcher (at most ``limit + 1``)
            limit: Page size the caller asked for
            cursor_of: Extracts the encoded cursor of a row

        Returns:
            Page with at most ``limit`` rows
        """
        has_more = len(rows) > limit
        data = list(rows[:limit])
        next_cursor = cursor_of(data[-1]) if has_more and data else None
        return Page(data=data, has_more=has_more, next_cursor=next_cursor)
