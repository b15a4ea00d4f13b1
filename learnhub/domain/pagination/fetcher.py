"""Keyset page fetchers.

Both fetchers request exactly ``limit + 1`` rows so the page assembler can
tell whether another page exists without a count query. The cursor names
the last row of the previous page; the fetcher looks that row up and uses
its sort-key values as an exclusive bound, so rows tied on the sort key
are still ordered by the identity fields appended as tie-breaks.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, Mapping, Sequence, TypeVar

import logfire

from learnhub.domain.error import ValidationError
from learnhub.domain.pagination.cursor import (
    CompoundCursorCodec,
    CursorCodec,
    CursorValue,
)
from learnhub.domain.pagination.page import Page, PageAssembler, PageRequest
from learnhub.domain.pagination.query import SortKey, with_tiebreak

if TYPE_CHECKING:
    from learnhub.domain.repository.collection import Collection

T = TypeVar("T")


def check_limit(limit: int) -> None:
    """Reject page sizes the over-fetch cannot serve.

    Raises:
        ValidationError: If limit is not a positive integer
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValidationError("limit must be greater than 0")


class PageFetcher(ABC, Generic[T]):
    """Shared over-fetch, bound resolution and page assembly."""

    def __init__(
        self,
        collection: "Collection[T]",
        codec: CursorCodec,
        key_fields: Sequence[str],
        assembler: PageAssembler | None = None,
    ) -> None:
        self.collection = collection
        self.codec = codec
        self.key_fields = tuple(key_fields)
        self.assembler = assembler or PageAssembler()

    @abstractmethod
    def _anchor_key(self, cursor: Any) -> dict[str, Any]:
        """Translate a decoded cursor into a unique-key lookup."""
        pass

    @abstractmethod
    def cursor_of(self, row: T) -> CursorValue:
        """Encoded cursor pointing at ``row``."""
        pass

    def decode_cursor(self, cursor: Any) -> Any | None:
        """Decode the request cursor, treating empty values as absent."""
        if cursor is None or cursor == "":
            return None
        return self.codec.decode(cursor)

    async def fetch(self, request: PageRequest) -> list[T]:
        """Fetch up to ``limit + 1`` rows strictly after the cursor.

        Args:
            request: Page request

        Returns:
            Raw rows, possibly one more than ``request.limit``

        Raises:
            ValidationError: If limit or cursor are malformed (before any
                store access)
        """
        check_limit(request.limit)
        cursor = self.decode_cursor(request.cursor)
        order = with_tiebreak(request.order, self.key_fields)

        after: dict[str, Any] | None = None
        if cursor is not None:
            anchor = await self.collection.find_unique(self._anchor_key(cursor))
            if anchor is None:
                # A cursor that matches nothing yields an empty page
                logfire.info("Cursor row not found", cursor=str(cursor))
                return []
            after = self._bound_of(anchor, order)

        return await self.collection.find_many(
            request.where, order, limit=request.limit + 1, after=after
        )

    async def paginate(self, request: PageRequest) -> Page[T]:
        """Fetch and assemble one page.

        Args:
            request: Page request

        Returns:
            Page with at most ``request.limit`` rows
        """
        with logfire.span(
            "page_fetcher.paginate",
            fetcher=type(self).__name__,
            limit=request.limit,
            has_cursor=request.cursor is not None,
        ):
            rows = await self.fetch(request)
            page = self.assembler.assemble(rows, request.limit, self.cursor_of)
            logfire.debug(
                "Page assembled",
                fetched=len(rows),
                returned=len(page.data),
                has_more=page.has_more,
            )
            return page

    @staticmethod
    def _bound_of(anchor: T, order: Sequence[SortKey]) -> dict[str, Any]:
        return {key.field: getattr(anchor, key.field) for key in order}


class SinglePageFetcher(PageFetcher[T]):
    """Fetcher for collections identified by a single field."""

    def __init__(
        self,
        collection: "Collection[T]",
        codec: CursorCodec,
        cursor_field: str | None = None,
        assembler: PageAssembler | None = None,
    ) -> None:
        """Initialize single-key fetcher.

        Args:
            collection: Backing store
            codec: Codec for the cursor field's values
            cursor_field: Unique field used as cursor (defaults to the
                collection's single key field)
            assembler: Page assembler
        """
        if cursor_field is None:
            if len(collection.key_fields) != 1:
                raise ValueError(
                    "Collection has a composite key; use CompoundPageFetcher"
                )
            cursor_field = collection.key_fields[0]
        super().__init__(collection, codec, (cursor_field,), assembler)
        self.cursor_field = cursor_field

    def _anchor_key(self, cursor: Any) -> dict[str, Any]:
        return {self.cursor_field: cursor}

    def cursor_of(self, row: T) -> CursorValue:
        return self.codec.encode(getattr(row, self.cursor_field))


class CompoundPageFetcher(PageFetcher[T]):
    """Fetcher for collections identified by a composite key.

    The cursor is the complete key tuple of the previous page's last row,
    and every key field takes part in the ordering, so "strictly after"
    compares the whole tuple.
    """

    codec: CompoundCursorCodec

    def __init__(
        self,
        collection: "Collection[T]",
        codec: CompoundCursorCodec,
        assembler: PageAssembler | None = None,
    ) -> None:
        """Initialize compound-key fetcher.

        Args:
            collection: Backing store with a composite key
            codec: Codec covering every key field
            assembler: Page assembler
        """
        if tuple(codec.fields) != tuple(collection.key_fields):
            raise ValueError(
                f"Cursor fields {tuple(codec.fields)} do not match "
                f"key {collection.key_fields}"
            )
        super().__init__(collection, codec, collection.key_fields, assembler)

    def _anchor_key(self, cursor: Mapping[str, Any]) -> dict[str, Any]:
        return dict(cursor)

    def cursor_of(self, row: T) -> CursorValue:
        return self.codec.encode({field: getattr(row, field) for field in self.key_fields})
