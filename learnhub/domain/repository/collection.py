"""Store contract shared by every paginated collection."""

from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, Sequence, TypeVar

from learnhub.domain.pagination.query import Filter, SortKey

T = TypeVar("T")


class Collection(ABC, Generic[T]):
    """Backing store for one entity type.

    The pagination engine only needs filtered, ordered, limited reads,
    counts and unique lookups; services add inserts, updates and deletes.
    Implementations live in the persistence layer.

    Attributes:
        key_fields: Fields forming the entity's unique key, in key order
    """

    key_fields: tuple[str, ...] = ("id",)

    @abstractmethod
    async def find_many(
        self,
        where: Filter,
        order: Sequence[SortKey],
        limit: int,
        after: Mapping[str, Any] | None = None,
    ) -> list[T]:
        """Find rows matching a filter in the given order.

        Args:
            where: Filter rows must satisfy
            order: Total ordering to apply
            limit: Maximum number of rows to return
            after: Values of every ``order`` field for the anchor row; only
                rows strictly after the anchor under ``order`` are returned

        Returns:
            Matching rows, at most ``limit``
        """
        pass

    @abstractmethod
    async def count(self, where: Filter) -> int:
        """Count rows matching a filter.

        Args:
            where: Filter rows must satisfy

        Returns:
            Number of matching rows
        """
        pass

    @abstractmethod
    async def find_unique(
        self, key: Mapping[str, Any], for_update: bool = False
    ) -> T | None:
        """Find a row by its complete unique key.

        Args:
            key: Value for every field of ``key_fields``
            for_update: Lock the row until the surrounding transaction ends

        Returns:
            The row if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, data: Mapping[str, Any]) -> T:
        """Insert a row.

        Store-assigned fields (autoincrement ids, defaults) may be omitted.

        Args:
            data: Field values of the new row

        Returns:
            The created row
        """
        pass

    @abstractmethod
    async def update(
        self, key: Mapping[str, Any], changes: Mapping[str, Any]
    ) -> T | None:
        """Change some fields of a row.

        Args:
            key: Value for every field of ``key_fields``
            changes: New values by field name

        Returns:
            The updated row, or None if no row has that key
        """
        pass

    @abstractmethod
    async def delete(self, key: Mapping[str, Any]) -> bool:
        """Delete a row by its unique key.

        Args:
            key: Value for every field of ``key_fields``

        Returns:
            True if a row was deleted
        """
        pass
