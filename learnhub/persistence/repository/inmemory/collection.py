"""In-memory implementation of the paginated collection contract."""

from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

from learnhub.domain.pagination import Condition, Filter, Op, SortKey
from learnhub.persistence.error import IntegrityViolationError

from .database import InMemoryDatabase

T = TypeVar("T")


def matches(
    row: Any, where: Filter, field: Callable[[Any, str], Any] = getattr
) -> bool:
    """Whether ``row`` satisfies ``where``.

    ``field`` reads a filter field off a row; the default is attribute access.
    """
    if not all(_satisfies(row, c, field) for c in where.all_of):
        return False
    return not where.any_of or any(_satisfies(row, c, field) for c in where.any_of)


def _satisfies(
    row: Any, condition: Condition, field: Callable[[Any, str], Any]
) -> bool:
    value = field(row, condition.field)
    if condition.op is Op.ICONTAINS:
        return value is not None and str(condition.value).lower() in value.lower()
    if condition.op is Op.HAS:
        return condition.value in (value or [])
    return value == condition.value


def sort_rows(rows: list[Any], order: Sequence[SortKey]) -> list[Any]:
    """Sort by several keys with independent directions."""
    # Stable sorts applied from the least significant key
    for key in reversed(order):
        rows.sort(key=lambda r: getattr(r, key.field), reverse=key.descending)
    return rows


def is_after(row: Any, order: Sequence[SortKey], after: Mapping[str, Any]) -> bool:
    """Whether ``row`` comes strictly after the anchor values under ``order``."""
    for key in order:
        value = getattr(row, key.field)
        anchor = after[key.field]
        if value == anchor:
            continue
        return value < anchor if key.descending else value > anchor
    return False


class InMemoryCollection(Generic[T]):
    """Collection over one table of an ``InMemoryDatabase``.

    Subclasses set ``table_name`` and ``model`` and mix in the matching
    domain repository interface.
    """

    table_name: str
    model: type
    key_fields: tuple[str, ...]

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.database = database or InMemoryDatabase()

    @property
    def _rows(self) -> dict[tuple[Any, ...], T]:
        return self.database.table(self.table_name)

    def _key_of(self, key: Mapping[str, Any]) -> tuple[Any, ...]:
        return tuple(key[f] for f in self.key_fields)

    def _field(self, row: T, name: str) -> Any:
        return getattr(row, name)

    def _prepare(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Fill in store-assigned values before building the model."""
        return dict(data)

    async def find_many(
        self,
        where: Filter,
        order: Sequence[SortKey],
        limit: int,
        after: Mapping[str, Any] | None = None,
    ) -> list[T]:
        """Find rows matching a filter in the given order."""
        rows = [r for r in self._rows.values() if matches(r, where, self._field)]
        if after is not None:
            rows = [r for r in rows if is_after(r, order, after)]
        return sort_rows(rows, order)[:limit]

    async def count(self, where: Filter) -> int:
        """Count rows matching a filter."""
        return sum(1 for r in self._rows.values() if matches(r, where, self._field))

    async def find_unique(
        self, key: Mapping[str, Any], for_update: bool = False
    ) -> T | None:
        """Find a row by its unique key (locking is a no-op here)."""
        return self._rows.get(self._key_of(key))

    async def create(self, data: Mapping[str, Any]) -> T:
        """Insert a row."""
        row = self.model(**self._prepare(data))
        key = tuple(getattr(row, f) for f in self.key_fields)
        if key in self._rows:
            raise IntegrityViolationError(f"Duplicate key in {self.table_name}: {key}")
        self._rows[key] = row
        return row

    async def delete(self, key: Mapping[str, Any]) -> bool:
        """Delete a row by its unique key."""
        return self._rows.pop(self._key_of(key), None) is not None

    async def update(
        self, key: Mapping[str, Any], changes: Mapping[str, Any]
    ) -> T | None:
        """Replace a row with a revalidated copy carrying ``changes``."""
        stored_key = self._key_of(key)
        row = self._rows.get(stored_key)
        if row is None:
            return None
        updated = self.model(**{**row.model_dump(), **changes})
        self._rows[stored_key] = updated
        return updated
