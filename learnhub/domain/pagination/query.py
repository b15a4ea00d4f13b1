"""Query descriptors handed to a collection.

A query is a filter, a sort order and an optional keyset bound. The
descriptors are plain value objects so both the SQL and the in-memory
collections can interpret them.
"""

from enum import Enum
from typing import Any, Iterable, Sequence

from learnhub.domain.value.common import ValueObject


class Op(str, Enum):
    """Comparison applied by a filter condition."""

    EQ = "eq"  # field == value (value None means IS NULL)
    ICONTAINS = "icontains"  # case-insensitive substring of a text field
    HAS = "has"  # list field contains value


class Condition(ValueObject):
    """A single field predicate."""

    field: str
    op: Op = Op.EQ
    value: Any = None


class Filter(ValueObject):
    """Conjunction of ``all_of`` plus, when non-empty, a disjunction of ``any_of``."""

    all_of: tuple[Condition, ...] = ()
    any_of: tuple[Condition, ...] = ()

    @classmethod
    def where(cls, **equals: Any) -> "Filter":
        """Build an equality filter, e.g. ``Filter.where(post_id=p, parent_id=None)``."""
        return cls(all_of=tuple(Condition(field=k, value=v) for k, v in equals.items()))

    def and_(self, *conditions: Condition) -> "Filter":
        """Return a copy with extra required conditions."""
        return self.model_copy(update={"all_of": self.all_of + tuple(conditions)})

    def or_any(self, conditions: Iterable[Condition]) -> "Filter":
        """Return a copy that also requires at least one of ``conditions``."""
        return self.model_copy(update={"any_of": self.any_of + tuple(conditions)})


class SortDirection(str, Enum):
    """Direction of a sort key."""

    ASC = "asc"
    DESC = "desc"


class SortKey(ValueObject):
    """One field of an ordering."""

    field: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


def asc(field: str) -> SortKey:
    return SortKey(field=field, direction=SortDirection.ASC)


def desc(field: str) -> SortKey:
    return SortKey(field=field, direction=SortDirection.DESC)


def with_tiebreak(order: Sequence[SortKey], fields: Sequence[str]) -> tuple[SortKey, ...]:
    """Append identity fields to an ordering so that it is total.

    Each missing field is added with the direction of the last sort key,
    so a newest-first listing stays newest-first among equal timestamps.

    Args:
        order: Requested ordering
        fields: Unique key fields of the collection

    Returns:
        Ordering that never ties between two distinct rows
    """
    result = tuple(order)
    present = {key.field for key in result}
    direction = result[-1].direction if result else SortDirection.ASC
    for field in fields:
        if field not in present:
            result += (SortKey(field=field, direction=direction),)
    return result
