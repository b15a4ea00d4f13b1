"""PostgreSQL implementation of the paginated collection contract."""

from typing import Any, Callable, Dict, Generic, Mapping, Sequence, TypeVar

import logfire
from sqlalchemy import Table, and_, func, or_, select, true
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from learnhub.domain.pagination import Condition, Filter, Op, SortKey
from learnhub.persistence.error import IntegrityViolationError, StoreError

T = TypeVar("T")


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresCollection(Generic[T]):
    """Translates filters, orderings and keyset bounds into SQL.

    Subclasses set ``table`` and ``to_model`` and mix in the matching
    domain repository interface.
    """

    table: Table
    to_model: Callable[[Dict[str, Any]], T]
    key_fields: tuple[str, ...]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _column(self, field: str) -> ColumnElement:
        return self.table.c[field]

    def _condition(self, condition: Condition) -> ColumnElement:
        column = self._column(condition.field)
        if condition.op is Op.ICONTAINS:
            return column.ilike(f"%{_escape_like(str(condition.value))}%", escape="\\")
        if condition.op is Op.HAS:
            return column.contains([condition.value])
        if condition.value is None:
            return column.is_(None)
        return column == condition.value

    def _where(self, where: Filter) -> ColumnElement:
        clauses = [self._condition(c) for c in where.all_of]
        if where.any_of:
            clauses.append(or_(*(self._condition(c) for c in where.any_of)))
        return and_(*clauses) if clauses else true()

    def _key(self, key: Mapping[str, Any]) -> ColumnElement:
        missing = [f for f in self.key_fields if f not in key]
        if missing:
            raise ValueError(f"Key of {self.table.name} is missing {missing}")
        return and_(*(self._column(f) == key[f] for f in self.key_fields))

    def _after(self, order: Sequence[SortKey], after: Mapping[str, Any]) -> ColumnElement:
        """Rows strictly after ``after`` under ``order``.

        Expands the tuple comparison so each key keeps its own direction:
        (a > x) OR (a = x AND b > y) OR ...
        """
        disjuncts = []
        for i, key in enumerate(order):
            column = self._column(key.field)
            value = after[key.field]
            ties = [self._column(k.field) == after[k.field] for k in order[:i]]
            beyond = column < value if key.descending else column > value
            disjuncts.append(and_(*ties, beyond))
        return or_(*disjuncts)

    async def find_many(
        self,
        where: Filter,
        order: Sequence[SortKey],
        limit: int,
        after: Mapping[str, Any] | None = None,
    ) -> list[T]:
        """Find rows matching a filter in the given order."""
        stmt = select(self.table).where(self._where(where))
        if after is not None:
            stmt = stmt.where(self._after(order, after))
        stmt = stmt.order_by(
            *(
                self._column(k.field).desc() if k.descending else self._column(k.field).asc()
                for k in order
            )
        ).limit(limit)

        result = await self._execute(stmt)
        return [self.to_model(row._asdict()) for row in result.fetchall()]

    async def count(self, where: Filter) -> int:
        """Count rows matching a filter."""
        stmt = select(func.count()).select_from(self.table).where(self._where(where))
        result = await self._execute(stmt)
        return result.scalar() or 0

    async def find_unique(
        self, key: Mapping[str, Any], for_update: bool = False
    ) -> T | None:
        """Find a row by its unique key, optionally locking it."""
        stmt = select(self.table).where(self._key(key))
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._execute(stmt)
        row = result.fetchone()
        return self.to_model(row._asdict()) if row else None

    async def create(self, data: Mapping[str, Any]) -> T:
        """Insert a row and return it as stored."""
        values = {k: v for k, v in data.items() if k in self.table.c}
        stmt = self.table.insert().values(**values).returning(self.table)
        result = await self._execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return self.to_model(row._asdict())

    async def update(
        self, key: Mapping[str, Any], changes: Mapping[str, Any]
    ) -> T | None:
        """Change some fields of a row and return it as stored."""
        values = {k: v for k, v in changes.items() if k in self.table.c}
        if not values:
            return await self.find_unique(key)
        stmt = (
            self.table.update()
            .where(self._key(key))
            .values(**values)
            .returning(self.table)
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return self.to_model(row._asdict()) if row else None

    async def delete(self, key: Mapping[str, Any]) -> bool:
        """Delete a row by its unique key."""
        stmt = self.table.delete().where(self._key(key))
        result = await self._execute(stmt)
        await self.session.flush()
        return (result.rowcount or 0) > 0

    async def _execute(self, stmt: Any) -> Any:
        try:
            return await self.session.execute(stmt)
        except IntegrityError as e:
            logfire.warn(
                "Constraint violated", table=self.table.name, error=str(e.orig)
            )
            raise IntegrityViolationError(str(e.orig)) from e
        except SQLAlchemyError as e:
            logfire.error("Store failure", table=self.table.name, error=str(e))
            raise StoreError(str(e)) from e
