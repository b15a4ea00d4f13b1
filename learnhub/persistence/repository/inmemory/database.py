"""Shared in-memory storage for the in-memory repositories."""

import itertools
from typing import Any


class InMemoryDatabase:
    """Tables of rows keyed by their unique key tuple.

    One instance plays the role of the database: repositories created for
    separate requests see each other's writes when they share it.
    """

    def __init__(self) -> None:
        self.tables: dict[str, dict[tuple[Any, ...], Any]] = {}
        self._sequences: dict[str, itertools.count] = {}

    def table(self, name: str) -> dict[tuple[Any, ...], Any]:
        return self.tables.setdefault(name, {})

    def next_id(self, name: str) -> int:
        """Next value of an increasing integer sequence, starting at 1."""
        return next(self._sequences.setdefault(name, itertools.count(1)))

    def delete_where(self, name: str, field: str, values: set[Any]) -> list[Any]:
        """Remove the rows of a table whose ``field`` is one of ``values``.

        Stands in for ``ON DELETE CASCADE`` foreign keys.

        Returns:
            The removed rows
        """
        table = self.table(name)
        doomed = [k for k, row in table.items() if getattr(row, field) in values]
        return [table.pop(k) for k in doomed]
