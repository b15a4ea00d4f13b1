"""PostgreSQL implementation of Report repository."""

from typing import Any, Mapping

from learnhub.domain.model import Report
from learnhub.domain.repository import ReportRepository
from learnhub.persistence.mappers import row_to_report
from learnhub.persistence.repository.collection import PostgresCollection
from learnhub.persistence.tables import reports_table


def _plain(data: Mapping[str, Any]) -> dict[str, Any]:
    # Enum members are stored by value
    return {k: getattr(v, "value", v) for k, v in data.items()}


class PostgresReportRepository(PostgresCollection[Report], ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    table = reports_table
    to_model = staticmethod(row_to_report)

    async def create(self, data: Mapping[str, Any]) -> Report:
        return await super().create(_plain(data))

    async def update(
        self, key: Mapping[str, Any], changes: Mapping[str, Any]
    ) -> Report | None:
        return await super().update(key, _plain(changes))
