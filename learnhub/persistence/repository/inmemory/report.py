"""In-memory report repository for testing."""

from typing import Any, Mapping

from learnhub.domain.model.report import Report
from learnhub.domain.repository.report import ReportRepository
from learnhub.domain.value import ReportId

from .collection import InMemoryCollection


class InMemoryReportRepository(InMemoryCollection[Report], ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    table_name = "reports"
    model = Report

    def _prepare(self, data: Mapping[str, Any]) -> dict[str, Any]:
        prepared = dict(data)
        if prepared.get("id") is None:
            prepared["id"] = ReportId(self.database.next_id(self.table_name))
        return prepared
