"""Report repository interface."""

from learnhub.domain.model.report import Report
from learnhub.domain.repository.collection import Collection


class ReportRepository(Collection[Report]):
    """Repository for moderation reports.

    Report ids are store-assigned increasing integers.
    """

    key_fields = ("id",)
