"""Report response items."""

from datetime import datetime

from pydantic import BaseModel

from learnhub.application.usecase.common import PaginationInfo
from learnhub.domain.model import Report
from learnhub.domain.value import ReportReason, ReportStatus, ResourceType


class ReportItem(BaseModel):
    """Report item in responses."""

    report_id: int
    reporter_id: str
    reason: ReportReason
    resource_type: ResourceType
    post_id: str | None
    comment_id: int | None
    status: ReportStatus
    moderator_notes: str | None
    created_at: datetime

    @classmethod
    def from_report(cls, report: Report) -> "ReportItem":
        return cls(
            report_id=report.id,
            reporter_id=str(report.reporter_id),
            reason=report.reason,
            resource_type=report.resource_type,
            post_id=str(report.post_id) if report.post_id else None,
            comment_id=report.comment_id,
            status=report.status,
            moderator_notes=report.moderator_notes,
            created_at=report.created_at,
        )


class ReportPage(BaseModel):
    """A page of reports."""

    data: list[ReportItem]
    pagination: PaginationInfo


class ReasonItem(BaseModel):
    """A reason users may pick when reporting."""

    value: ReportReason
    label: str
