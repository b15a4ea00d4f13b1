"""Create report use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from learnhub.application.usecase.common import parse_comment_id, parse_uuid
from learnhub.application.usecase.report.items import ReasonItem, ReportItem
from learnhub.domain.service import ReportService
from learnhub.domain.value import CommentId, PostId, ReportReason, UserId


class CreateReportRequest(BaseModel):
    """Create report request; exactly one of post_id and comment_id."""

    reason: ReportReason
    post_id: str | None = None
    comment_id: str | int | None = None
    reporter_id: str  # Set from the authenticated user


class CreateReportUseCase:
    """Use case for flagging a post or a comment."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(self, request: CreateReportRequest) -> ReportItem:
        """Execute create report flow.

        Raises:
            ValidationError: If the target is missing, doubled or malformed
            NotFoundError: If the target does not exist
            NotAuthorizedError: If users report their own content
        """
        post_id = (
            PostId(parse_uuid(request.post_id, "post_id"))
            if request.post_id is not None
            else None
        )
        comment_id: CommentId | None = (
            parse_comment_id(request.comment_id)
            if request.comment_id is not None
            else None
        )
        with logfire.span("create_report.execute", reason=request.reason.value):
            report = await self.report_service.create_report(
                reporter_id=UserId(UUID(request.reporter_id)),
                reason=request.reason,
                post_id=post_id,
                comment_id=comment_id,
            )
            return ReportItem.from_report(report)


class ListReasonsUseCase:
    """Use case listing the reasons a report may give."""

    async def execute(self) -> list[ReasonItem]:
        return [ReasonItem(value=reason, label=reason.label) for reason in ReportReason]
