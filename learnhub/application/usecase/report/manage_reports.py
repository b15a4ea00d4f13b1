"""Moderator use cases: reviewing reports and hiding reported content."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from learnhub.application.usecase.common import (
    PaginationInfo,
    parse_comment_id,
    parse_uuid,
)
from learnhub.application.usecase.report.items import ReportItem, ReportPage
from learnhub.config import PaginationSettings
from learnhub.domain.pagination import parse_cursor, parse_limit
from learnhub.domain.service import ReportService
from learnhub.domain.value import (
    PostId,
    ReportId,
    ReportStatus,
    ResourceType,
    UserId,
    UserRole,
)


class ModeratorRequest(BaseModel):
    """Identity of the moderator making a request."""

    user_id: str
    role: UserRole = UserRole.STUDENT

    @property
    def moderator_id(self) -> UserId:
        return UserId(UUID(self.user_id))


class ListReportsRequest(ModeratorRequest):
    """Reports listing request."""

    status: ReportStatus | None = None
    resource_type: ResourceType | None = None
    post_id: str | None = None
    comment_id: str | int | None = None
    cursor: str | None = None
    limit: str | int | None = None


class ReportRequest(ModeratorRequest):
    """Request about one report."""

    report_id: str | int


class UpdateReportStatusRequest(ReportRequest):
    """Review decision on a report."""

    status: ReportStatus
    moderator_notes: str | None = Field(default=None, max_length=2000)


class ToggleVisibilityRequest(ModeratorRequest):
    """Hide or show a post or a comment."""

    resource_type: ResourceType
    resource_id: str | int
    hidden: bool


class ToggleVisibilityResponse(BaseModel):
    """Visibility of the content after the change."""

    resource_type: ResourceType
    resource_id: str
    hidden: bool


class ReportStatsResponse(BaseModel):
    """Number of reports per status."""

    counts: dict[ReportStatus, int]
    total: int


def _report_id(raw: str | int) -> ReportId:
    return ReportId(parse_comment_id(raw, "report_id"))


class ListReportsUseCase:
    """Use case for the moderation queue, newest first, with total."""

    def __init__(
        self, report_service: ReportService, pagination: PaginationSettings
    ) -> None:
        self.report_service = report_service
        self.pagination = pagination

    async def execute(self, request: ListReportsRequest) -> ReportPage:
        """Execute list reports flow.

        Raises:
            ValidationError: If a filter, limit or cursor is malformed
            NotAuthorizedError: If the user may not moderate
        """
        limits = self.pagination.reports
        post_id = (
            PostId(parse_uuid(request.post_id, "post_id")) if request.post_id else None
        )
        comment_id = (
            parse_comment_id(request.comment_id)
            if request.comment_id is not None
            else None
        )
        with logfire.span("list_reports.execute", status=request.status):
            page = await self.report_service.list_reports(
                user_id=request.moderator_id,
                role=request.role,
                cursor=parse_cursor(request.cursor),
                limit=parse_limit(request.limit, limits.default, limits.maximum),
                status=request.status,
                resource_type=request.resource_type,
                post_id=post_id,
                comment_id=comment_id,
            )
            return ReportPage(
                data=[ReportItem.from_report(r) for r in page.data],
                pagination=PaginationInfo.of(page),
            )


class GetReportUseCase:
    """Use case for a single report."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(self, request: ReportRequest) -> ReportItem:
        report = await self.report_service.get_report(
            _report_id(request.report_id), request.moderator_id, request.role
        )
        return ReportItem.from_report(report)


class UpdateReportStatusUseCase:
    """Use case for recording a review decision."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(self, request: UpdateReportStatusRequest) -> ReportItem:
        """Execute report review flow.

        Raises:
            ValidationError: If the report ID is malformed
            NotAuthorizedError: If the user may not moderate
            NotFoundError: If the report does not exist
        """
        report = await self.report_service.update_status(
            report_id=_report_id(request.report_id),
            status=request.status,
            user_id=request.moderator_id,
            role=request.role,
            moderator_notes=request.moderator_notes,
        )
        return ReportItem.from_report(report)


class DeleteReportUseCase:
    """Use case for removing a report."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(self, request: ReportRequest) -> None:
        await self.report_service.delete_report(
            _report_id(request.report_id), request.moderator_id, request.role
        )


class ReportStatsUseCase:
    """Use case counting reports per status."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(self, request: ModeratorRequest) -> ReportStatsResponse:
        counts = await self.report_service.count_by_status(
            request.moderator_id, request.role
        )
        return ReportStatsResponse(counts=counts, total=sum(counts.values()))


class ToggleVisibilityUseCase:
    """Use case for hiding reported content or showing it again."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(
        self, request: ToggleVisibilityRequest
    ) -> ToggleVisibilityResponse:
        """Execute visibility flow.

        Raises:
            ValidationError: If the resource ID is malformed
            NotAuthorizedError: If the user may not moderate
            NotFoundError: If the content does not exist
        """
        if request.resource_type is ResourceType.POST:
            resource_id = PostId(parse_uuid(str(request.resource_id), "resource_id"))
        else:
            resource_id = parse_comment_id(request.resource_id, "resource_id")

        with logfire.span(
            "toggle_visibility.execute",
            resource_type=request.resource_type.value,
            hidden=request.hidden,
        ):
            hidden = await self.report_service.set_visibility(
                resource_type=request.resource_type,
                resource_id=resource_id,
                hidden=request.hidden,
                user_id=request.moderator_id,
                role=request.role,
            )
            return ToggleVisibilityResponse(
                resource_type=request.resource_type,
                resource_id=str(resource_id),
                hidden=hidden,
            )
