"""Report routes: users flag content, moderators review and hide it.

Fixed paths are declared before ``/reports/{report_id}`` so they are not
taken for report IDs.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from learnhub.application.usecase.report import (
    CreateReportRequest,
    CreateReportUseCase,
    DeleteReportUseCase,
    GetReportUseCase,
    ListReasonsUseCase,
    ListReportsRequest,
    ListReportsUseCase,
    ModeratorRequest,
    ReasonItem,
    ReportItem,
    ReportPage,
    ReportRequest,
    ReportStatsResponse,
    ReportStatsUseCase,
    ToggleVisibilityRequest,
    ToggleVisibilityResponse,
    ToggleVisibilityUseCase,
    UpdateReportStatusRequest,
    UpdateReportStatusUseCase,
)
from learnhub.domain.error import DomainError
from learnhub.domain.value import ReportReason, ReportStatus, ResourceType
from learnhub.interface.api.identity import CurrentUser, get_current_user
from learnhub.interface.error import to_http_exception
from learnhub.persistence.error import StoreError

router = APIRouter(tags=["reports"], route_class=DishkaRoute)


class CreateReportAPIRequest(BaseModel):
    """API request for reporting a post or a comment."""

    reason: ReportReason
    post_id: str | None = None
    comment_id: int | None = None


class UpdateReportStatusAPIRequest(BaseModel):
    """API request for reviewing a report."""

    status: ReportStatus
    moderator_notes: str | None = Field(default=None, max_length=2000)


class ToggleVisibilityAPIRequest(BaseModel):
    """API request for hiding or showing content."""

    resource_type: ResourceType
    resource_id: str | int
    hidden: bool


@router.get("/reports/reasons", response_model=list[ReasonItem])
async def list_reasons(
    list_reasons_use_case: FromDishka[ListReasonsUseCase],
) -> list[ReasonItem]:
    """Reasons a report may give."""
    return await list_reasons_use_case.execute()


@router.post(
    "/reports", response_model=ReportItem, status_code=status.HTTP_201_CREATED
)
async def create_report(
    request: CreateReportAPIRequest,
    create_report_use_case: FromDishka[CreateReportUseCase],
    user: CurrentUser = Depends(get_current_user),
) -> ReportItem:
    """Report a post or a comment written by someone else."""
    try:
        return await create_report_use_case.execute(
            CreateReportRequest(
                reason=request.reason,
                post_id=request.post_id,
                comment_id=request.comment_id,
                reporter_id=user.user_id,
            )
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.get("/reports", response_model=ReportPage)
async def list_reports(
    list_reports_use_case: FromDishka[ListReportsUseCase],
    report_status: ReportStatus | None = Query(default=None, alias="status"),
    resource_type: ResourceType | None = Query(default=None),
    post_id: str | None = Query(default=None),
    comment_id: str | None = Query(default=None),
    cursor: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    user: CurrentUser = Depends(get_current_user),
) -> ReportPage:
    """Moderation queue, newest first, with total. Moderators only."""
    try:
        return await list_reports_use_case.execute(
            ListReportsRequest(
                user_id=user.user_id,
                role=user.role,
                status=report_status,
                resource_type=resource_type,
                post_id=post_id,
                comment_id=comment_id,
                cursor=cursor,
                limit=limit,
            )
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.get("/reports/stats", response_model=ReportStatsResponse)
async def report_stats(
    report_stats_use_case: FromDishka[ReportStatsUseCase],
    user: CurrentUser = Depends(get_current_user),
) -> ReportStatsResponse:
    """Number of reports in each status. Moderators only."""
    try:
        return await report_stats_use_case.execute(
            ModeratorRequest(user_id=user.user_id, role=user.role)
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.patch("/reports/toggle-visibility", response_model=ToggleVisibilityResponse)
async def toggle_visibility(
    request: ToggleVisibilityAPIRequest,
    toggle_visibility_use_case: FromDishka[ToggleVisibilityUseCase],
    user: CurrentUser = Depends(get_current_user),
) -> ToggleVisibilityResponse:
    """Hide a post or a comment, or show it again. Moderators only."""
    try:
        return await toggle_visibility_use_case.execute(
            ToggleVisibilityRequest(
                user_id=user.user_id,
                role=user.role,
                resource_type=request.resource_type,
                resource_id=request.resource_id,
                hidden=request.hidden,
            )
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.get("/reports/{report_id}", response_model=ReportItem)
async def get_report(
    report_id: str,
    get_report_use_case: FromDishka[GetReportUseCase],
    user: CurrentUser = Depends(get_current_user),
) -> ReportItem:
    """Get a report. Moderators only."""
    try:
        return await get_report_use_case.execute(
            ReportRequest(report_id=report_id, user_id=user.user_id, role=user.role)
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.put("/reports/{report_id}", response_model=ReportItem)
async def update_report_status(
    report_id: str,
    request: UpdateReportStatusAPIRequest,
    update_report_status_use_case: FromDishka[UpdateReportStatusUseCase],
    user: CurrentUser = Depends(get_current_user),
) -> ReportItem:
    """Record a review decision. Moderators only."""
    try:
        return await update_report_status_use_case.execute(
            UpdateReportStatusRequest(
                report_id=report_id,
                user_id=user.user_id,
                role=user.role,
                status=request.status,
                moderator_notes=request.moderator_notes,
            )
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)


@router.delete("/reports/{report_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_report(
    report_id: str,
    delete_report_use_case: FromDishka[DeleteReportUseCase],
    user: CurrentUser = Depends(get_current_user),
) -> Response:
    """Delete a report. Moderators only."""
    try:
        await delete_report_use_case.execute(
            ReportRequest(report_id=report_id, user_id=user.user_id, role=user.role)
        )
    except (DomainError, StoreError) as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
