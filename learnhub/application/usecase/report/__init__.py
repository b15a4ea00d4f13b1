"""Moderation report use cases."""

from .create_report import CreateReportRequest, CreateReportUseCase, ListReasonsUseCase
from .items import ReasonItem, ReportItem, ReportPage
from .manage_reports import (
    DeleteReportUseCase,
    GetReportUseCase,
    ListReportsRequest,
    ListReportsUseCase,
    ModeratorRequest,
    ReportRequest,
    ReportStatsResponse,
    ReportStatsUseCase,
    ToggleVisibilityRequest,
    ToggleVisibilityResponse,
    ToggleVisibilityUseCase,
    UpdateReportStatusRequest,
    UpdateReportStatusUseCase,
)

__all__ = [
    "CreateReportRequest",
    "CreateReportUseCase",
    "DeleteReportUseCase",
    "GetReportUseCase",
    "ListReasonsUseCase",
    "ListReportsRequest",
    "ListReportsUseCase",
    "ModeratorRequest",
    "ReasonItem",
    "ReportItem",
    "ReportPage",
    "ReportRequest",
    "ReportStatsResponse",
    "ReportStatsUseCase",
    "ToggleVisibilityRequest",
    "ToggleVisibilityResponse",
    "ToggleVisibilityUseCase",
    "UpdateReportStatusRequest",
    "UpdateReportStatusUseCase",
]
