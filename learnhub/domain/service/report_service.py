"""Moderation report domain service."""

from datetime import datetime

import logfire

from learnhub.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from learnhub.domain.model.report import Report
from learnhub.domain.pagination import (
    Condition,
    Filter,
    IntCursorCodec,
    Page,
    PageRequest,
    SinglePageFetcher,
    desc,
)
from learnhub.domain.repository import ReportRepository
from learnhub.domain.value import (
    CommentId,
    PostId,
    ReportId,
    ReportReason,
    ReportStatus,
    ResourceType,
    UserId,
    UserRole,
)

from .base import Service
from .comment_service import CommentService
from .post_service import PostService


class ReportService(Service):
    """Users flag posts and comments; moderators review the reports.

    Everything except filing a report requires a moderating role.
    """

    def __init__(
        self,
        report_repository: ReportRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        """Initialize report service.

        Args:
            report_repository: Report repository
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.report_repository = report_repository
        self.post_service = post_service
        self.comment_service = comment_service
        self._pages = SinglePageFetcher(report_repository, IntCursorCodec())

    async def create_report(
        self,
        reporter_id: UserId,
        reason: ReportReason,
        post_id: PostId | None = None,
        comment_id: CommentId | None = None,
    ) -> Report:
        """File a report against a post or a comment.

        Raises:
            ValidationError: If not exactly one target is given
            NotFoundError: If the target does not exist
            NotAuthorizedError: If the reporter wrote the target
        """
        if (post_id is None) == (comment_id is None):
            raise ValidationError("Report exactly one of post_id and comment_id")

        with logfire.span(
            "report_service.create_report",
            reporter_id=str(reporter_id),
            reason=reason.value,
        ):
            if post_id is not None:
                target = await self.post_service.require_post(post_id)
                resource, resource_id = "post", str(post_id)
            else:
                target = await self.comment_service.get_comment_by_id(comment_id)
                if target is None:
                    raise NotFoundError("Comment", str(comment_id))
                resource, resource_id = "comment", str(comment_id)

            if target.owner_id == reporter_id:
                logfire.warn(
                    "Self-report attempt",
                    resource=resource,
                    resource_id=resource_id,
                    reporter_id=str(reporter_id),
                )
                raise NotAuthorizedError(
                    resource, resource_id, str(reporter_id), "report"
                )

            saved = await self.report_repository.create(
                {
                    "reporter_id": reporter_id,
                    "reason": reason,
                    "post_id": post_id,
                    "comment_id": comment_id,
                    "status": ReportStatus.PENDING,
                    "created_at": datetime.now(),
                }
            )
            logfire.info(
                "Report filed",
                report_id=saved.id,
                resource=resource,
                resource_id=resource_id,
            )
            return saved

    async def list_reports(
        self,
        user_id: UserId,
        role: UserRole,
        cursor: str | int | None,
        limit: int,
        status: ReportStatus | None = None,
        resource_type: ResourceType | None = None,
        post_id: PostId | None = None,
        comment_id: CommentId | None = None,
    ) -> Page[Report]:
        """Page through reports, newest first, with total.

        Args:
            user_id: Moderator asking
            role: Role of that user
            cursor: ID of the last report of the previous page
            limit: Page size
            status: Only reports in this status
            resource_type: Only reports against posts, or against comments
            post_id: Only reports against this post
            comment_id: Only reports against this comment

        Returns:
            Page of reports with the number of matching reports as total
        """
        self._require_moderator(user_id, role, "reports")
        with logfire.span(
            "report_service.list_reports",
            status=status.value if status else None,
            limit=limit,
        ):
            conditions = []
            if status is not None:
                conditions.append(Condition(field="status", value=status.value))
            if resource_type is ResourceType.POST:
                conditions.append(Condition(field="comment_id", value=None))
            elif resource_type is ResourceType.COMMENT:
                conditions.append(Condition(field="post_id", value=None))
            if post_id is not None:
                conditions.append(Condition(field="post_id", value=post_id))
            if comment_id is not None:
                conditions.append(Condition(field="comment_id", value=comment_id))
            where = Filter(all_of=tuple(conditions))

            page = await self._pages.paginate(
                PageRequest(
                    where=where,
                    order=(desc("created_at"),),
                    cursor=cursor,
                    limit=limit,
                )
            )
            return page.with_total(await self.report_repository.count(where))

    async def get_report(
        self, report_id: ReportId, user_id: UserId, role: UserRole
    ) -> Report:
        """Get a report by ID.

        Raises:
            NotAuthorizedError: If the user may not moderate
            NotFoundError: If the report does not exist
        """
        self._require_moderator(user_id, role, "report", report_id)
        report = await self.report_repository.find_unique({"id": report_id})
        if report is None:
            raise NotFoundError("Report", str(report_id))
        return report

    async def update_status(
        self,
        report_id: ReportId,
        status: ReportStatus,
        user_id: UserId,
        role: UserRole,
        moderator_notes: str | None = None,
    ) -> Report:
        """Record a moderator's decision on a report.

        Notes are kept unless new ones are given.

        Raises:
            NotAuthorizedError: If the user may not moderate
            NotFoundError: If the report does not exist
        """
        self._require_moderator(user_id, role, "report", report_id)
        with logfire.span(
            "report_service.update_status", report_id=report_id, status=status.value
        ):
            changes: dict = {"status": status}
            if moderator_notes is not None:
                changes["moderator_notes"] = moderator_notes
            updated = await self.report_repository.update({"id": report_id}, changes)
            if updated is None:
                raise NotFoundError("Report", str(report_id))
            logfire.info(
                "Report reviewed",
                report_id=report_id,
                status=status.value,
                moderator_id=str(user_id),
            )
            return updated

    async def delete_report(
        self, report_id: ReportId, user_id: UserId, role: UserRole
    ) -> None:
        """Delete a report.

        Raises:
            NotAuthorizedError: If the user may not moderate
            NotFoundError: If the report does not exist
        """
        self._require_moderator(user_id, role, "report", report_id)
        if not await self.report_repository.delete({"id": report_id}):
            raise NotFoundError("Report", str(report_id))
        logfire.info("Report deleted", report_id=report_id)

    async def count_by_status(
        self, user_id: UserId, role: UserRole
    ) -> dict[ReportStatus, int]:
        """Number of reports in each status."""
        self._require_moderator(user_id, role, "reports")
        counts = {}
        for status in ReportStatus:
            where = Filter.where(status=status.value)
            counts[status] = await self.report_repository.count(where)
        return counts

    async def set_visibility(
        self,
        resource_type: ResourceType,
        resource_id: PostId | CommentId,
        hidden: bool,
        user_id: UserId,
        role: UserRole,
    ) -> bool:
        """Hide reported content or show it again.

        Returns:
            The new hidden flag
        """
        if resource_type is ResourceType.POST:
            post = await self.post_service.set_hidden(
                resource_id, hidden, user_id, role
            )
            return post.hidden
        comment = await self.comment_service.set_hidden(
            resource_id, hidden, user_id, role
        )
        return comment.hidden

    @staticmethod
    def _require_moderator(
        user_id: UserId, role: UserRole, resource: str, resource_id: object = ""
    ) -> None:
        if not role.can_moderate:
            logfire.warn(
                "Moderation attempt without role",
                user_id=str(user_id),
                role=role.value,
                resource=resource,
            )
            raise NotAuthorizedError(
                resource, str(resource_id), str(user_id), "moderate"
            )
