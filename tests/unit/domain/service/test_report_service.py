"""Unit tests for ReportService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from learnhub.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from learnhub.domain.repository import PostRepository, ReportRepository
from learnhub.domain.service import CommentService, PostService, ReportService
from learnhub.domain.value import (
    PostId,
    ReportId,
    ReportReason,
    ReportStatus,
    ResourceType,
    UserId,
    UserRole,
)
from tests.conftest import BASE_TIME, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

MODERATOR = UserRole.MODERATOR


@pytest.fixture
def moderator_id() -> UserId:
    return UserId(uuid4())


async def _post(unit_env, **fields):
    post_repo = await unit_env.get(PostRepository)
    return await post_repo.save(make_post(**fields))


async def _seed_reports(unit_env, count: int, **fields):
    """Reports one minute apart; the last one is the newest."""
    report_repo = await unit_env.get(ReportRepository)
    post = await _post(unit_env)
    return [
        await report_repo.create(
            {
                "reporter_id": UserId(uuid4()),
                "reason": ReportReason.SPAM,
                "post_id": post.id,
                "created_at": BASE_TIME + timedelta(minutes=i),
                **fields,
            }
        )
        for i in range(count)
    ]


class TestCreateReport:
    """Tests for create_report method."""

    @pytest.mark.asyncio
    async def test_report_post(self, unit_env, user_id):
        # Arrange
        report_service = await unit_env.get(ReportService)
        post = await _post(unit_env)

        # Act
        report = await report_service.create_report(
            user_id, ReportReason.MISINFORMATION, post_id=post.id
        )

        # Assert
        assert report.status is ReportStatus.PENDING
        assert report.resource_type is ResourceType.POST
        assert report.owner_id == user_id
        assert report.comment_id is None

    @pytest.mark.asyncio
    async def test_report_comment(self, unit_env, user_id):
        report_service = await unit_env.get(ReportService)
        comment_service = await unit_env.get(CommentService)
        post = await _post(unit_env)
        comment = await comment_service.create_comment(post.id, UserId(uuid4()), "Rude")

        report = await report_service.create_report(
            user_id, ReportReason.HARASSMENT, comment_id=comment.id
        )

        assert report.resource_type is ResourceType.COMMENT
        assert report.comment_id == comment.id

    @pytest.mark.asyncio
    async def test_needs_exactly_one_target(self, unit_env, user_id):
        report_service = await unit_env.get(ReportService)
        post = await _post(unit_env)

        with pytest.raises(ValidationError):
            await report_service.create_report(user_id, ReportReason.SPAM)
        with pytest.raises(ValidationError):
            await report_service.create_report(
                user_id, ReportReason.SPAM, post_id=post.id, comment_id=1
            )

    @pytest.mark.asyncio
    async def test_missing_target(self, unit_env, user_id):
        report_service = await unit_env.get(ReportService)

        with pytest.raises(NotFoundError, match="Post not found"):
            await report_service.create_report(
                user_id, ReportReason.SPAM, post_id=PostId(uuid4())
            )
        with pytest.raises(NotFoundError, match="Comment not found"):
            await report_service.create_report(
                user_id, ReportReason.SPAM, comment_id=42
            )

    @pytest.mark.asyncio
    async def test_own_content_cannot_be_reported(self, unit_env, user_id):
        report_service = await unit_env.get(ReportService)
        post = await _post(unit_env, author_id=user_id)

        with pytest.raises(NotAuthorizedError, match="not authorized to report"):
            await report_service.create_report(
                user_id, ReportReason.SPAM, post_id=post.id
            )


class TestListReports:
    """Tests for list_reports method."""

    @pytest.mark.asyncio
    async def test_newest_first_with_total(self, unit_env, moderator_id):
        # Arrange
        report_service = await unit_env.get(ReportService)
        reports = await _seed_reports(unit_env, 3)

        # Act
        first = await report_service.list_reports(moderator_id, MODERATOR, None, 2)
        rest = await report_service.list_reports(
            moderator_id, MODERATOR, first.next_cursor, 2
        )

        # Assert
        assert [r.id for r in first.data] == [reports[2].id, reports[1].id]
        assert first.has_more is True
        assert first.total == 3
        assert [r.id for r in rest.data] == [reports[0].id]
        assert rest.has_more is False

    @pytest.mark.asyncio
    async def test_equal_timestamps_break_ties_by_id(self, unit_env, moderator_id):
        """Reports filed at the same instant page newest ID first, without gaps."""
        report_service = await unit_env.get(ReportService)
        report_repo = await unit_env.get(ReportRepository)
        post = await _post(unit_env)
        created = [
            await report_repo.create(
                {
                    "reporter_id": UserId(uuid4()),
                    "reason": ReportReason.SPAM,
                    "post_id": post.id,
                    "created_at": BASE_TIME,
                }
            )
            for _ in range(3)
        ]

        seen = []
        cursor = None
        while True:
            page = await report_service.list_reports(
                moderator_id, MODERATOR, cursor, 1
            )
            seen += [r.id for r in page.data]
            if not page.has_more:
                break
            cursor = page.next_cursor

        assert seen == sorted((r.id for r in created), reverse=True)

    @pytest.mark.asyncio
    async def test_filters(self, unit_env, moderator_id):
        # Arrange
        report_service = await unit_env.get(ReportService)
        comment_service = await unit_env.get(CommentService)
        post_reports = await _seed_reports(unit_env, 2)
        post = await _post(unit_env)
        comment = await comment_service.create_comment(post.id, UserId(uuid4()), "x")
        comment_report = await report_service.create_report(
            UserId(uuid4()), ReportReason.OFF_TOPIC, comment_id=comment.id
        )
        await report_service.update_status(
            post_reports[0].id, ReportStatus.DISMISSED, moderator_id, MODERATOR
        )

        # Act
        async def ids(**filters):
            page = await report_service.list_reports(
                moderator_id, MODERATOR, None, 10, **filters
            )
            return {r.id for r in page.data}

        # Assert
        assert await ids(resource_type=ResourceType.COMMENT) == {comment_report.id}
        assert await ids(resource_type=ResourceType.POST) == {
            r.id for r in post_reports
        }
        assert await ids(status=ReportStatus.DISMISSED) == {post_reports[0].id}
        assert await ids(status=ReportStatus.PENDING) == {
            post_reports[1].id,
            comment_report.id,
        }
        assert await ids(comment_id=comment.id) == {comment_report.id}
        assert await ids(post_id=post_reports[0].post_id) == {
            r.id for r in post_reports
        }

    @pytest.mark.asyncio
    async def test_students_may_not_list(self, unit_env, user_id):
        report_service = await unit_env.get(ReportService)

        with pytest.raises(NotAuthorizedError):
            await report_service.list_reports(user_id, UserRole.STUDENT, None, 10)

    @pytest.mark.asyncio
    async def test_malformed_cursor(self, unit_env, moderator_id):
        report_service = await unit_env.get(ReportService)

        with pytest.raises(ValidationError):
            await report_service.list_reports(moderator_id, MODERATOR, "abc", 10)


class TestReview:
    """Tests for get_report, update_status, delete_report and count_by_status."""

    @pytest.mark.asyncio
    async def test_update_status_keeps_notes(self, unit_env, moderator_id):
        report_service = await unit_env.get(ReportService)
        (report,) = await _seed_reports(unit_env, 1)

        reviewed = await report_service.update_status(
            report.id, ReportStatus.REVIEWED, moderator_id, MODERATOR, "Checked"
        )
        dismissed = await report_service.update_status(
            report.id, ReportStatus.DISMISSED, moderator_id, MODERATOR
        )

        assert reviewed.moderator_notes == "Checked"
        assert dismissed.status is ReportStatus.DISMISSED
        assert dismissed.moderator_notes == "Checked"
        fetched = await report_service.get_report(report.id, moderator_id, MODERATOR)
        assert fetched == dismissed

    @pytest.mark.asyncio
    async def test_missing_report(self, unit_env, moderator_id):
        report_service = await unit_env.get(ReportService)
        missing = ReportId(404)

        with pytest.raises(NotFoundError):
            await report_service.get_report(missing, moderator_id, MODERATOR)
        with pytest.raises(NotFoundError):
            await report_service.update_status(
                missing, ReportStatus.REVIEWED, moderator_id, MODERATOR
            )
        with pytest.raises(NotFoundError):
            await report_service.delete_report(missing, moderator_id, MODERATOR)

    @pytest.mark.asyncio
    async def test_delete_report(self, unit_env, moderator_id):
        report_service = await unit_env.get(ReportService)
        (report,) = await _seed_reports(unit_env, 1)

        await report_service.delete_report(report.id, moderator_id, UserRole.ADMIN)

        with pytest.raises(NotFoundError):
            await report_service.get_report(report.id, moderator_id, MODERATOR)

    @pytest.mark.asyncio
    async def test_students_may_not_review(self, unit_env, user_id):
        report_service = await unit_env.get(ReportService)
        (report,) = await _seed_reports(unit_env, 1)

        with pytest.raises(NotAuthorizedError):
            await report_service.update_status(
                report.id, ReportStatus.DISMISSED, user_id, UserRole.STUDENT
            )
        with pytest.raises(NotAuthorizedError):
            await report_service.delete_report(report.id, user_id, UserRole.STUDENT)

    @pytest.mark.asyncio
    async def test_count_by_status(self, unit_env, moderator_id):
        report_service = await unit_env.get(ReportService)
        reports = await _seed_reports(unit_env, 3)
        await report_service.update_status(
            reports[0].id, ReportStatus.REVIEWED, moderator_id, MODERATOR
        )

        counts = await report_service.count_by_status(moderator_id, MODERATOR)

        assert counts == {
            ReportStatus.PENDING: 2,
            ReportStatus.REVIEWED: 1,
            ReportStatus.DISMISSED: 0,
        }

    @pytest.mark.asyncio
    async def test_deleting_post_removes_its_reports(self, unit_env, moderator_id):
        report_service = await unit_env.get(ReportService)
        post_service = await unit_env.get(PostService)
        (report,) = await _seed_reports(unit_env, 1)

        await post_service.delete_post(report.post_id, moderator_id, MODERATOR)

        page = await report_service.list_reports(moderator_id, MODERATOR, None, 10)
        assert page.data == []


class TestSetVisibility:
    """Tests for set_visibility method."""

    @pytest.mark.asyncio
    async def test_hide_post_and_comment(self, unit_env, moderator_id):
        report_service = await unit_env.get(ReportService)
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        post = await _post(unit_env)
        comment = await comment_service.create_comment(post.id, UserId(uuid4()), "x")

        assert await report_service.set_visibility(
            ResourceType.COMMENT, comment.id, True, moderator_id, MODERATOR
        )
        assert await report_service.set_visibility(
            ResourceType.POST, post.id, True, moderator_id, MODERATOR
        )

        assert (await post_service.require_post(post.id)).hidden is True
        assert (await comment_service.get_comment_by_id(comment.id)).hidden is True

    @pytest.mark.asyncio
    async def test_students_may_not_hide(self, unit_env, user_id):
        report_service = await unit_env.get(ReportService)
        post = await _post(unit_env)

        with pytest.raises(NotAuthorizedError):
            await report_service.set_visibility(
                ResourceType.POST, post.id, True, user_id, UserRole.STUDENT
            )
