"""Unit tests for CommentThreadService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from learnhub.domain.error import NotFoundError, ValidationError
from learnhub.domain.repository import CommentRepository, PostRepository
from learnhub.domain.service import CommentThreadService
from learnhub.domain.value import CommentId, PostId, UserId
from tests.conftest import BASE_TIME, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _thread(unit_env):
    """A post with top-level comments 1, 2, 3 and two replies to comment 1."""
    post = await (await unit_env.get(PostRepository)).save(make_post())
    comment_repo = await unit_env.get(CommentRepository)

    async def add(minutes: int, parent_id: int | None = None):
        return await comment_repo.create(
            {
                "post_id": post.id,
                "author_id": UserId(uuid4()),
                "content": f"at {minutes}",
                "parent_id": parent_id,
                "created_at": BASE_TIME + timedelta(minutes=minutes),
            }
        )

    tops = [await add(0), await add(1), await add(2)]
    replies = [await add(3, tops[0].id), await add(4, tops[0].id)]
    return post, tops, replies


class TestGetTopLevelComments:
    """Tests for get_top_level_comments method."""

    @pytest.mark.asyncio
    async def test_newest_first_with_total_of_all_comments(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(CommentThreadService)
        post, tops, _ = await _thread(unit_env)

        # Act
        page = await thread_service.get_top_level_comments(post.id, None, limit=2)

        # Assert
        assert [c.id for c in page.data] == [tops[2].id, tops[1].id]
        assert page.has_more is True
        assert page.next_cursor == tops[1].id
        # Replies count towards the post total
        assert page.total == 5

    @pytest.mark.asyncio
    async def test_second_page(self, unit_env):
        thread_service = await unit_env.get(CommentThreadService)
        post, tops, _ = await _thread(unit_env)

        page = await thread_service.get_top_level_comments(
            post.id, str(tops[1].id), limit=2
        )

        assert [c.id for c in page.data] == [tops[0].id]
        assert page.has_more is False
        assert page.next_cursor is None

    @pytest.mark.asyncio
    async def test_replies_are_excluded(self, unit_env):
        thread_service = await unit_env.get(CommentThreadService)
        post, _, replies = await _thread(unit_env)

        page = await thread_service.get_top_level_comments(post.id, None, limit=10)

        assert all(c.parent_id is None for c in page.data)
        assert not {r.id for r in replies} & {c.id for c in page.data}

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        thread_service = await unit_env.get(CommentThreadService)

        with pytest.raises(NotFoundError, match="Post not found"):
            await thread_service.get_top_level_comments(PostId(uuid4()), None, 10)

    @pytest.mark.asyncio
    async def test_malformed_input_checked_before_post_lookup(self, unit_env):
        """A bad cursor on a missing post is reported as a validation error."""
        thread_service = await unit_env.get(CommentThreadService)

        with pytest.raises(ValidationError):
            await thread_service.get_top_level_comments(PostId(uuid4()), "abc", 10)
        with pytest.raises(ValidationError):
            await thread_service.get_top_level_comments(PostId(uuid4()), None, 0)

    @pytest.mark.asyncio
    async def test_post_without_comments(self, unit_env):
        thread_service = await unit_env.get(CommentThreadService)
        post = await (await unit_env.get(PostRepository)).save(make_post())

        page = await thread_service.get_top_level_comments(post.id, None, 10)

        assert page.data == []
        assert page.has_more is False
        assert page.total == 0


class TestGetReplies:
    """Tests for get_replies method."""

    @pytest.mark.asyncio
    async def test_oldest_first_with_reply_count(self, unit_env):
        thread_service = await unit_env.get(CommentThreadService)
        _, tops, replies = await _thread(unit_env)

        page = await thread_service.get_replies(tops[0].id, None, limit=1)

        assert [c.id for c in page.data] == [replies[0].id]
        assert page.has_more is True
        assert page.total == 2

        rest = await thread_service.get_replies(tops[0].id, page.next_cursor, limit=1)
        assert [c.id for c in rest.data] == [replies[1].id]
        assert rest.has_more is False

    @pytest.mark.asyncio
    async def test_comment_without_replies(self, unit_env):
        thread_service = await unit_env.get(CommentThreadService)
        _, tops, _ = await _thread(unit_env)

        page = await thread_service.get_replies(tops[2].id, None, limit=10)

        assert page.data == []
        assert page.total == 0


class TestCountReplies:
    """Tests for count_replies method."""

    @pytest.mark.asyncio
    async def test_counts_per_parent(self, unit_env):
        thread_service = await unit_env.get(CommentThreadService)
        _, tops, _ = await _thread(unit_env)

        counts = await thread_service.count_replies([t.id for t in tops])

        assert counts == {tops[0].id: 2, tops[1].id: 0, tops[2].id: 0}

    @pytest.mark.asyncio
    async def test_empty_batch(self, unit_env):
        thread_service = await unit_env.get(CommentThreadService)

        assert await thread_service.count_replies([]) == {}

    @pytest.mark.asyncio
    async def test_unknown_parent(self, unit_env):
        thread_service = await unit_env.get(CommentThreadService)

        assert await thread_service.count_replies([CommentId(99)]) == {99: 0}
