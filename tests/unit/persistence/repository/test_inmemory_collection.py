"""Unit tests for the in-memory collection."""

from datetime import datetime
from uuid import uuid4

import pytest
from pydantic import ValidationError as ModelValidationError

from learnhub.domain.pagination import Condition, Filter, Op, asc, desc
from learnhub.domain.value import PostId, UserId
from learnhub.persistence.error import IntegrityViolationError
from learnhub.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDatabase,
    InMemoryLikeRepository,
    InMemoryPostRepository,
    InMemoryReportRepository,
)
from learnhub.persistence.repository.inmemory.collection import is_after, sort_rows
from tests.conftest import make_post


class TestInMemoryCollection:
    """Tests for filtering, ordering and keyset bounds."""

    @pytest.mark.asyncio
    async def test_filter_any_of(self):
        repo = InMemoryPostRepository()
        a = await repo.save(make_post("Graph theory"))
        b = await repo.save(make_post("Notes", content="about graphs"))
        await repo.save(make_post("Chemistry"))

        rows = await repo.find_many(
            Filter().or_any(
                [
                    Condition(field="title", op=Op.ICONTAINS, value="GRAPH"),
                    Condition(field="content", op=Op.ICONTAINS, value="GRAPH"),
                ]
            ),
            order=(asc("title"),),
            limit=10,
        )

        assert [r.id for r in rows] == [a.id, b.id]

    @pytest.mark.asyncio
    async def test_filter_has_tag(self):
        repo = InMemoryPostRepository()
        tagged = await repo.save(make_post(tag_names=["biology", "exam"]))
        await repo.save(make_post(tag_names=["biology"]))

        rows = await repo.find_many(
            Filter().and_(Condition(field="tag_names", op=Op.HAS, value="exam")),
            order=(asc("id"),),
            limit=10,
        )

        assert [r.id for r in rows] == [tagged.id]
        assert await repo.count(Filter.where(hidden=False)) == 2

    @pytest.mark.asyncio
    async def test_duplicate_key_is_integrity_violation(self):
        repo = InMemoryLikeRepository()
        key = {"user_id": UserId(uuid4()), "post_id": PostId(uuid4())}
        await repo.create(key)

        with pytest.raises(IntegrityViolationError):
            await repo.create(key)

    @pytest.mark.asyncio
    async def test_repositories_sharing_a_database_see_each_other(self):
        database = InMemoryDatabase()
        post = await InMemoryPostRepository(database).save(make_post())

        assert await InMemoryPostRepository(database).find_unique({"id": post.id})
        assert not await InMemoryPostRepository().find_unique({"id": post.id})

    @pytest.mark.asyncio
    async def test_delete_reports_missing_rows(self):
        repo = InMemoryPostRepository()
        post = await repo.save(make_post())

        assert await repo.delete({"id": post.id}) is True
        assert await repo.delete({"id": post.id}) is False

    @pytest.mark.asyncio
    async def test_update_revalidates_and_replaces_row(self):
        repo = InMemoryPostRepository()
        post = await repo.save(make_post("Before"))

        updated = await repo.update({"id": post.id}, {"title": "After"})

        assert updated.title == "After"
        assert await repo.find_unique({"id": post.id}) == updated
        assert await repo.update({"id": PostId(uuid4())}, {"title": "x"}) is None
        with pytest.raises(ModelValidationError):
            await repo.update({"id": post.id}, {"title": ""})

    @pytest.mark.asyncio
    async def test_post_hidden_filter_reads_the_related_post(self):
        database = InMemoryDatabase()
        posts = InMemoryPostRepository(database)
        likes = InMemoryLikeRepository(database)
        user_id = UserId(uuid4())
        shown = await posts.save(make_post())
        hidden = await posts.save(make_post(hidden=True))
        for post in (shown, hidden):
            await likes.create(
                {"user_id": user_id, "post_id": post.id, "created_at": datetime.now()}
            )

        where = Filter.where(user_id=user_id, post_hidden=False)
        rows = await likes.find_many(where, order=(desc("created_at"),), limit=10)

        assert [r.post_id for r in rows] == [shown.id]
        assert await likes.count(where) == 1

    @pytest.mark.asyncio
    async def test_post_delete_cascades(self):
        database = InMemoryDatabase()
        posts = InMemoryPostRepository(database)
        comments = InMemoryCommentRepository(database)
        likes = InMemoryLikeRepository(database)
        reports = InMemoryReportRepository(database)
        post = await posts.save(make_post())
        kept = await posts.save(make_post())
        top = await comments.create(
            {"post_id": post.id, "author_id": UserId(uuid4()), "content": "top"}
        )
        await comments.create(
            {
                "post_id": post.id,
                "author_id": UserId(uuid4()),
                "content": "reply",
                "parent_id": top.id,
            }
        )
        await likes.create({"user_id": UserId(uuid4()), "post_id": post.id})
        await likes.create({"user_id": UserId(uuid4()), "post_id": kept.id})
        for target in ({"post_id": post.id}, {"comment_id": top.id}):
            await reports.create(
                {"reporter_id": UserId(uuid4()), "reason": "spam", **target}
            )

        await posts.delete({"id": post.id})

        assert await comments.count_by_post([post.id]) == {post.id: 0}
        assert await likes.count_by_post([post.id, kept.id]) == {
            post.id: 0,
            kept.id: 1,
        }
        assert await reports.count(Filter()) == 0

    @pytest.mark.asyncio
    async def test_comment_delete_removes_replies_and_their_reports(self):
        database = InMemoryDatabase()
        comments = InMemoryCommentRepository(database)
        reports = InMemoryReportRepository(database)
        post_id = PostId(uuid4())
        top = await comments.create(
            {"post_id": post_id, "author_id": UserId(uuid4()), "content": "top"}
        )
        reply = await comments.create(
            {
                "post_id": post_id,
                "author_id": UserId(uuid4()),
                "content": "reply",
                "parent_id": top.id,
            }
        )
        await reports.create(
            {"reporter_id": UserId(uuid4()), "reason": "spam", "comment_id": reply.id}
        )

        await comments.delete({"id": top.id})

        assert await comments.find_unique({"id": reply.id}) is None
        assert await reports.count(Filter()) == 0


class Row:
    def __init__(self, created_at, id):
        self.created_at = created_at
        self.id = id


class TestOrdering:
    """Tests for multi-key sorting and the strictly-after predicate."""

    def test_sort_rows_mixed_directions(self):
        t1, t2 = datetime(2024, 1, 1), datetime(2024, 1, 2)
        rows = [Row(t1, 1), Row(t2, 2), Row(t1, 3)]

        ordered = sort_rows(rows, (desc("created_at"), asc("id")))

        assert [r.id for r in ordered] == [2, 1, 3]

    def test_is_after_uses_each_key_direction(self):
        t1, t2 = datetime(2024, 1, 1), datetime(2024, 1, 2)
        order = (desc("created_at"), desc("id"))
        anchor = {"created_at": t1, "id": 5}

        assert is_after(Row(t1, 4), order, anchor)
        assert not is_after(Row(t1, 5), order, anchor)
        assert not is_after(Row(t1, 6), order, anchor)
        assert not is_after(Row(t2, 1), order, anchor)
