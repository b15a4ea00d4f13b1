"""Unit tests for ReactionService (likes and bookmarks)."""

from uuid import uuid4

import pytest

from learnhub.domain.error import AlreadyExistsError, NotFoundError, ValidationError
from learnhub.domain.repository import LikeRepository, PostRepository
from learnhub.domain.service import ReactionService
from learnhub.domain.value import PostId, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _posts(unit_env, count: int, **fields):
    post_repo = await unit_env.get(PostRepository)
    return [
        await post_repo.save(make_post(f"post {i}", minutes=i, **fields))
        for i in range(count)
    ]


class TestLikes:
    """Tests for like_post / unlike_post."""

    @pytest.mark.asyncio
    async def test_like_post(self, unit_env, user_id):
        reaction_service = await unit_env.get(ReactionService)
        like_repo = await unit_env.get(LikeRepository)
        (post,) = await _posts(unit_env, 1)

        like = await reaction_service.like_post(user_id, post.id)

        assert like.owner_id == user_id
        assert await like_repo.find_unique({"user_id": user_id, "post_id": post.id})

    @pytest.mark.asyncio
    async def test_duplicate_like(self, unit_env, user_id):
        reaction_service = await unit_env.get(ReactionService)
        (post,) = await _posts(unit_env, 1)
        await reaction_service.like_post(user_id, post.id)

        with pytest.raises(AlreadyExistsError):
            await reaction_service.like_post(user_id, post.id)

    @pytest.mark.asyncio
    async def test_like_missing_post(self, unit_env, user_id):
        reaction_service = await unit_env.get(ReactionService)

        with pytest.raises(NotFoundError, match="Post not found"):
            await reaction_service.like_post(user_id, PostId(uuid4()))

    @pytest.mark.asyncio
    async def test_unlike(self, unit_env, user_id):
        reaction_service = await unit_env.get(ReactionService)
        (post,) = await _posts(unit_env, 1)
        await reaction_service.like_post(user_id, post.id)

        await reaction_service.unlike_post(user_id, post.id)

        with pytest.raises(NotFoundError, match="Like not found"):
            await reaction_service.unlike_post(user_id, post.id)

    @pytest.mark.asyncio
    async def test_liked_posts_most_recent_first(self, unit_env, user_id):
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        posts = await _posts(unit_env, 3)
        for post in posts:
            await reaction_service.like_post(user_id, post.id)
        await reaction_service.like_post(UserId(uuid4()), posts[0].id)

        # Act
        first = await reaction_service.get_liked_posts(user_id, None, limit=2)

        # Assert
        assert len(first.data) == 2
        assert first.has_more is True
        assert first.next_cursor == {
            "user_id": str(user_id),
            "post_id": str(first.data[-1].id),
        }

        rest = await reaction_service.get_liked_posts(
            user_id, first.next_cursor, limit=2
        )
        liked = [p.id for p in first.data + rest.data]
        assert sorted(map(str, liked)) == sorted(str(p.id) for p in posts)
        assert rest.has_more is False


class TestBookmarks:
    """Tests for bookmark_post / remove_bookmark / get_bookmarked_posts."""

    @pytest.mark.asyncio
    async def test_bookmark_and_remove(self, unit_env, user_id):
        reaction_service = await unit_env.get(ReactionService)
        (post,) = await _posts(unit_env, 1)

        bookmark = await reaction_service.bookmark_post(user_id, post.id)
        assert bookmark.post_id == post.id

        with pytest.raises(AlreadyExistsError):
            await reaction_service.bookmark_post(user_id, post.id)

        await reaction_service.remove_bookmark(user_id, post.id)
        page = await reaction_service.get_bookmarked_posts(user_id, None, limit=10)
        assert page.data == []

    @pytest.mark.asyncio
    async def test_remove_missing_bookmark(self, unit_env, user_id):
        reaction_service = await unit_env.get(ReactionService)

        with pytest.raises(NotFoundError, match="Bookmark not found"):
            await reaction_service.remove_bookmark(user_id, PostId(uuid4()))

    @pytest.mark.asyncio
    async def test_hidden_posts_do_not_shorten_pages(self, unit_env, user_id):
        """Bookmarks of hidden posts are skipped before the page is cut."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        post_repo = await unit_env.get(PostRepository)
        posts = await _posts(unit_env, 3)
        for post in posts:
            await reaction_service.bookmark_post(user_id, post.id)
        for post in posts[1:]:
            await post_repo.save(post.model_copy(update={"hidden": True}))

        # Act
        page = await reaction_service.get_bookmarked_posts(user_id, None, limit=2)

        # Assert
        assert [p.id for p in page.data] == [posts[0].id]
        assert page.has_more is False
        assert page.next_cursor is None

    @pytest.mark.asyncio
    async def test_pages_stay_full_around_hidden_post(self, unit_env, user_id):
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        post_repo = await unit_env.get(PostRepository)
        posts = await _posts(unit_env, 4)
        for post in posts:
            await reaction_service.like_post(user_id, post.id)
        await post_repo.save(posts[2].model_copy(update={"hidden": True}))

        # Act
        first = await reaction_service.get_liked_posts(user_id, None, limit=2)
        rest = await reaction_service.get_liked_posts(
            user_id, first.next_cursor, limit=2
        )

        # Assert
        assert len(first.data) == 2
        assert first.has_more is True
        assert len(rest.data) == 1
        assert rest.has_more is False
        seen = {p.id for p in first.data + rest.data}
        assert seen == {posts[0].id, posts[1].id, posts[3].id}

    @pytest.mark.asyncio
    async def test_partial_cursor(self, unit_env, user_id):
        reaction_service = await unit_env.get(ReactionService)

        with pytest.raises(ValidationError):
            await reaction_service.get_bookmarked_posts(
                user_id, {"post_id": str(uuid4())}, limit=10
            )
