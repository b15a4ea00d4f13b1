"""Unit tests for like and bookmark use cases."""

from uuid import UUID, uuid4

import pytest

from learnhub.application.usecase.reaction import (
    BookmarkPostUseCase,
    BookmarkRequest,
    LikePostUseCase,
    LikeRequest,
    ListBookmarksUseCase,
    ListLikedPostsUseCase,
    ListReactionsRequest,
    RemoveBookmarkUseCase,
    UnlikePostUseCase,
)
from learnhub.application.usecase.reaction.list_reactions import relation_cursor
from learnhub.domain.error import AlreadyExistsError, NotFoundError, ValidationError
from learnhub.domain.repository import PostRepository
from learnhub.domain.value import UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _post_ids(unit_env, count: int) -> list[str]:
    post_repo = await unit_env.get(PostRepository)
    return [
        str((await post_repo.save(make_post(f"post {i}", minutes=i))).id)
        for i in range(count)
    ]


class TestLikeUseCases:
    """Tests for LikePostUseCase and UnlikePostUseCase."""

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, unit_env):
        like_post = await unit_env.get(LikePostUseCase)
        unlike_post = await unit_env.get(UnlikePostUseCase)
        (post_id,) = await _post_ids(unit_env, 1)
        user_id = str(uuid4())

        liked = await like_post.execute(LikeRequest(post_id=post_id, user_id=user_id))
        unliked = await unlike_post.execute(
            LikeRequest(post_id=post_id, user_id=user_id)
        )

        assert liked.liked is True
        assert liked.created_at is not None
        assert unliked.liked is False

    @pytest.mark.asyncio
    async def test_double_like(self, unit_env):
        like_post = await unit_env.get(LikePostUseCase)
        (post_id,) = await _post_ids(unit_env, 1)
        request = LikeRequest(post_id=post_id, user_id=str(uuid4()))
        await like_post.execute(request)

        with pytest.raises(AlreadyExistsError):
            await like_post.execute(request)

    @pytest.mark.asyncio
    async def test_unlike_without_like(self, unit_env):
        unlike_post = await unit_env.get(UnlikePostUseCase)
        (post_id,) = await _post_ids(unit_env, 1)

        with pytest.raises(NotFoundError):
            await unlike_post.execute(LikeRequest(post_id=post_id, user_id=str(uuid4())))


class TestListReactions:
    """Tests for ListLikedPostsUseCase and ListBookmarksUseCase."""

    @pytest.mark.asyncio
    async def test_liked_posts_expose_post_id_cursor(self, unit_env):
        like_post = await unit_env.get(LikePostUseCase)
        list_liked = await unit_env.get(ListLikedPostsUseCase)
        post_ids = await _post_ids(unit_env, 3)
        user_id = str(uuid4())
        for post_id in post_ids:
            await like_post.execute(LikeRequest(post_id=post_id, user_id=user_id))

        first = await list_liked.execute(ListReactionsRequest(user_id=user_id, limit=2))
        rest = await list_liked.execute(
            ListReactionsRequest(
                user_id=user_id, cursor=first.pagination.next_cursor, limit=2
            )
        )

        assert first.pagination.next_cursor == first.data[-1].post_id
        assert first.pagination.has_more is True
        assert sorted(p.post_id for p in first.data + rest.data) == sorted(post_ids)
        assert rest.pagination.has_more is False

    @pytest.mark.asyncio
    async def test_bookmarks_flow(self, unit_env):
        bookmark_post = await unit_env.get(BookmarkPostUseCase)
        remove_bookmark = await unit_env.get(RemoveBookmarkUseCase)
        list_bookmarks = await unit_env.get(ListBookmarksUseCase)
        post_ids = await _post_ids(unit_env, 2)
        user_id = str(uuid4())
        for post_id in post_ids:
            await bookmark_post.execute(BookmarkRequest(post_id=post_id, user_id=user_id))

        await remove_bookmark.execute(
            BookmarkRequest(post_id=post_ids[0], user_id=user_id)
        )
        response = await list_bookmarks.execute(ListReactionsRequest(user_id=user_id))

        assert [p.post_id for p in response.data] == [post_ids[1]]
        assert response.pagination.next_cursor is None

    @pytest.mark.asyncio
    async def test_hidden_liked_posts_do_not_shorten_the_page(self, unit_env):
        """Two newest likes point at hidden posts; the page still holds the rest."""
        # Arrange
        like_post = await unit_env.get(LikePostUseCase)
        list_liked = await unit_env.get(ListLikedPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        post_ids = await _post_ids(unit_env, 3)
        user_id = str(uuid4())
        for post_id in post_ids:
            await like_post.execute(LikeRequest(post_id=post_id, user_id=user_id))
        for post_id in post_ids[1:]:
            post = await post_repo.find_unique({"id": UUID(post_id)})
            await post_repo.save(post.model_copy(update={"hidden": True}))

        # Act
        response = await list_liked.execute(
            ListReactionsRequest(user_id=user_id, limit=2)
        )

        # Assert
        assert [p.post_id for p in response.data] == [post_ids[0]]
        assert response.pagination.has_more is False
        assert response.pagination.next_cursor is None

    @pytest.mark.asyncio
    async def test_items_carry_reader_engagement(self, unit_env):
        bookmark_post = await unit_env.get(BookmarkPostUseCase)
        like_post = await unit_env.get(LikePostUseCase)
        list_bookmarks = await unit_env.get(ListBookmarksUseCase)
        (post_id,) = await _post_ids(unit_env, 1)
        user_id = str(uuid4())
        await bookmark_post.execute(BookmarkRequest(post_id=post_id, user_id=user_id))
        await like_post.execute(LikeRequest(post_id=post_id, user_id=str(uuid4())))

        (item,) = (
            await list_bookmarks.execute(ListReactionsRequest(user_id=user_id))
        ).data

        assert item.is_bookmarked is True
        assert item.is_liked is False
        assert item.like_count == 1

    @pytest.mark.asyncio
    async def test_malformed_cursor(self, unit_env):
        list_bookmarks = await unit_env.get(ListBookmarksUseCase)

        with pytest.raises(ValidationError):
            await list_bookmarks.execute(
                ListReactionsRequest(user_id=str(uuid4()), cursor="12")
            )


def test_relation_cursor_fills_in_user():
    user_id = UserId(uuid4())
    post_id = str(uuid4())

    assert relation_cursor(user_id, post_id) == {
        "user_id": str(user_id),
        "post_id": post_id,
    }
    assert relation_cursor(user_id, " ") is None
