"""Unit tests for EngagementService."""

from uuid import uuid4

import pytest

from learnhub.domain.model import PostEngagement
from learnhub.domain.repository import PostRepository
from learnhub.domain.service import CommentService, EngagementService, ReactionService
from learnhub.domain.value import UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_counts_and_viewer_flags(unit_env, user_id):
    # Arrange
    engagement_service = await unit_env.get(EngagementService)
    reaction_service = await unit_env.get(ReactionService)
    comment_service = await unit_env.get(CommentService)
    post_repo = await unit_env.get(PostRepository)
    liked = await post_repo.save(make_post("liked"))
    quiet = await post_repo.save(make_post("quiet"))
    await reaction_service.like_post(user_id, liked.id)
    await reaction_service.like_post(UserId(uuid4()), liked.id)
    await reaction_service.bookmark_post(user_id, quiet.id)
    top = await comment_service.create_comment(liked.id, UserId(uuid4()), "Top")
    await comment_service.create_comment(liked.id, user_id, "Reply", top.id)

    # Act
    engagement = await engagement_service.for_posts([liked.id, quiet.id], user_id)

    # Assert
    assert engagement[liked.id] == PostEngagement(
        like_count=2, comment_count=2, is_liked=True, is_bookmarked=False
    )
    assert engagement[quiet.id] == PostEngagement(
        like_count=0, comment_count=0, is_liked=False, is_bookmarked=True
    )


@pytest.mark.asyncio
async def test_anonymous_viewer_sees_counts_only(unit_env, user_id):
    engagement_service = await unit_env.get(EngagementService)
    reaction_service = await unit_env.get(ReactionService)
    post = await (await unit_env.get(PostRepository)).save(make_post())
    await reaction_service.like_post(user_id, post.id)

    engagement = await engagement_service.for_posts([post.id])

    assert engagement[post.id].like_count == 1
    assert engagement[post.id].is_liked is False


@pytest.mark.asyncio
async def test_no_posts(unit_env, user_id):
    engagement_service = await unit_env.get(EngagementService)

    assert await engagement_service.for_posts([], user_id) == {}
