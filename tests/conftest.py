"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire
import pytest

from learnhub.domain.model import Post
from learnhub.domain.value import PostId, UserId

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_post(
    title: str = "Test Post",
    author_id: UserId | None = None,
    minutes: int = 0,
    **fields,
) -> Post:
    """Helper to build a post created ``minutes`` after a fixed base time."""
    return Post(
        id=PostId(uuid4()),
        title=title,
        author_id=author_id or UserId(uuid4()),
        created_at=BASE_TIME + timedelta(minutes=minutes),
        **fields,
    )


@pytest.fixture
def user_id() -> UserId:
    return UserId(uuid4())
