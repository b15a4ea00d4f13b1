"""User-to-post relations keyed by ``(user_id, post_id)``."""

from datetime import datetime

from pydantic import Field

from learnhub.domain.model.common import OwnedModel
from learnhub.domain.value import PostId, UserId


class Like(OwnedModel):
    """A user liking a post."""

    user_id: UserId
    post_id: PostId
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def owner_id(self) -> UserId:
        return self.user_id


class Bookmark(OwnedModel):
    """A post saved by a user for later."""

    user_id: UserId
    post_id: PostId
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def owner_id(self) -> UserId:
        return self.user_id
