"""Comment entity.

Comments are threaded at most two levels deep: a top-level comment on a
post, and replies to that comment. A reply to a reply is stored as a reply
to the top-level ancestor, with the bypassed reply's author recorded as
the mentioned user.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from learnhub.domain.model.common import OwnedModel
from learnhub.domain.value import CommentId, PostId, UserId


class Comment(OwnedModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Top-level ancestor (None for top-level comments)
    - mentioned_user_id: Author of the reply that was answered, when the
      comment was reparented (None otherwise)

    Neither field changes after creation.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    mentioned_user_id: Optional[UserId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    hidden: bool = False  # Set by moderation

    @property
    def owner_id(self) -> UserId:
        return self.author_id

    @property
    def is_reply(self) -> bool:
        """Whether this comment hangs under a top-level comment."""
        return self.parent_id is not None
