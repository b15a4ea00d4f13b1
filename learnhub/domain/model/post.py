"""Post aggregate root.

Posts are the primary content type in LearnHub. Uploaded resources are
stored by an external file service; posts only keep the reference.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from learnhub.domain.model.common import DomainModel, OwnedModel
from learnhub.domain.value import PostId, UserId


class Post(OwnedModel):
    """Post aggregate root."""

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    content: Optional[str] = Field(default=None, max_length=10000)
    author_id: UserId
    tag_names: list[str] = Field(default_factory=list, max_length=5)
    file_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    hidden: bool = False  # Set by moderation

    @property
    def owner_id(self) -> UserId:
        return self.author_id


class PostEngagement(DomainModel):
    """Counters of a post and the viewer's own reactions to it."""

    like_count: int = 0
    comment_count: int = 0
    is_liked: bool = False
    is_bookmarked: bool = False
