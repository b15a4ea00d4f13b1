"""Moderation report entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from learnhub.domain.model.common import OwnedModel
from learnhub.domain.value import (
    CommentId,
    PostId,
    ReportId,
    ReportReason,
    ReportStatus,
    ResourceType,
    UserId,
)


class Report(OwnedModel):
    """A user flagging a post or a comment for moderator review.

    Exactly one of ``post_id`` and ``comment_id`` is set.
    """

    id: ReportId
    reporter_id: UserId
    reason: ReportReason
    post_id: Optional[PostId] = None
    comment_id: Optional[CommentId] = None
    status: ReportStatus = ReportStatus.PENDING
    moderator_notes: Optional[str] = Field(default=None, max_length=2000)
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def _single_target(self) -> "Report":
        if (self.post_id is None) == (self.comment_id is None):
            raise ValueError("A report targets exactly one post or comment")
        return self

    @property
    def owner_id(self) -> UserId:
        return self.reporter_id

    @property
    def resource_type(self) -> ResourceType:
        return ResourceType.POST if self.post_id is not None else ResourceType.COMMENT
