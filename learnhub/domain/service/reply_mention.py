"""Reparenting rule for replies.

Threads are two levels deep. Answering a reply attaches the new comment to
that reply's top-level ancestor and mentions the reply's author instead.
The rule collapses exactly one level and never produces deeper nesting.
"""

from typing import Optional

from learnhub.domain.model.comment import Comment
from learnhub.domain.value import CommentId, ThreadPosition, UserId
from learnhub.domain.value.common import ValueObject


class ReplyTarget(ValueObject):
    """Where a new comment is stored and whom it mentions."""

    position: ThreadPosition
    parent_id: Optional[CommentId] = None
    mentioned_user_id: Optional[UserId] = None


def resolve_reply_target(parent: Comment | None) -> ReplyTarget:
    """Resolve the stored parent and mention for a new comment.

    Args:
        parent: The parent declared by the client, already validated to
            exist on the same post (None for a top-level comment)

    Returns:
        Final placement of the new comment
    """
    if parent is None:
        return ReplyTarget(position=ThreadPosition.NO_PARENT)

    if parent.parent_id is None:
        return ReplyTarget(
            position=ThreadPosition.PARENT_IS_TOP_LEVEL,
            parent_id=parent.id,
        )

    return ReplyTarget(
        position=ThreadPosition.PARENT_IS_REPLY,
        parent_id=parent.parent_id,
        mentioned_user_id=parent.author_id,
    )
