"""Typed identifiers.

Users are owned by the external identity service; LearnHub only stores
their UUIDs.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)

# Store-assigned, increasing; double as cursors
CommentId = NewType("CommentId", int)
ReportId = NewType("ReportId", int)
