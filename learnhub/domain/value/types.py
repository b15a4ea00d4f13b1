"""Enumerated domain values for LearnHub."""

from enum import Enum


class UserRole(str, Enum):
    """Role asserted by the external authentication layer."""

    STUDENT = "student"
    MODERATOR = "moderator"
    ADMIN = "admin"

    @property
    def can_moderate(self) -> bool:
        """Whether the role may remove content it does not own."""
        return self in (UserRole.MODERATOR, UserRole.ADMIN)


class ThreadPosition(str, Enum):
    """Where a new comment lands relative to its declared parent."""

    NO_PARENT = "no_parent"
    PARENT_IS_TOP_LEVEL = "parent_is_top_level"
    PARENT_IS_REPLY = "parent_is_reply"


class ResourceType(str, Enum):
    """Kind of content a moderation action targets."""

    POST = "post"
    COMMENT = "comment"


class ReportStatus(str, Enum):
    """Review state of a moderation report."""

    PENDING = "pending"
    REVIEWED = "reviewed"
    DISMISSED = "dismissed"


class ReportReason(str, Enum):
    """Reasons a user can pick when reporting content."""

    SPAM = "spam"
    HARASSMENT = "harassment"
    HATE_SPEECH = "hate_speech"
    MISINFORMATION = "misinformation"
    INAPPROPRIATE_CONTENT = "inappropriate_content"
    OFF_TOPIC = "off_topic"
    PLAGIARISM = "plagiarism"
    PERSONAL_INFORMATION = "personal_information"

    @property
    def label(self) -> str:
        """Human readable name, e.g. ``Hate Speech``."""
        return self.value.replace("_", " ").title()
