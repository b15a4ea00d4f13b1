"""Domain services for LearnHub."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentTree
from .engagement_service import EngagementService
from .post_service import EDIT_WINDOW, PostService, normalize_tags
from .reaction_service import ReactionService, relation_cursor_codec
from .reply_mention import ReplyTarget, resolve_reply_target
from .report_service import ReportService
from .thread_service import CommentThreadService

__all__ = [
    "EDIT_WINDOW",
    "CommentService",
    "CommentThreadService",
    "CommentTree",
    "EngagementService",
    "PostService",
    "ReactionService",
    "ReplyTarget",
    "ReportService",
    "Service",
    "normalize_tags",
    "relation_cursor_codec",
    "resolve_reply_target",
]
