"""Domain model entities for LearnHub."""

from learnhub.domain.model.comment import Comment
from learnhub.domain.model.common import DomainModel, OwnedModel
from learnhub.domain.model.post import Post, PostEngagement
from learnhub.domain.model.reaction import Bookmark, Like
from learnhub.domain.model.report import Report

__all__ = [
    "Bookmark",
    "Comment",
    "DomainModel",
    "Like",
    "OwnedModel",
    "Post",
    "PostEngagement",
    "Report",
]
