"""Domain layer DI providers."""

from datetime import timedelta

from dishka import Scope, provide

from learnhub.config import ModerationSettings

from learnhub.domain.repository import (
    BookmarkRepository,
    CommentRepository,
    LikeRepository,
    PostRepository,
    ReportRepository,
)
from learnhub.domain.service import (
    CommentService,
    CommentThreadService,
    CommentTree,
    EngagementService,
    PostService,
    ReactionService,
    ReportService,
)
from learnhub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_tree(
        self, comment_repository: CommentRepository, post_repository: PostRepository
    ) -> CommentTree:
        """Provide comment placement rules."""
        return CommentTree(
            comment_repository=comment_repository, post_repository=post_repository
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, comment_tree: CommentTree
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, comment_tree=comment_tree
        )

    @provide
    def get_comment_thread_service(
        self, comment_repository: CommentRepository, post_repository: PostRepository
    ) -> CommentThreadService:
        """Provide comment thread reads."""
        return CommentThreadService(
            comment_repository=comment_repository, post_repository=post_repository
        )

    @provide
    def get_post_service(
        self, post_repository: PostRepository, moderation: ModerationSettings
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            edit_window=timedelta(minutes=moderation.edit_window_minutes),
        )

    @provide
    def get_reaction_service(
        self,
        like_repository: LikeRepository,
        bookmark_repository: BookmarkRepository,
        post_service: PostService,
    ) -> ReactionService:
        """Provide like and bookmark domain service."""
        return ReactionService(
            like_repository=like_repository,
            bookmark_repository=bookmark_repository,
            post_service=post_service,
        )

    @provide
    def get_engagement_service(
        self,
        like_repository: LikeRepository,
        bookmark_repository: BookmarkRepository,
        comment_repository: CommentRepository,
    ) -> EngagementService:
        """Provide per-viewer post figures."""
        return EngagementService(
            like_repository=like_repository,
            bookmark_repository=bookmark_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_report_service(
        self,
        report_repository: ReportRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> ReportService:
        """Provide moderation report service."""
        return ReportService(
            report_repository=report_repository,
            post_service=post_service,
            comment_service=comment_service,
        )
