"""Application layer DI providers."""

from dishka import Scope, provide

from learnhub.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetRepliesUseCase,
    GetUserCommentsUseCase,
)
from learnhub.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListFeedUseCase,
    ListUserPostsUseCase,
    SearchPostsUseCase,
    UpdatePostUseCase,
)
from learnhub.application.usecase.reaction import (
    BookmarkPostUseCase,
    LikePostUseCase,
    ListBookmarksUseCase,
    ListLikedPostsUseCase,
    RemoveBookmarkUseCase,
    UnlikePostUseCase,
)
from learnhub.application.usecase.report import (
    CreateReportUseCase,
    DeleteReportUseCase,
    GetReportUseCase,
    ListReasonsUseCase,
    ListReportsUseCase,
    ReportStatsUseCase,
    ToggleVisibilityUseCase,
    UpdateReportStatusUseCase,
)
from learnhub.config import PaginationSettings
from learnhub.domain.service import (
    CommentService,
    CommentThreadService,
    EngagementService,
    PostService,
    ReactionService,
    ReportService,
)
from learnhub.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, engagement_service: EngagementService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service, engagement_service=engagement_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self, post_service: PostService, engagement_service: EngagementService
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service, engagement_service=engagement_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_feed_use_case(
        self,
        post_service: PostService,
        engagement_service: EngagementService,
        pagination: PaginationSettings,
    ) -> ListFeedUseCase:
        """Provide feed use case."""
        return ListFeedUseCase(
            post_service=post_service,
            engagement_service=engagement_service,
            pagination=pagination,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_user_posts_use_case(
        self,
        post_service: PostService,
        engagement_service: EngagementService,
        pagination: PaginationSettings,
    ) -> ListUserPostsUseCase:
        """Provide posts-by-user use case."""
        return ListUserPostsUseCase(
            post_service=post_service,
            engagement_service=engagement_service,
            pagination=pagination,
        )

    @provide(scope=Scope.REQUEST)
    def get_search_posts_use_case(
        self,
        post_service: PostService,
        engagement_service: EngagementService,
        pagination: PaginationSettings,
    ) -> SearchPostsUseCase:
        """Provide search use case."""
        return SearchPostsUseCase(
            post_service=post_service,
            engagement_service=engagement_service,
            pagination=pagination,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, thread_service: CommentThreadService, pagination: PaginationSettings
    ) -> GetCommentsUseCase:
        """Provide top-level comments use case."""
        return GetCommentsUseCase(thread_service=thread_service, pagination=pagination)

    @provide(scope=Scope.REQUEST)
    def get_get_replies_use_case(
        self, thread_service: CommentThreadService, pagination: PaginationSettings
    ) -> GetRepliesUseCase:
        """Provide replies use case."""
        return GetRepliesUseCase(thread_service=thread_service, pagination=pagination)

    @provide(scope=Scope.REQUEST)
    def get_get_user_comments_use_case(
        self, comment_service: CommentService, pagination: PaginationSettings
    ) -> GetUserCommentsUseCase:
        """Provide comments-by-user use case."""
        return GetUserCommentsUseCase(
            comment_service=comment_service, pagination=pagination
        )

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_like_post_use_case(
        self, reaction_service: ReactionService
    ) -> LikePostUseCase:
        """Provide like use case."""
        return LikePostUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_post_use_case(
        self, reaction_service: ReactionService
    ) -> UnlikePostUseCase:
        """Provide unlike use case."""
        return UnlikePostUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_list_liked_posts_use_case(
        self,
        reaction_service: ReactionService,
        engagement_service: EngagementService,
        pagination: PaginationSettings,
    ) -> ListLikedPostsUseCase:
        """Provide liked posts use case."""
        return ListLikedPostsUseCase(
            reaction_service=reaction_service,
            engagement_service=engagement_service,
            pagination=pagination,
        )

    # Bookmark use cases
    @provide(scope=Scope.REQUEST)
    def get_bookmark_post_use_case(
        self, reaction_service: ReactionService
    ) -> BookmarkPostUseCase:
        """Provide bookmark use case."""
        return BookmarkPostUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_bookmark_use_case(
        self, reaction_service: ReactionService
    ) -> RemoveBookmarkUseCase:
        """Provide remove bookmark use case."""
        return RemoveBookmarkUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_list_bookmarks_use_case(
        self,
        reaction_service: ReactionService,
        engagement_service: EngagementService,
        pagination: PaginationSettings,
    ) -> ListBookmarksUseCase:
        """Provide bookmarks use case."""
        return ListBookmarksUseCase(
            reaction_service=reaction_service,
            engagement_service=engagement_service,
            pagination=pagination,
        )

    # Report use cases
    @provide(scope=Scope.REQUEST)
    def get_create_report_use_case(
        self, report_service: ReportService
    ) -> CreateReportUseCase:
        """Provide create report use case."""
        return CreateReportUseCase(report_service=report_service)

    @provide(scope=Scope.REQUEST)
    def get_list_reasons_use_case(self) -> ListReasonsUseCase:
        """Provide report reasons use case."""
        return ListReasonsUseCase()

    @provide(scope=Scope.REQUEST)
    def get_list_reports_use_case(
        self, report_service: ReportService, pagination: PaginationSettings
    ) -> ListReportsUseCase:
        """Provide moderation queue use case."""
        return ListReportsUseCase(report_service=report_service, pagination=pagination)

    @provide(scope=Scope.REQUEST)
    def get_get_report_use_case(
        self, report_service: ReportService
    ) -> GetReportUseCase:
        """Provide single report use case."""
        return GetReportUseCase(report_service=report_service)

    @provide(scope=Scope.REQUEST)
    def get_update_report_status_use_case(
        self, report_service: ReportService
    ) -> UpdateReportStatusUseCase:
        """Provide report review use case."""
        return UpdateReportStatusUseCase(report_service=report_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_report_use_case(
        self, report_service: ReportService
    ) -> DeleteReportUseCase:
        """Provide delete report use case."""
        return DeleteReportUseCase(report_service=report_service)

    @provide(scope=Scope.REQUEST)
    def get_report_stats_use_case(
        self, report_service: ReportService
    ) -> ReportStatsUseCase:
        """Provide report counts use case."""
        return ReportStatsUseCase(report_service=report_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_visibility_use_case(
        self, report_service: ReportService
    ) -> ToggleVisibilityUseCase:
        """Provide content visibility use case."""
        return ToggleVisibilityUseCase(report_service=report_service)
