"""Application layer DI providers."""

from dishka import Scope, provide

from remark.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    GetRepliesUseCase,
    GetStatsUseCase,
    ListCommentsUseCase,
    SearchCommentsUseCase,
    UpdateCommentUseCase,
)
from remark.application.usecase.moderation import (
    BulkModerateUseCase,
    GetPendingCommentsUseCase,
    HardDeleteCommentUseCase,
    ModerateCommentUseCase,
    PinCommentUseCase,
)
from remark.application.usecase.reaction import (
    AddReactionUseCase,
    GetUserReactionUseCase,
    RemoveReactionUseCase,
)
from remark.application.usecase.report import (
    GetPendingReportsUseCase,
    ReportCommentUseCase,
    ReviewReportUseCase,
)
from remark.application.usecase.settings import (
    GetSettingsUseCase,
    ListSettingsUseCase,
    UpdateSettingsUseCase,
)
from remark.domain.service import (
    CommentService,
    ReactionService,
    ReportService,
    SettingsService,
)
from remark.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_get_comment_use_case(
        self, comment_service: CommentService, reaction_service: ReactionService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(
            comment_service=comment_service, reaction_service=reaction_service
        )

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide
    def get_list_comments_use_case(
        self, comment_service: CommentService, reaction_service: ReactionService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service, reaction_service=reaction_service
        )

    @provide
    def get_get_replies_use_case(
        self, comment_service: CommentService, reaction_service: ReactionService
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(
            comment_service=comment_service, reaction_service=reaction_service
        )

    @provide
    def get_search_comments_use_case(
        self, comment_service: CommentService
    ) -> SearchCommentsUseCase:
        """Provide search comments use case."""
        return SearchCommentsUseCase(comment_service=comment_service)

    @provide
    def get_get_stats_use_case(self, comment_service: CommentService) -> GetStatsUseCase:
        """Provide comment stats use case."""
        return GetStatsUseCase(comment_service=comment_service)

    # Moderation use cases
    @provide
    def get_get_pending_comments_use_case(
        self, comment_service: CommentService
    ) -> GetPendingCommentsUseCase:
        """Provide moderation queue use case."""
        return GetPendingCommentsUseCase(comment_service=comment_service)

    @provide
    def get_moderate_comment_use_case(
        self, comment_service: CommentService
    ) -> ModerateCommentUseCase:
        """Provide moderate comment use case."""
        return ModerateCommentUseCase(comment_service=comment_service)

    @provide
    def get_bulk_moderate_use_case(
        self, comment_service: CommentService
    ) -> BulkModerateUseCase:
        """Provide bulk moderation use case."""
        return BulkModerateUseCase(comment_service=comment_service)

    @provide
    def get_pin_comment_use_case(
        self, comment_service: CommentService
    ) -> PinCommentUseCase:
        """Provide pin comment use case."""
        return PinCommentUseCase(comment_service=comment_service)

    @provide
    def get_hard_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> HardDeleteCommentUseCase:
        """Provide hard delete use case."""
        return HardDeleteCommentUseCase(comment_service=comment_service)

    # Reaction use cases
    @provide
    def get_add_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> AddReactionUseCase:
        """Provide add reaction use case."""
        return AddReactionUseCase(reaction_service=reaction_service)

    @provide
    def get_remove_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> RemoveReactionUseCase:
        """Provide remove reaction use case."""
        return RemoveReactionUseCase(reaction_service=reaction_service)

    @provide
    def get_get_user_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> GetUserReactionUseCase:
        """Provide get user reaction use case."""
        return GetUserReactionUseCase(reaction_service=reaction_service)

    # Report use cases
    @provide
    def get_report_comment_use_case(
        self, report_service: ReportService
    ) -> ReportCommentUseCase:
        """Provide report comment use case."""
        return ReportCommentUseCase(report_service=report_service)

    @provide
    def get_get_pending_reports_use_case(
        self, report_service: ReportService
    ) -> GetPendingReportsUseCase:
        """Provide pending reports use case."""
        return GetPendingReportsUseCase(report_service=report_service)

    @provide
    def get_review_report_use_case(
        self, report_service: ReportService
    ) -> ReviewReportUseCase:
        """Provide review report use case."""
        return ReviewReportUseCase(report_service=report_service)

    # Settings use cases
    @provide
    def get_get_settings_use_case(
        self, settings_service: SettingsService
    ) -> GetSettingsUseCase:
        """Provide get settings use case."""
        return GetSettingsUseCase(settings_service=settings_service)

    @provide
    def get_update_settings_use_case(
        self, settings_service: SettingsService
    ) -> UpdateSettingsUseCase:
        """Provide update settings use case."""
        return UpdateSettingsUseCase(settings_service=settings_service)

    @provide
    def get_list_settings_use_case(
        self, settings_service: SettingsService
    ) -> ListSettingsUseCase:
        """Provide list settings use case."""
        return ListSettingsUseCase(settings_service=settings_service)
