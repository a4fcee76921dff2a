"""Domain layer DI providers."""

from dishka import Scope, provide

from discuss.config import AuthSettings, CommentSettings
from discuss.domain.repository import (
    CommentRepository,
    NotificationRepository,
    UserRepository,
)
from discuss.domain.service import (
    CommentService,
    JWTService,
    MutationGuard,
    NotificationService,
    ThreadService,
)
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_mutation_guard(self, comment_settings: CommentSettings) -> MutationGuard:
        """Provide mutation policy with configured windows.

        Stateless, so one instance serves the whole app.
        """
        return MutationGuard(
            edit_window=comment_settings.edit_window,
            restore_window=comment_settings.restore_window,
        )

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_thread_service(self, comment_repository: CommentRepository) -> ThreadService:
        """Provide thread assembly and pagination service."""
        return ThreadService(comment_repository=comment_repository)

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        notification_service: NotificationService,
        mutation_guard: MutationGuard,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            user_repository=user_repository,
            notification_service=notification_service,
            mutation_guard=mutation_guard,
            max_replies_limit=comment_settings.max_replies_limit,
        )
