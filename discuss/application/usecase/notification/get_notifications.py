"""Get notifications use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import NotificationService
from discuss.domain.value import UserId

from .items import NotificationItem


class GetNotificationsRequest(BaseModel):
    """Get notifications request."""

    user_id: str  # Recipient


class GetNotificationsResponse(BaseModel):
    """Get notifications response."""

    notifications: list[NotificationItem]
    unread_count: int


class GetNotificationsUseCase(
    BaseUseCase[GetNotificationsRequest, GetNotificationsResponse]
):
    """Use case for listing the current user's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize get notifications use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: GetNotificationsRequest
    ) -> GetNotificationsResponse:
        """Execute get notifications flow.

        Args:
            request: Get notifications request

        Returns:
            Notifications newest first, with the unread count
        """
        user_id = UserId(UUID(request.user_id))
        notifications = await self.notification_service.get_notifications(user_id)

        return GetNotificationsResponse(
            notifications=[NotificationItem.from_domain(n) for n in notifications],
            unread_count=sum(1 for n in notifications if not n.is_read),
        )
