"""Mark notification read use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.error import NotFoundError
from discuss.domain.service import NotificationService
from discuss.domain.value import NotificationId, UserId


class MarkNotificationReadRequest(BaseModel):
    """Mark notification read request."""

    notification_id: str  # UUID string
    user_id: str  # Current user ID (must be recipient)


class MarkNotificationReadResponse(BaseModel):
    """Mark notification read response."""

    success: bool


class MarkNotificationReadUseCase(
    BaseUseCase[MarkNotificationReadRequest, MarkNotificationReadResponse]
):
    """Use case for marking one notification read."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize mark notification read use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: MarkNotificationReadRequest
    ) -> MarkNotificationReadResponse:
        """Execute mark notification read flow.

        Raises:
            NotFoundError: If the user has no such notification
        """
        updated = await self.notification_service.mark_as_read(
            notification_id=NotificationId(UUID(request.notification_id)),
            user_id=UserId(UUID(request.user_id)),
        )
        if not updated:
            raise NotFoundError("Notification", request.notification_id)

        return MarkNotificationReadResponse(success=True)
