"""Mark all notifications read use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import NotificationService
from discuss.domain.value import UserId


class MarkAllNotificationsReadRequest(BaseModel):
    """Mark all notifications read request."""

    user_id: str


class MarkAllNotificationsReadResponse(BaseModel):
    """Mark all notifications read response."""

    updated_count: int


class MarkAllNotificationsReadUseCase(
    BaseUseCase[MarkAllNotificationsReadRequest, MarkAllNotificationsReadResponse]
):
    """Use case for clearing the unread badge."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: MarkAllNotificationsReadRequest
    ) -> MarkAllNotificationsReadResponse:
        """Execute mark all notifications read flow."""
        updated = await self.notification_service.mark_all_as_read(
            UserId(UUID(request.user_id))
        )
        return MarkAllNotificationsReadResponse(updated_count=updated)
