"""Get unread notification count use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import NotificationService
from discuss.domain.value import UserId


class GetUnreadCountRequest(BaseModel):
    """Get unread count request."""

    user_id: str


class GetUnreadCountResponse(BaseModel):
    """Get unread count response."""

    unread_count: int


class GetUnreadCountUseCase(
    BaseUseCase[GetUnreadCountRequest, GetUnreadCountResponse]
):
    """Use case for polling the unread notification badge."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: GetUnreadCountRequest) -> GetUnreadCountResponse:
        """Execute get unread count flow."""
        count = await self.notification_service.get_unread_count(
            UserId(UUID(request.user_id))
        )
        return GetUnreadCountResponse(unread_count=count)
