"""Notification routes.

Clients poll these endpoints; there is no push channel.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from discuss.application.usecase.notification import (
    GetNotificationsRequest,
    GetNotificationsResponse,
    GetNotificationsUseCase,
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadResponse,
    MarkNotificationReadUseCase,
)
from discuss.domain.error import NotFoundError
from discuss.domain.service import JWTService
from discuss.domain.value import UserId

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


def _require_user(jwt_service: JWTService, auth_token: str | None) -> UserId:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to read notifications",
        )
    return user_id


@router.get("", response_model=GetNotificationsResponse)
async def get_notifications(
    get_notifications_use_case: FromDishka[GetNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetNotificationsResponse:
    """Get the current user's notifications, newest first.

    Args:
        get_notifications_use_case: Get notifications use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Notifications with sender and comment context
    """
    user_id = _require_user(jwt_service, auth_token)
    request = GetNotificationsRequest(user_id=str(user_id))
    return await get_notifications_use_case.execute(request)


@router.get("/unread-count", response_model=GetUnreadCountResponse)
async def get_unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetUnreadCountResponse:
    """Get the current user's unread notification count."""
    user_id = _require_user(jwt_service, auth_token)
    request = GetUnreadCountRequest(user_id=str(user_id))
    return await get_unread_count_use_case.execute(request)


@router.patch("/{notification_id}/read", response_model=MarkNotificationReadResponse)
async def mark_notification_read(
    notification_id: str,
    mark_notification_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkNotificationReadResponse:
    """Mark one of the current user's notifications read.

    Raises:
        HTTPException: 404 if the user has no such notification
    """
    user_id = _require_user(jwt_service, auth_token)

    try:
        request = MarkNotificationReadRequest(
            notification_id=notification_id, user_id=str(user_id)
        )
        return await mark_notification_read_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post("/mark-all-read", response_model=MarkAllNotificationsReadResponse)
async def mark_all_notifications_read(
    mark_all_notifications_read_use_case: FromDishka[MarkAllNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkAllNotificationsReadResponse:
    """Mark all of the current user's notifications read."""
    user_id = _require_user(jwt_service, auth_token)
    request = MarkAllNotificationsReadRequest(user_id=str(user_id))
    return await mark_all_notifications_read_use_case.execute(request)
