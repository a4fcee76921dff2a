"""Notification domain service."""

from uuid import uuid4

import logfire

from discuss.domain.model.notification import Notification
from discuss.domain.repository import NotificationRepository
from discuss.domain.value import (
    CommentId,
    Email,
    NotificationId,
    NotificationType,
    UserId,
)

from .base import Service


class NotificationService(Service):
    """Domain service for reply notifications.

    Notifications are stored for clients to poll; nothing is pushed.
    """

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def create_reply_notification(
        self,
        recipient_id: UserId,
        sender_id: UserId,
        comment_id: CommentId,
        sender_email: Email,
    ) -> Notification | None:
        """Notify a comment's author that someone replied.

        Args:
            recipient_id: Author of the comment that was replied to
            sender_id: Author of the reply
            comment_id: ID of the reply
            sender_email: Sender's display handle

        Returns:
            Created notification, or None for a reply to one's own comment
        """
        with logfire.span(
            "notification_service.create_reply_notification",
            recipient_id=str(recipient_id),
            sender_id=str(sender_id),
            comment_id=str(comment_id),
        ):
            if recipient_id == sender_id:
                logfire.info("Skipping self-reply notification", user_id=str(sender_id))
                return None

            notification = Notification(
                id=NotificationId(uuid4()),
                type=NotificationType.REPLY,
                message=f"{sender_email.root} replied to your comment",
                recipient_id=recipient_id,
                sender_id=sender_id,
                comment_id=comment_id,
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Reply notification created",
                notification_id=str(saved.id),
                recipient_id=str(recipient_id),
            )
            return saved

    async def get_notifications(self, user_id: UserId) -> list[Notification]:
        """Get a user's notifications, newest first.

        Args:
            user_id: Recipient user ID

        Returns:
            List of notifications
        """
        with logfire.span(
            "notification_service.get_notifications", user_id=str(user_id)
        ):
            notifications = await self.notification_repository.find_by_recipient(
                user_id
            )
            logfire.info(
                "Notifications retrieved", user_id=str(user_id), count=len(notifications)
            )
            return notifications

    async def get_unread_count(self, user_id: UserId) -> int:
        """Count a user's unread notifications."""
        with logfire.span(
            "notification_service.get_unread_count", user_id=str(user_id)
        ):
            return await self.notification_repository.count_unread(user_id)

    async def mark_as_read(
        self, notification_id: NotificationId, user_id: UserId
    ) -> int:
        """Mark one of the user's notifications read.

        Notifications belonging to someone else are left untouched.

        Args:
            notification_id: Notification ID
            user_id: Acting user

        Returns:
            Number of notifications updated (0 or 1)
        """
        with logfire.span(
            "notification_service.mark_as_read",
            notification_id=str(notification_id),
            user_id=str(user_id),
        ):
            updated = await self.notification_repository.mark_as_read(
                notification_id, user_id
            )
            if not updated:
                logfire.warn(
                    "Notification not marked read",
                    notification_id=str(notification_id),
                    user_id=str(user_id),
                )
            return updated

    async def mark_all_as_read(self, user_id: UserId) -> int:
        """Mark all of a user's notifications read.

        Returns:
            Number of notifications updated
        """
        with logfire.span(
            "notification_service.mark_all_as_read", user_id=str(user_id)
        ):
            updated = await self.notification_repository.mark_all_as_read(user_id)
            logfire.info(
                "Notifications marked read", user_id=str(user_id), count=updated
            )
            return updated
