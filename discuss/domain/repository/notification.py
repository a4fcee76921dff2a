"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List

from discuss.domain.model.notification import Notification
from discuss.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification.

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def find_by_recipient(self, recipient_id: UserId) -> List[Notification]:
        """Find a user's notifications, newest first.

        Sender display fields and the comment content are populated.

        Args:
            recipient_id: The recipient's user ID

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications.

        Args:
            recipient_id: The recipient's user ID

        Returns:
            Number of unread notifications
        """
        pass

    @abstractmethod
    async def mark_as_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> int:
        """Mark one notification read if it belongs to the recipient.

        Args:
            notification_id: The notification ID
            recipient_id: The acting user, who must be the recipient

        Returns:
            Number of rows updated (0 or 1)
        """
        pass

    @abstractmethod
    async def mark_all_as_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a user read.

        Args:
            recipient_id: The recipient's user ID

        Returns:
            Number of rows updated
        """
        pass
