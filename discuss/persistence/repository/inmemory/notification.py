"""In-memory notification repository for testing."""

from discuss.domain.model.notification import Notification
from discuss.domain.repository.comment import CommentRepository
from discuss.domain.repository.notification import NotificationRepository
from discuss.domain.repository.user import UserRepository
from discuss.domain.value import CommentAuthor, NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(
        self,
        user_repository: UserRepository,
        comment_repository: CommentRepository,
    ) -> None:
        self._notifications: dict[NotificationId, Notification] = {}
        self._user_repository = user_repository
        self._comment_repository = comment_repository

    async def save(self, notification: Notification) -> Notification:
        """Save or update a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def find_by_recipient(self, recipient_id: UserId) -> list[Notification]:
        """Find a user's notifications, newest first, with display fields."""
        notifications = [
            n for n in self._notifications.values() if n.recipient_id == recipient_id
        ]
        notifications.sort(key=lambda n: n.created_at, reverse=True)

        enriched = []
        for notification in notifications:
            sender = await self._user_repository.find_by_id(notification.sender_id)
            comment = await self._comment_repository.find_by_id(notification.comment_id)
            enriched.append(
                notification.model_copy(
                    update={
                        "sender": CommentAuthor(
                            id=sender.id, email=sender.email, pfp_url=sender.pfp_url
                        )
                        if sender
                        else None,
                        "comment_content": comment.content if comment else None,
                    }
                )
            )
        return enriched

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications."""
        return sum(
            1
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not n.is_read
        )

    async def mark_as_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> int:
        """Mark one notification read, scoped to its recipient."""
        notification = self._notifications.get(notification_id)
        if notification is None or notification.recipient_id != recipient_id:
            return 0
        self._notifications[notification_id] = notification.model_copy(
            update={"is_read": True}
        )
        return 1

    async def mark_all_as_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a user read."""
        updated = 0
        for notification in list(self._notifications.values()):
            if notification.recipient_id == recipient_id and not notification.is_read:
                self._notifications[notification.id] = notification.model_copy(
                    update={"is_read": True}
                )
                updated += 1
        return updated
