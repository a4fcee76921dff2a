"""Notification response items."""

from datetime import datetime

from pydantic import BaseModel

from discuss.domain.model import Notification


class NotificationItem(BaseModel):
    """Notification item in responses."""

    notification_id: str
    type: str
    message: str
    is_read: bool
    comment_id: str
    sender_id: str
    sender_email: str | None
    sender_pfp_url: str | None
    comment_content: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, notification: Notification) -> "NotificationItem":
        """Convert domain Notification to response item."""
        sender = notification.sender
        return cls(
            notification_id=str(notification.id),
            type=notification.type.value,
            message=notification.message,
            is_read=notification.is_read,
            comment_id=str(notification.comment_id),
            sender_id=str(notification.sender_id),
            sender_email=sender.email.root if sender else None,
            sender_pfp_url=sender.pfp_url if sender else None,
            comment_content=notification.comment_content,
            created_at=notification.created_at,
        )
