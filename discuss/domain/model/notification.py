"""Notification entity.

Notifications are persisted rows that clients poll; there is no push
delivery.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel, utcnow
from discuss.domain.value import (
    CommentAuthor,
    CommentId,
    NotificationId,
    NotificationType,
    UserId,
)


class Notification(DomainModel):
    """Notification sent to a comment author when someone replies."""

    id: NotificationId
    type: NotificationType = NotificationType.REPLY
    message: str = Field(min_length=1, max_length=1000)
    is_read: bool = False
    recipient_id: UserId
    sender_id: UserId
    comment_id: CommentId
    created_at: datetime = Field(default_factory=utcnow)

    # Populated when read back for display
    sender: Optional[CommentAuthor] = None
    comment_content: Optional[str] = None
