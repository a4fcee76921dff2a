"""PostgreSQL implementation of Notification repository."""

from typing import List

from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Notification
from discuss.domain.repository import NotificationRepository
from discuss.domain.value import NotificationId, UserId
from discuss.persistence.mappers import notification_to_dict, row_to_notification
from discuss.persistence.tables import (
    comments_table,
    notifications_table,
    users_table,
)


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification inside a savepoint.

        A failed insert rolls back only the savepoint, so the comment
        written earlier in the same request can still commit.
        """
        stmt = notifications_table.insert().values(**notification_to_dict(notification))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return notification

    async def find_by_recipient(self, recipient_id: UserId) -> List[Notification]:
        """Find a user's notifications with sender and comment details."""
        stmt = (
            select(
                notifications_table,
                users_table.c.email.label("sender_email"),
                users_table.c.pfp_url.label("sender_pfp_url"),
                comments_table.c.content.label("comment_content"),
            )
            .select_from(
                notifications_table.join(
                    users_table, users_table.c.id == notifications_table.c.sender_id
                ).join(
                    comments_table,
                    comments_table.c.id == notifications_table.c.comment_id,
                )
            )
            .where(notifications_table.c.recipient_id == recipient_id)
            .order_by(desc(notifications_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(notifications_table.c.recipient_id == recipient_id)
            .where(notifications_table.c.is_read.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def mark_as_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> int:
        """Mark one notification read, scoped to its recipient."""
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.id == notification_id)
            .where(notifications_table.c.recipient_id == recipient_id)
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def mark_all_as_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a user read."""
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.recipient_id == recipient_id)
            .where(notifications_table.c.is_read.is_(False))
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
