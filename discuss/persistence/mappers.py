"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from discuss.domain.model import Comment, Notification, User
from discuss.domain.value import (
    CommentAuthor,
    CommentId,
    Email,
    NotificationId,
    NotificationType,
    UserId,
)


def _uuid(value: Any) -> UUID:
    """Accept UUIDs returned either as strings or as UUID objects."""
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        pfp_url=row.get("pfp_url"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert a comment row joined with its author to a Comment.

    Args:
        row: Database row as dict, with author_email and author_pfp_url

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        content=row["content"],
        author=CommentAuthor(
            id=UserId(_uuid(row["author_id"])),
            email=Email(row["author_email"]),
            pfp_url=row.get("author_pfp_url"),
        ),
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        created_at=row["created_at"],
        updated_at=row.get("updated_at"),
        deleted_at=row.get("deleted_at"),
    )


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert a notification row to a Notification.

    Sender display fields and comment content are mapped when the row
    was joined with them.

    Args:
        row: Database row as dict

    Returns:
        Notification domain model
    """
    sender = None
    if row.get("sender_email"):
        sender = CommentAuthor(
            id=UserId(_uuid(row["sender_id"])),
            email=Email(row["sender_email"]),
            pfp_url=row.get("sender_pfp_url"),
        )

    return Notification(
        id=NotificationId(_uuid(row["id"])),
        type=NotificationType(row["type"]),
        message=row["message"],
        is_read=row["is_read"],
        recipient_id=UserId(_uuid(row["recipient_id"])),
        sender_id=UserId(_uuid(row["sender_id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        created_at=row["created_at"],
        sender=sender,
        comment_content=row.get("comment_content"),
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict.

    Read-only display fields are left out.

    Args:
        notification: Notification domain model

    Returns:
        Dict suitable for database insertion
    """
    data = notification.model_dump(exclude={"sender", "comment_content"})
    data["type"] = notification.type.value
    return data
