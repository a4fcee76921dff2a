"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from discuss.domain.model import Comment, User
from discuss.domain.value import CommentAuthor, CommentId, Email, UserId

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)

# Fixed instant for seeded data; tests step forward from here
BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_user(email: str = "alice@example.com", pfp_url: str | None = None) -> User:
    """Build a user with a fresh ID."""
    return User(id=UserId(uuid4()), email=Email(email), pfp_url=pfp_url)


def make_comment(
    author: User,
    content: str = "A comment",
    parent: Comment | None = None,
    minutes: float = 0,
    deleted_at: datetime | None = None,
) -> Comment:
    """Build a comment created `minutes` after BASE_TIME.

    Args:
        author: Comment author
        content: Comment text
        parent: Parent comment for replies
        minutes: Offset from BASE_TIME for created_at
        deleted_at: Tombstone instant, if any
    """
    return Comment(
        id=CommentId(uuid4()),
        content=content,
        author=CommentAuthor(id=author.id, email=author.email, pfp_url=author.pfp_url),
        parent_id=parent.id if parent else None,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        deleted_at=deleted_at,
    )
