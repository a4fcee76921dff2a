"""Domain value objects for discussions.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from discuss.domain.value.common import RootValueObject, ValueObject
from discuss.domain.value.identifiers import UserId


class NotificationType(str, Enum):
    """Type of notification.

    Only replies generate notifications today.
    """

    REPLY = "reply"


class Email(RootValueObject[str]):
    """Email address used as a user's display handle."""

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate email is non-empty, bounded and contains an @."""
        if len(v) < 3 or len(v) > 255:
            raise ValueError("Email must be 3-255 characters")
        if "@" not in v:
            raise ValueError("Email must contain '@'")
        return v


class CommentAuthor(ValueObject):
    """Author display fields embedded in every comment read."""

    id: UserId
    email: Email
    pfp_url: str | None = None
