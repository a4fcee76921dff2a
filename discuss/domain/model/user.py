"""User entity.

Accounts are created and authenticated by the external auth service;
this service only reads them to attribute comments and notifications.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel, utcnow
from discuss.domain.value import Email, UserId


class User(DomainModel):
    """User entity."""

    id: UserId
    email: Email
    pfp_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
