"""Repository interfaces for the discussion domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from discuss.domain.repository.comment import CommentRepository
from discuss.domain.repository.notification import NotificationRepository
from discuss.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "CommentRepository",
    "NotificationRepository",
]
