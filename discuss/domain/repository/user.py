"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from discuss.domain.model.user import User
from discuss.domain.value import UserId


class UserRepository(ABC):
    """Read access to accounts owned by the auth service.

    ``save`` exists for the account sync job and for seeding tests; the
    request paths here only look users up.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert the user, or refresh email and picture if it exists."""
        pass
