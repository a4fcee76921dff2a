"""In-memory user repository for testing."""

from typing import Optional

from discuss.domain.model.user import User
from discuss.domain.repository.user import UserRepository
from discuss.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def save(self, user: User) -> User:
        existing = self._users.get(user.id)
        if existing is not None:
            user = user.model_copy(update={"created_at": existing.created_at})
        self._users[user.id] = user
        return user
