"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import User
from discuss.domain.repository import UserRepository
from discuss.domain.value import UserId
from discuss.persistence.mappers import row_to_user, user_to_dict
from discuss.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        result = await self.session.execute(
            select(users_table).where(users_table.c.id == user_id)
        )
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        stmt = insert(users_table).values(**user_to_dict(user))
        # created_at belongs to the first sync and is never overwritten
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={
                "email": stmt.excluded.email,
                "pfp_url": stmt.excluded.pfp_url,
            },
        )
        await self.session.execute(stmt)
        return user
