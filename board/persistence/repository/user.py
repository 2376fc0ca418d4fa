"""PostgreSQL user repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import User
from board.domain.repository import UserRepository
from board.domain.value import UserId
from board.persistence.mappers import row_to_user
from board.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> User | None:
        result = await self.session.execute(
            select(users_table).where(users_table.c.id == user_id)
        )
        row = result.one_or_none()
        return row_to_user(row._asdict()) if row is not None else None
