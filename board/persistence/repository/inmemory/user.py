"""In-memory user repository."""

from board.domain.model.user import User
from board.domain.repository.user import UserRepository
from board.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> User | None:
        return self._store.users.get(user_id)
