"""User repository interface."""

from abc import ABC, abstractmethod

from board.domain.model.user import User
from board.domain.value import UserId


class UserRepository(ABC):
    """Read access to registered users.

    Accounts are created and edited elsewhere; the board only needs to
    resolve the author of a new comment.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> User | None:
        """Return the user with ``user_id``, or None if there is none."""
