"""User domain service."""

import logfire

from board.domain.error import NotFoundError
from board.domain.model import User
from board.domain.repository import UserRepository
from board.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            The user

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logfire.warn("User not found", user_id=user_id)
            raise NotFoundError("User", str(user_id))
        return user
