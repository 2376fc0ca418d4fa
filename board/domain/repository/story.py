"""Story repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.model.story import Story
from board.domain.value import StoryFields, UserId


class StoryRepository(ABC):
    """Repository for Story entity."""

    @abstractmethod
    async def find_by_short_url(
        self, short_url: str, fields: StoryFields
    ) -> Optional[Story]:
        """Find a story by its short URL.

        Args:
            short_url: The story's public identifier
            fields: Optional aggregates to fetch

        Returns:
            The story if found, None otherwise
        """
        pass

    @abstractmethod
    async def toggle_vote(self, short_url: str, user_id: UserId) -> bool:
        """Cast or retract the user's vote on a story.

        Args:
            short_url: The story's public identifier
            user_id: The voter

        Returns:
            True if the story exists, False otherwise
        """
        pass
