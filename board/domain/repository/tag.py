"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import List

from board.domain.model.tag import Tag
from board.domain.value import StoryId


class TagRepository(ABC):
    """Repository for Tag entity."""

    @abstractmethod
    async def find_by_story(self, story_id: StoryId) -> List[Tag]:
        """Find the tags attached to a story, ordered by name.

        Args:
            story_id: The story ID

        Returns:
            List of tags
        """
        pass
