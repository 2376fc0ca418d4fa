"""Tag domain service."""

from board.domain.model.tag import Tag
from board.domain.repository import TagRepository
from board.domain.value import StoryId

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        self.tag_repository = tag_repository

    async def get_story_tags(self, story_id: StoryId) -> list[Tag]:
        """Get the tags of a story, ordered by name."""
        return await self.tag_repository.find_by_story(story_id)
