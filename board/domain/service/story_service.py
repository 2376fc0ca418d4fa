"""Story domain service."""

import logfire

from board.domain.model.story import Story
from board.domain.repository import StoryRepository
from board.domain.value import StoryFields, UserId

from .base import Service


class StoryService(Service):
    """Domain service for story operations."""

    def __init__(self, story_repository: StoryRepository) -> None:
        """Initialize story service.

        Args:
            story_repository: Story repository
        """
        self.story_repository = story_repository

    async def get_story_by_short_url(
        self, short_url: str, fields: StoryFields | None = None
    ) -> Story | None:
        """Get a story by its short URL.

        Args:
            short_url: Story short URL
            fields: Optional aggregates to fetch

        Returns:
            Story if found, None otherwise
        """
        with logfire.span("story_service.get_story_by_short_url", short_url=short_url):
            story = await self.story_repository.find_by_short_url(
                short_url, fields or StoryFields()
            )
            if story is None:
                logfire.warn("Story not found", short_url=short_url)
            return story

    async def toggle_vote(self, short_url: str, user_id: UserId) -> bool:
        """Cast or retract the user's vote on a story.

        Args:
            short_url: Story short URL
            user_id: Voter

        Returns:
            True if the story exists, False otherwise
        """
        with logfire.span(
            "story_service.toggle_vote", short_url=short_url, user_id=user_id
        ):
            found = await self.story_repository.toggle_vote(short_url, user_id)
            if not found:
                logfire.warn("Vote on non-existent story", short_url=short_url)
            return found
