"""In-memory tag repository for testing."""

from board.domain.model.tag import Tag
from board.domain.repository.tag import TagRepository
from board.domain.value import StoryId

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_story(self, story_id: StoryId) -> list[Tag]:
        """Find the tags attached to a story, ordered by name."""
        tags = [
            self._store.tags[tag_id]
            for sid, tag_id in self._store.story_tags
            if sid == story_id
        ]
        return sorted(tags, key=lambda t: t.name)
