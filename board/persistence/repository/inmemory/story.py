"""In-memory story repository for testing."""

from typing import Optional

from board.domain.model.story import Story
from board.domain.repository.story import StoryRepository
from board.domain.value import StoryFields, UserId

from .store import InMemoryStore


class InMemoryStoryRepository(StoryRepository):
    """In-memory implementation of StoryRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _find_stored(self, short_url: str) -> Optional[Story]:
        for story in self._store.stories.values():
            if story.short_url == short_url:
                return story
        return None

    async def find_by_short_url(
        self, short_url: str, fields: StoryFields
    ) -> Optional[Story]:
        """Find a story by its short URL."""
        story = self._find_stored(short_url)
        if story is None:
            return None

        update: dict = {}
        if fields.submitter_username:
            submitter = self._store.users.get(story.submitter_id)
            update["submitter_username"] = submitter.username if submitter else None
        if fields.score:
            update["score"] = sum(
                1 for _, sid in self._store.story_votes if sid == story.id
            )
        if fields.comment_count:
            update["comment_count"] = sum(
                1 for c in self._store.comments.values() if c.story_id == story.id
            )
        if fields.check_voter is not None:
            update["user_voted"] = (
                fields.check_voter,
                story.id,
            ) in self._store.story_votes

        return story.model_copy(update=update) if update else story

    async def toggle_vote(self, short_url: str, user_id: UserId) -> bool:
        """Cast or retract the user's vote on a story."""
        story = self._find_stored(short_url)
        if story is None:
            return False

        key = (user_id, story.id)
        if key in self._store.story_votes:
            self._store.story_votes.discard(key)
        else:
            self._store.story_votes.add(key)
        return True
