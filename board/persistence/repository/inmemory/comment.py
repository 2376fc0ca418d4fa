"""In-memory comment repository for testing."""

from datetime import datetime, timezone
from typing import Collection, Optional

from board.domain.model.comment import Comment, CommentCreate
from board.domain.repository.comment import CommentRepository
from board.domain.value import CommentFields, CommentId, StoryId, UserId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        # Every bulk insert passed to mark_read, for asserting call counts
        self.mark_read_calls: list[tuple[UserId, list[CommentId]]] = []

    def _with_fields(self, comment: Comment, fields: CommentFields) -> Comment:
        """Attach the requested aggregates to a stored comment."""
        update: dict = {}
        if fields.username:
            author = self._store.users.get(comment.user_id)
            update["username"] = author.username if author else None
        if fields.score:
            update["score"] = sum(
                1 for _, cid in self._store.comment_votes if cid == comment.id
            )
        if fields.story_url:
            story = self._store.stories.get(comment.story_id)
            update["story_url"] = story.short_url if story else None
        if fields.check_voter is not None:
            update["user_voted"] = (
                fields.check_voter,
                comment.id,
            ) in self._store.comment_votes
        if fields.check_read is not None:
            update["user_read"] = (
                fields.check_read,
                comment.id,
            ) in self._store.read_comments
        return comment.model_copy(update=update) if update else comment

    def _find_stored(self, short_url: str) -> Optional[Comment]:
        for comment in self._store.comments.values():
            if comment.short_url == short_url:
                return comment
        return None

    async def find_by_story(
        self, story_id: StoryId, fields: CommentFields
    ) -> list[Comment]:
        """Find all comments for a story."""
        return [
            self._with_fields(c, fields)
            for c in self._store.comments.values()
            if c.story_id == story_id
        ]

    async def find_by_short_url(
        self, short_url: str, fields: CommentFields
    ) -> Optional[Comment]:
        """Find a comment by its short URL."""
        comment = self._find_stored(short_url)
        return self._with_fields(comment, fields) if comment else None

    async def create(self, comment: CommentCreate) -> Comment:
        """Insert a comment along with the author's vote and read marker."""
        created = Comment(
            id=CommentId(self._store.next_id()),
            story_id=comment.story_id,
            user_id=comment.user_id,
            parent_id=comment.parent_id,
            short_url=comment.short_url,
            commented_at=datetime.now(timezone.utc),
            comment=comment.comment,
            comment_html=comment.comment_html,
        )
        self._store.comments[created.id] = created
        self._store.comment_votes.add((comment.user_id, created.id))
        self._store.read_comments.add((comment.user_id, created.id))
        return created

    async def mark_read(
        self, user_id: UserId, comment_ids: Collection[CommentId]
    ) -> None:
        """Record read markers, skipping pairs that already exist."""
        self.mark_read_calls.append((user_id, list(comment_ids)))
        for comment_id in comment_ids:
            self._store.read_comments.add((user_id, comment_id))

    async def toggle_vote(self, short_url: str, user_id: UserId) -> bool:
        """Cast or retract the user's vote on a comment."""
        comment = self._find_stored(short_url)
        if comment is None:
            return False

        key = (user_id, comment.id)
        if key in self._store.comment_votes:
            self._store.comment_votes.discard(key)
        else:
            self._store.comment_votes.add(key)
        return True

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and everything that cascades from it."""
        doomed = {comment_id}
        pending = [comment_id]
        while pending:
            parent_id = pending.pop()
            for child in self._store.comments.values():
                if child.parent_id == parent_id and child.id not in doomed:
                    doomed.add(child.id)
                    pending.append(child.id)

        for cid in doomed:
            self._store.comments.pop(cid, None)
        self._store.comment_votes = {
            v for v in self._store.comment_votes if v[1] not in doomed
        }
        self._store.read_comments = {
            r for r in self._store.read_comments if r[1] not in doomed
        }
