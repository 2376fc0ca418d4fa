"""Shared in-memory state behind the in-memory repositories.

Repositories built on the same store see each other's writes, the way
several Postgres repositories share one database. The seeding helpers are
synchronous so tests can set up fixtures without an event loop.
"""

from datetime import datetime, timezone
from itertools import count
from typing import Iterable, Optional

from board.domain.model import Comment, Story, Tag, User
from board.domain.value import CommentId, StoryId, TagId, UserId
from board.util.markup import render_text_html
from board.util.short_id import generate_short_id


class InMemoryStore:
    """Tables of the board kept in plain dicts and sets."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.stories: dict[StoryId, Story] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.tags: dict[TagId, Tag] = {}
        self.story_tags: set[tuple[StoryId, TagId]] = set()
        self.story_votes: set[tuple[UserId, StoryId]] = set()
        self.comment_votes: set[tuple[UserId, CommentId]] = set()
        self.read_comments: set[tuple[UserId, CommentId]] = set()
        self._ids = count(1)

    def next_id(self) -> int:
        """Allocate an ID; IDs are unique across all tables."""
        return next(self._ids)

    def add_user(self, username: str, email: Optional[str] = None) -> User:
        user = User(id=UserId(self.next_id()), username=username, email=email)
        self.users[user.id] = user
        return user

    def add_story(
        self,
        submitter: User,
        title: str,
        url: Optional[str] = None,
        text: Optional[str] = None,
        short_url: Optional[str] = None,
        tags: Iterable[str] = (),
    ) -> Story:
        story = Story(
            id=StoryId(self.next_id()),
            short_url=short_url or generate_short_id(6),
            title=title,
            url=url,
            text=text,
            text_html=render_text_html(text) if text else None,
            is_authored=url is None,
            submitter_id=submitter.id,
        )
        self.stories[story.id] = story
        self.story_votes.add((submitter.id, story.id))

        for name in tags:
            tag = self.add_tag(name)
            self.story_tags.add((story.id, tag.id))

        return story

    def add_tag(self, name: str, description: str = "") -> Tag:
        """Get or create a tag by name."""
        for tag in self.tags.values():
            if tag.name == name:
                return tag
        tag = Tag(id=TagId(self.next_id()), name=name, description=description)
        self.tags[tag.id] = tag
        return tag

    def add_comment(
        self,
        story: Story,
        author: User,
        text: str,
        parent: Optional[Comment] = None,
        commented_at: Optional[datetime] = None,
        short_url: Optional[str] = None,
        voters: Iterable[User] = (),
    ) -> Comment:
        """Insert a comment directly, bypassing validation.

        Unlike ``InMemoryCommentRepository.create`` no vote or read marker
        is recorded for the author; pass ``voters`` to add votes.
        """
        comment = Comment(
            id=CommentId(self.next_id()),
            story_id=story.id,
            user_id=author.id,
            parent_id=parent.id if parent else None,
            short_url=short_url or generate_short_id(6),
            commented_at=commented_at or datetime.now(timezone.utc),
            comment=text,
            comment_html=render_text_html(text),
        )
        self.comments[comment.id] = comment
        for voter in voters:
            self.comment_votes.add((voter.id, comment.id))
        return comment

    def mark_read(self, user: User, *comments: Comment) -> None:
        for comment in comments:
            self.read_comments.add((user.id, comment.id))
