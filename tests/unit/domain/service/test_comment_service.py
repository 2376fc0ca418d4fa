"""Unit tests for CommentService."""

from datetime import datetime, timedelta, timezone

import pytest

from board.config import CommentSettings
from board.domain.error import ForbiddenError, NotFoundError, ValidationError
from board.domain.repository import CommentRepository
from board.domain.service import CommentService, iter_comment_tree
from board.domain.value import CommentFields
from board.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryStore,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestGetCommentTree:
    """Tests for get_comment_tree."""

    @pytest.mark.asyncio
    async def test_ranks_roots_and_drops_orphans(self, unit_env):
        """Three roots scored 0, 5 and 2 plus an orphan give three ranked roots."""
        # Arrange
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)

        voters = [store.add_user(f"voter{i}") for i in range(5)]
        author = store.add_user("author")
        story = store.add_story(author, "A story", url="https://example.org")
        other_story = store.add_story(author, "Another story")
        posted = datetime(2024, 1, 1, tzinfo=timezone.utc)

        store.add_comment(story, author, "zero", commented_at=posted, short_url="zero")
        store.add_comment(
            story, author, "five", commented_at=posted, voters=voters, short_url="five"
        )
        store.add_comment(
            story, author, "two", commented_at=posted, voters=voters[:2], short_url="two"
        )
        foreign_parent = store.add_comment(other_story, author, "elsewhere")
        store.add_comment(story, author, "orphan", parent=foreign_parent)

        # Act
        roots = await service.get_comment_tree(story.id, CommentFields.for_viewer(None))

        # Assert
        assert [node.comment.short_url for node in roots] == ["five", "two", "zero"]
        assert roots[0].comment.score == 5
        assert all(node.comment.comment != "orphan" for node in iter_comment_tree(roots))

    @pytest.mark.asyncio
    async def test_fetches_score_even_if_not_requested(self, unit_env):
        """Ranking needs the score, so it is always fetched."""
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        author = store.add_user("author")
        story = store.add_story(author, "A story")
        store.add_comment(story, author, "first")
        store.add_comment(story, author, "second")

        roots = await service.get_comment_tree(story.id, CommentFields())

        assert len(roots) == 2
        assert all(node.comment.score == 0 for node in roots)

    @pytest.mark.asyncio
    async def test_nests_replies(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        author = store.add_user("author")
        story = store.add_story(author, "A story")
        root = store.add_comment(story, author, "root")
        reply = store.add_comment(story, author, "reply", parent=root)
        store.add_comment(story, author, "nested", parent=reply)

        roots = await service.get_comment_tree(story.id, CommentFields())

        assert len(roots) == 1
        assert roots[0].children[0].comment.id == reply.id
        assert roots[0].children[0].children[0].comment.comment == "nested"

    @pytest.mark.asyncio
    async def test_unknown_story_gives_empty_tree(self, unit_env):
        service = await unit_env.get(CommentService)

        assert await service.get_comment_tree(12345, CommentFields()) == []


class TestMarkTreeRead:
    """Tests for mark_tree_read."""

    @pytest.mark.asyncio
    async def test_no_write_when_everything_is_read(self, unit_env):
        """A viewer who has read every comment causes zero store writes."""
        # Arrange
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        viewer = store.add_user("viewer")
        story = store.add_story(viewer, "A story")
        first = store.add_comment(story, viewer, "first")
        second = store.add_comment(story, viewer, "second", parent=first)
        store.mark_read(viewer, first, second)

        roots = await service.get_comment_tree(
            story.id, CommentFields.for_viewer(viewer.id)
        )

        # Act
        await service.mark_tree_read(viewer.id, roots, same_user=True)

        # Assert
        assert repo.mark_read_calls == []

    @pytest.mark.asyncio
    async def test_marks_only_the_unread_comment(self, unit_env):
        """With one unread comment exactly that ID is written, in one call."""
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        viewer = store.add_user("viewer")
        story = store.add_story(viewer, "A story")
        read = store.add_comment(story, viewer, "read")
        unread = store.add_comment(story, viewer, "unread", parent=read)
        store.mark_read(viewer, read)

        roots = await service.get_comment_tree(
            story.id, CommentFields.for_viewer(viewer.id)
        )
        await service.mark_tree_read(viewer.id, roots, same_user=True)

        assert repo.mark_read_calls == [(viewer.id, [unread.id])]
        assert (viewer.id, unread.id) in store.read_comments

    @pytest.mark.asyncio
    async def test_other_user_marks_every_comment(self, unit_env):
        """Read state fetched for another user is not trusted."""
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        viewer = store.add_user("viewer")
        other = store.add_user("other")
        story = store.add_story(viewer, "A story")
        first = store.add_comment(story, other, "first")
        second = store.add_comment(story, other, "second")

        roots = await service.get_comment_tree(
            story.id, CommentFields.for_viewer(other.id)
        )
        await service.mark_tree_read(viewer.id, roots, same_user=False)

        assert len(repo.mark_read_calls) == 1
        assert sorted(repo.mark_read_calls[0][1]) == sorted([first.id, second.id])

    @pytest.mark.asyncio
    async def test_marking_twice_is_idempotent(self, unit_env):
        """Marking an already-read tree again leaves the read markers unchanged."""
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        viewer = store.add_user("viewer")
        story = store.add_story(viewer, "A story")
        store.add_comment(story, viewer, "first")
        store.add_comment(story, viewer, "second")
        roots = await service.get_comment_tree(story.id, CommentFields())

        await service.mark_tree_read(viewer.id, roots, same_user=False)
        markers = set(store.read_comments)
        await service.mark_tree_read(viewer.id, roots, same_user=False)

        assert store.read_comments == markers
        assert len(markers) == 2


class TestCreateComment:
    """Tests for create_comment."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """A new comment is voted on and read by its author."""
        # Arrange
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        author = store.add_user("author")
        story = store.add_story(author, "A story")

        # Act
        comment = await service.create_comment(story.id, None, author.id, "Hello")

        # Assert
        assert comment.score == 1
        assert comment.user_voted is True
        assert comment.user_read is True
        assert comment.parent_id is None
        assert comment.comment_html == "<p>Hello</p>"
        assert len(comment.short_url) == 6
        assert (author.id, comment.id) in store.comment_votes
        assert (author.id, comment.id) in store.read_comments

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        author = store.add_user("author")
        story = store.add_story(author, "A story")
        parent = store.add_comment(story, author, "parent")

        reply = await service.create_comment(story.id, parent, author.id, "reply")

        assert reply.parent_id == parent.id
        assert reply.story_id == story.id

    @pytest.mark.asyncio
    async def test_markup_is_escaped(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        author = store.add_user("author")
        story = store.add_story(author, "A story")

        comment = await service.create_comment(
            story.id, None, author.id, "<script>alert(1)</script>"
        )

        assert "<script>" not in comment.comment_html
        assert "&lt;script&gt;" in comment.comment_html

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    async def test_empty_comment_is_rejected(self, unit_env, text):
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        author = store.add_user("author")
        story = store.add_story(author, "A story")

        with pytest.raises(ValidationError) as exc_info:
            await service.create_comment(story.id, None, author.id, text)

        assert exc_info.value.errors == ["Comment cannot be empty."]
        assert store.comments == {}

    @pytest.mark.asyncio
    async def test_comment_at_length_limit_is_accepted(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        author = store.add_user("author")
        story = store.add_story(author, "A story")

        comment = await service.create_comment(story.id, None, author.id, "a" * 2000)

        assert len(comment.comment) == 2000

    @pytest.mark.asyncio
    async def test_too_long_comment_is_rejected(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        author = store.add_user("author")
        story = store.add_story(author, "A story")

        with pytest.raises(ValidationError) as exc_info:
            await service.create_comment(story.id, None, author.id, "a" * 2001)

        assert exc_info.value.errors == [
            "Comment is too long (maximum is 2000 characters)."
        ]

    @pytest.mark.asyncio
    async def test_parent_from_another_story_is_rejected(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        author = store.add_user("author")
        story = store.add_story(author, "A story")
        other_story = store.add_story(author, "Another story")
        foreign_parent = store.add_comment(other_story, author, "elsewhere")

        with pytest.raises(ValidationError) as exc_info:
            await service.create_comment(story.id, foreign_parent, author.id, "Hi")

        assert exc_info.value.errors == [
            "Parent comment does not belong to this story."
        ]

    @pytest.mark.asyncio
    async def test_all_violations_are_reported_together(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        author = store.add_user("author")
        story = store.add_story(author, "A story")
        other_story = store.add_story(author, "Another story")
        foreign_parent = store.add_comment(other_story, author, "elsewhere")

        with pytest.raises(ValidationError) as exc_info:
            await service.create_comment(story.id, foreign_parent, author.id, "")

        assert exc_info.value.errors == [
            "Comment cannot be empty.",
            "Parent comment does not belong to this story.",
        ]
        assert str(exc_info.value) == "ValidationError <2 errors>"

    @pytest.mark.asyncio
    async def test_reply_depth_is_capped(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        repo = InMemoryCommentRepository(store)
        service = CommentService(repo, CommentSettings(max_depth=3))
        author = store.add_user("author")
        story = store.add_story(author, "A story")
        root = store.add_comment(story, author, "depth 1")
        middle = store.add_comment(story, author, "depth 2", parent=root)

        deepest = await service.create_comment(story.id, middle, author.id, "depth 3")
        with pytest.raises(ValidationError) as exc_info:
            await service.create_comment(story.id, deepest, author.id, "depth 4")

        assert exc_info.value.errors == [
            "Reply is nested too deeply (maximum is 3 levels)."
        ]
        assert await service.thread_depth(deepest) == 3
        assert len(store.comments) == 3


class TestToggleVote:
    """Tests for toggle_vote."""

    @pytest.mark.asyncio
    async def test_vote_then_unvote(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        voter = store.add_user("voter")
        story = store.add_story(voter, "A story")
        comment = store.add_comment(story, voter, "comment", short_url="abc123")

        assert await service.toggle_vote("abc123", voter.id) is True
        assert (voter.id, comment.id) in store.comment_votes

        assert await service.toggle_vote("abc123", voter.id) is True
        assert (voter.id, comment.id) not in store.comment_votes

    @pytest.mark.asyncio
    async def test_unknown_comment(self, unit_env):
        service = await unit_env.get(CommentService)

        assert await service.toggle_vote("nope", 1) is False


class TestDeleteComment:
    """Tests for delete_comment."""

    @pytest.mark.asyncio
    async def test_author_deletes_comment_and_replies(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        author = store.add_user("author")
        replier = store.add_user("replier")
        story = store.add_story(author, "A story")
        comment = store.add_comment(story, author, "comment", short_url="gone")
        reply = store.add_comment(story, replier, "reply", parent=comment)
        kept = store.add_comment(story, replier, "kept")

        await service.delete_comment("gone", author.id)

        assert set(store.comments) == {kept.id}
        assert reply.id not in store.comments

    @pytest.mark.asyncio
    async def test_non_author_is_forbidden(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        author = store.add_user("author")
        intruder = store.add_user("intruder")
        story = store.add_story(author, "A story")
        comment = store.add_comment(story, author, "comment", short_url="mine")

        with pytest.raises(ForbiddenError):
            await service.delete_comment("mine", intruder.id)

        assert comment.id in store.comments

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.delete_comment("missing", 1)


class TestGetCommentByShortUrl:
    """Tests for get_comment_by_short_url."""

    @pytest.mark.asyncio
    async def test_fetches_requested_aggregates(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        service = await unit_env.get(CommentService)
        author = store.add_user("author")
        story = store.add_story(author, "A story", short_url="story1")
        store.add_comment(
            story,
            author,
            "comment",
            short_url="c1",
            commented_at=datetime.now(timezone.utc) - timedelta(hours=1),
            voters=[author],
        )

        comment = await service.get_comment_by_short_url(
            "c1", CommentFields(username=True, score=True, story_url=True)
        )

        assert comment is not None
        assert comment.username == "author"
        assert comment.score == 1
        assert comment.story_url == "story1"
        assert comment.user_read is None

    @pytest.mark.asyncio
    async def test_missing_comment_gives_none(self, unit_env):
        service = await unit_env.get(CommentService)

        assert await service.get_comment_by_short_url("missing") is None
