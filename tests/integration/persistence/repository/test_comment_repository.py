"""Integration tests for PostgresCommentRepository.

These tests need a migrated PostgreSQL database reachable through
DATABASE__URL and only run when BOARD_INTEGRATION is set.
"""

import os

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import CommentCreate
from board.domain.repository import CommentRepository
from board.domain.value import CommentFields, StoryId, UserId
from board.persistence.tables import stories_table, users_table
from board.util.short_id import generate_short_id
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("BOARD_INTEGRATION"),
    reason="set BOARD_INTEGRATION=1 to run against PostgreSQL",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def _seed_story(session: AsyncSession) -> tuple[UserId, StoryId]:
    result = await session.execute(
        users_table.insert()
        .values(username=f"user-{generate_short_id(8)}")
        .returning(users_table.c.id)
    )
    user_id = UserId(result.scalar_one())

    result = await session.execute(
        stories_table.insert()
        .values(
            short_url=generate_short_id(8),
            title="Integration story",
            submitter_id=user_id,
        )
        .returning(stories_table.c.id)
    )
    return user_id, StoryId(result.scalar_one())


def _new_comment(story_id, user_id, parent_id=None) -> CommentCreate:
    return CommentCreate(
        story_id=story_id,
        parent_id=parent_id,
        user_id=user_id,
        short_url=generate_short_id(8),
        comment="integration",
        comment_html="<p>integration</p>",
    )


class TestPostgresCommentRepository:
    """Integration tests for the optional aggregate columns and toggles."""

    @pytest.mark.asyncio
    async def test_create_records_vote_and_read_marker(self, integration_env):
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(CommentRepository)
        user_id, story_id = await _seed_story(session)

        created = await repo.create(_new_comment(story_id, user_id))
        [found] = await repo.find_by_story(story_id, CommentFields.for_viewer(user_id))

        assert found.id == created.id
        assert found.score == 1
        assert found.user_voted is True
        assert found.user_read is True
        assert found.username is not None

    @pytest.mark.asyncio
    async def test_unrequested_aggregates_stay_none(self, integration_env):
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(CommentRepository)
        user_id, story_id = await _seed_story(session)
        await repo.create(_new_comment(story_id, user_id))

        [found] = await repo.find_by_story(story_id, CommentFields())

        assert found.score is None
        assert found.user_read is None
        assert found.username is None

    @pytest.mark.asyncio
    async def test_toggle_vote_and_idempotent_mark_read(self, integration_env):
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(CommentRepository)
        user_id, story_id = await _seed_story(session)
        created = await repo.create(_new_comment(story_id, user_id))

        assert await repo.toggle_vote(created.short_url, user_id) is True
        found = await repo.find_by_short_url(created.short_url, CommentFields(score=True))
        assert found is not None and found.score == 0

        await repo.mark_read(user_id, [created.id])
        await repo.mark_read(user_id, [created.id])

        assert await repo.toggle_vote("no-such-comment", user_id) is False

    @pytest.mark.asyncio
    async def test_delete_cascades_to_replies(self, integration_env):
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(CommentRepository)
        user_id, story_id = await _seed_story(session)
        parent = await repo.create(_new_comment(story_id, user_id))
        await repo.create(_new_comment(story_id, user_id, parent_id=parent.id))

        await repo.delete(parent.id)

        assert await repo.find_by_story(story_id, CommentFields()) == []
