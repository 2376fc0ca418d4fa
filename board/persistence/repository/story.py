"""PostgreSQL implementation of Story repository."""

from typing import Optional

from sqlalchemy import and_, delete, exists, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Story
from board.domain.repository import StoryRepository
from board.domain.value import StoryFields, UserId
from board.persistence.mappers import row_to_story
from board.persistence.tables import (
    comments_table,
    stories_table,
    story_votes_table,
    users_table,
)


class PostgresStoryRepository(StoryRepository):
    """PostgreSQL implementation of StoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_short_url(
        self, short_url: str, fields: StoryFields
    ) -> Optional[Story]:
        """Find a story by its short URL."""
        stmt = select(stories_table)

        if fields.submitter_username:
            stmt = stmt.add_columns(
                select(users_table.c.username)
                .where(users_table.c.id == stories_table.c.submitter_id)
                .scalar_subquery()
                .label("submitter_username")
            )
        if fields.score:
            stmt = stmt.add_columns(
                select(func.count())
                .select_from(story_votes_table)
                .where(story_votes_table.c.story_id == stories_table.c.id)
                .scalar_subquery()
                .label("score")
            )
        if fields.comment_count:
            stmt = stmt.add_columns(
                select(func.count())
                .select_from(comments_table)
                .where(comments_table.c.story_id == stories_table.c.id)
                .scalar_subquery()
                .label("comment_count")
            )
        if fields.check_voter is not None:
            stmt = stmt.add_columns(
                exists()
                .where(
                    and_(
                        story_votes_table.c.story_id == stories_table.c.id,
                        story_votes_table.c.user_id == fields.check_voter,
                    )
                )
                .label("user_voted")
            )

        stmt = stmt.where(stories_table.c.short_url == short_url)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_story(row._asdict()) if row else None

    async def toggle_vote(self, short_url: str, user_id: UserId) -> bool:
        """Insert the vote; if it was already there, delete it instead."""
        result = await self.session.execute(
            select(stories_table.c.id).where(stories_table.c.short_url == short_url)
        )
        story_id = result.scalar_one_or_none()
        if story_id is None:
            return False

        inserted = await self.session.execute(
            pg_insert(story_votes_table)
            .values(user_id=user_id, story_id=story_id)
            .on_conflict_do_nothing(index_elements=["user_id", "story_id"])
        )
        if inserted.rowcount == 0:  # type: ignore[attr-defined]
            await self.session.execute(
                delete(story_votes_table).where(
                    and_(
                        story_votes_table.c.user_id == user_id,
                        story_votes_table.c.story_id == story_id,
                    )
                )
            )

        await self.session.flush()
        return True
