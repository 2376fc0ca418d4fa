"""PostgreSQL implementation of Tag repository."""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Tag
from board.domain.repository import TagRepository
from board.domain.value import StoryId
from board.persistence.mappers import row_to_tag
from board.persistence.tables import story_tags_table, tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_story(self, story_id: StoryId) -> List[Tag]:
        """Find the tags attached to a story, ordered by name."""
        stmt = (
            select(tags_table)
            .select_from(
                tags_table.join(
                    story_tags_table, story_tags_table.c.tag_id == tags_table.c.id
                )
            )
            .where(story_tags_table.c.story_id == story_id)
            .order_by(tags_table.c.name)
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]
