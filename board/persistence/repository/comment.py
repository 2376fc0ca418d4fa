"""PostgreSQL implementation of Comment repository."""

from typing import Collection, List, Optional

from sqlalchemy import Select, and_, delete, exists, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Comment, CommentCreate
from board.domain.repository import CommentRepository
from board.domain.value import CommentFields, CommentId, StoryId, UserId
from board.persistence.mappers import row_to_comment
from board.persistence.tables import (
    comment_votes_table,
    comments_table,
    read_comments_table,
    stories_table,
    users_table,
)


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select_comments(self, fields: CommentFields) -> Select:
        """Build the comment query with the requested aggregate columns.

        Each aggregate is a correlated subquery against the comment row, so
        optional fields never multiply the result rows.
        """
        stmt = select(comments_table)

        if fields.username:
            stmt = stmt.add_columns(
                select(users_table.c.username)
                .where(users_table.c.id == comments_table.c.user_id)
                .scalar_subquery()
                .label("username")
            )

        if fields.score:
            stmt = stmt.add_columns(
                select(func.count())
                .select_from(comment_votes_table)
                .where(comment_votes_table.c.comment_id == comments_table.c.id)
                .scalar_subquery()
                .label("score")
            )

        if fields.story_url:
            stmt = stmt.add_columns(
                select(stories_table.c.short_url)
                .where(stories_table.c.id == comments_table.c.story_id)
                .scalar_subquery()
                .label("story_url")
            )

        if fields.check_voter is not None:
            stmt = stmt.add_columns(
                exists()
                .where(
                    and_(
                        comment_votes_table.c.comment_id == comments_table.c.id,
                        comment_votes_table.c.user_id == fields.check_voter,
                    )
                )
                .label("user_voted")
            )

        if fields.check_read is not None:
            stmt = stmt.add_columns(
                exists()
                .where(
                    and_(
                        read_comments_table.c.comment_id == comments_table.c.id,
                        read_comments_table.c.user_id == fields.check_read,
                    )
                )
                .label("user_read")
            )

        return stmt

    async def _find_id_by_short_url(self, short_url: str) -> Optional[CommentId]:
        stmt = select(comments_table.c.id).where(
            comments_table.c.short_url == short_url
        )
        result = await self.session.execute(stmt)
        comment_id = result.scalar_one_or_none()
        return CommentId(comment_id) if comment_id is not None else None

    async def find_by_story(
        self, story_id: StoryId, fields: CommentFields
    ) -> List[Comment]:
        """Find all comments for a story."""
        stmt = self._select_comments(fields).where(
            comments_table.c.story_id == story_id
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_short_url(
        self, short_url: str, fields: CommentFields
    ) -> Optional[Comment]:
        """Find a comment by its short URL."""
        stmt = self._select_comments(fields).where(
            comments_table.c.short_url == short_url
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def create(self, comment: CommentCreate) -> Comment:
        """Insert a comment along with the author's vote and read marker."""
        stmt = (
            comments_table.insert()
            .values(
                story_id=comment.story_id,
                parent_id=comment.parent_id,
                user_id=comment.user_id,
                short_url=comment.short_url,
                comment=comment.comment,
                comment_html=comment.comment_html,
            )
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        created = row_to_comment(result.one()._asdict())

        marker = {"user_id": comment.user_id, "comment_id": created.id}
        await self.session.execute(comment_votes_table.insert().values(**marker))
        await self.session.execute(read_comments_table.insert().values(**marker))
        await self.session.flush()

        return created

    async def mark_read(
        self, user_id: UserId, comment_ids: Collection[CommentId]
    ) -> None:
        """Bulk insert read markers, skipping pairs that already exist."""
        if not comment_ids:
            return

        stmt = (
            pg_insert(read_comments_table)
            .values(
                [
                    {"user_id": user_id, "comment_id": comment_id}
                    for comment_id in comment_ids
                ]
            )
            .on_conflict_do_nothing(index_elements=["user_id", "comment_id"])
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def toggle_vote(self, short_url: str, user_id: UserId) -> bool:
        """Insert the vote; if it was already there, delete it instead."""
        comment_id = await self._find_id_by_short_url(short_url)
        if comment_id is None:
            return False

        inserted = await self.session.execute(
            pg_insert(comment_votes_table)
            .values(user_id=user_id, comment_id=comment_id)
            .on_conflict_do_nothing(index_elements=["user_id", "comment_id"])
        )
        if inserted.rowcount == 0:  # type: ignore[attr-defined]
            await self.session.execute(
                delete(comment_votes_table).where(
                    and_(
                        comment_votes_table.c.user_id == user_id,
                        comment_votes_table.c.comment_id == comment_id,
                    )
                )
            )

        await self.session.flush()
        return True

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (replies, votes and read markers cascade)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()
