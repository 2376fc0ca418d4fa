"""Persistence providers.

The base class is the swappable ``persistence`` component; tests supply an
in-memory implementation of it.
"""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from board.config import Settings
from board.domain.repository import (
    CommentRepository,
    StoryRepository,
    TagRepository,
    UserRepository,
)
from board.persistence.database import create_engine, create_session_factory
from board.persistence.repository import (
    PostgresCommentRepository,
    PostgresStoryRepository,
    PostgresTagRepository,
    PostgresUserRepository,
)
from board.util.di.base import ProviderBase
from board.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL-backed repositories sharing one session per request."""

    __is_mock__ = False

    users = provide(
        PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST
    )
    stories = provide(
        PostgresStoryRepository, provides=StoryRepository, scope=Scope.REQUEST
    )
    comments = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    tags = provide(PostgresTagRepository, provides=TagRepository, scope=Scope.REQUEST)

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Engine for the container's lifetime; disposed on close."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request.

        Committed when the request scope closes cleanly, rolled back when
        the request raised.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Rolling back request transaction", error=str(e))
                await session.rollback()
                raise
            await session.commit()
