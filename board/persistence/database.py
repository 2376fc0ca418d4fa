"""Async engine and session factory for the PostgreSQL store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from board.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the engine shared by every request of the process.

    SQL echo follows ``settings.debug``; pool sizing comes from the
    ``database`` section.
    """
    pool = settings.database
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=pool.pool_size,
        max_overflow=pool.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Repositories issue Core statements and flush nothing implicitly;
    # the request scope owns commit and rollback.
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
