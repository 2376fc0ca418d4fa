"""PostgreSQL repository implementations."""

from board.persistence.repository.comment import PostgresCommentRepository
from board.persistence.repository.story import PostgresStoryRepository
from board.persistence.repository.tag import PostgresTagRepository
from board.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresStoryRepository",
    "PostgresCommentRepository",
    "PostgresTagRepository",
]
