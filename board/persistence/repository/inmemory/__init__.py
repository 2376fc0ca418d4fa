"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .store import InMemoryStore
from .story import InMemoryStoryRepository
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryStore",
    "InMemoryCommentRepository",
    "InMemoryStoryRepository",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
]
