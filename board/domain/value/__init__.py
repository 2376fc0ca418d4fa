"""Domain value objects for the board."""

from board.domain.value.identifiers import CommentId, StoryId, TagId, UserId
from board.domain.value.types import CommentFields, StoryFields

__all__ = [
    # Identifiers
    "UserId",
    "StoryId",
    "CommentId",
    "TagId",
    # Types
    "CommentFields",
    "StoryFields",
]
