"""Domain model entities for the board."""

from board.domain.model.comment import Comment, CommentCreate
from board.domain.model.story import Story
from board.domain.model.tag import Tag
from board.domain.model.user import User

__all__ = [
    "User",
    "Story",
    "Comment",
    "CommentCreate",
    "Tag",
]
