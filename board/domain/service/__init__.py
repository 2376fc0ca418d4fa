"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import (
    CommentNode,
    assemble_comment_tree,
    collect_unread_ids,
    count_comment_tree,
    iter_comment_tree,
    sort_comment_tree,
)
from .jwt_service import JWTService
from .ranking import comment_rank
from .story_service import StoryService
from .tag_service import TagService
from .user_service import UserService

__all__ = [
    "CommentNode",
    "CommentService",
    "JWTService",
    "Service",
    "StoryService",
    "TagService",
    "UserService",
    "assemble_comment_tree",
    "collect_unread_ids",
    "comment_rank",
    "count_comment_tree",
    "iter_comment_tree",
    "sort_comment_tree",
]
