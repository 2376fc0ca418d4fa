"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .get_comment import GetCommentRequest, GetCommentUseCase
from .projection import CommentItem
from .vote_comment import VoteCommentRequest, VoteCommentUseCase

__all__ = [
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetCommentRequest",
    "GetCommentUseCase",
    "VoteCommentRequest",
    "VoteCommentUseCase",
]
