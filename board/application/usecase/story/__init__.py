"""Story use cases."""

from .get_story import GetStoryRequest, GetStoryResponse, GetStoryUseCase
from .vote_story import VoteStoryRequest, VoteStoryUseCase

__all__ = [
    "GetStoryRequest",
    "GetStoryResponse",
    "GetStoryUseCase",
    "VoteStoryRequest",
    "VoteStoryUseCase",
]
