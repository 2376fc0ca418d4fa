"""Vote on comment use case."""

from pydantic import BaseModel

from board.domain.error import NotFoundError
from board.domain.service import CommentService
from board.domain.value import UserId


class VoteCommentRequest(BaseModel):
    """Vote on comment request."""

    short_url: str
    user_id: int


class VoteCommentUseCase:
    """Use case for toggling the user's vote on a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: VoteCommentRequest) -> None:
        """Cast the vote, or retract it if it was already cast.

        Raises:
            NotFoundError: If the comment does not exist
        """
        found = await self.comment_service.toggle_vote(
            request.short_url, UserId(request.user_id)
        )
        if not found:
            raise NotFoundError("Comment", request.short_url)
