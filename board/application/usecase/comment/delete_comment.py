"""Delete comment use case."""

from pydantic import BaseModel

from board.domain.service import CommentService
from board.domain.value import UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    short_url: str
    user_id: int


class DeleteCommentUseCase:
    """Use case for deleting a comment. Only the author may delete it."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Delete the comment along with its replies.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the user is not the author
        """
        await self.comment_service.delete_comment(
            request.short_url, UserId(request.user_id)
        )
