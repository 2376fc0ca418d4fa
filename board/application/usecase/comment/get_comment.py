"""Get comment use case."""

from pydantic import BaseModel

from board.domain.error import NotFoundError
from board.domain.service import CommentService
from board.domain.value import CommentFields

from .projection import CommentItem


class GetCommentRequest(BaseModel):
    """Get comment request."""

    short_url: str


class GetCommentUseCase:
    """Use case for fetching a single comment by its short URL."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        """Fetch the comment with its author and score.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_service.get_comment_by_short_url(
            request.short_url, CommentFields(username=True, score=True)
        )
        if comment is None:
            raise NotFoundError("Comment", request.short_url)

        return CommentItem.from_comment(comment)
