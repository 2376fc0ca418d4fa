"""Create comment use case."""

from pydantic import BaseModel

from board.domain.error import NotFoundError
from board.domain.service import CommentService, StoryService, UserService
from board.domain.value import UserId

from .projection import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    story: str  # Story short URL
    parent: str | None = None  # Parent comment short URL for replies
    comment: str
    author_id: int  # User ID from authenticated user


class CreateCommentUseCase:
    """Use case for commenting on a story or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        story_service: StoryService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            story_service: Story domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.story_service = story_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Steps:
        1. Load the author (must exist)
        2. Resolve the story and, for replies, the parent comment
        3. Create the comment via comment service (validates the text and
           that the parent belongs to the story)

        Args:
            request: Create comment request

        Returns:
            The new comment, already voted on and read by its author

        Raises:
            NotFoundError: If the author, story or parent comment is missing
            ValidationError: If the comment breaks any creation rule
        """
        author = await self.user_service.get_by_id(UserId(request.author_id))

        story = await self.story_service.get_story_by_short_url(request.story)
        if story is None:
            raise NotFoundError("Story", request.story)

        parent = None
        if request.parent:
            parent = await self.comment_service.get_comment_by_short_url(
                request.parent
            )
            if parent is None:
                raise NotFoundError("Comment", request.parent)

        comment = await self.comment_service.create_comment(
            story_id=story.id,
            parent=parent,
            author_id=author.id,
            text=request.comment,
        )

        return CommentItem.from_comment(
            comment.model_copy(update={"username": author.username})
        )
