"""Vote on story use case."""

from pydantic import BaseModel

from board.domain.error import NotFoundError
from board.domain.service import StoryService
from board.domain.value import UserId


class VoteStoryRequest(BaseModel):
    """Vote on story request."""

    short_url: str
    user_id: int


class VoteStoryUseCase:
    """Use case for toggling the user's vote on a story."""

    def __init__(self, story_service: StoryService) -> None:
        self.story_service = story_service

    async def execute(self, request: VoteStoryRequest) -> None:
        """Cast the vote, or retract it if it was already cast.

        Raises:
            NotFoundError: If the story does not exist
        """
        found = await self.story_service.toggle_vote(
            request.short_url, UserId(request.user_id)
        )
        if not found:
            raise NotFoundError("Story", request.short_url)
