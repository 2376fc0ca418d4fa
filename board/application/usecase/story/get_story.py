"""Get story use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from board.application.usecase.comment import CommentItem
from board.domain.error import NotFoundError
from board.domain.service import (
    CommentService,
    StoryService,
    TagService,
    count_comment_tree,
)
from board.domain.value import CommentFields, StoryFields, UserId


class GetStoryRequest(BaseModel):
    """Get story request."""

    short_url: str
    viewer_id: int | None = None  # Authenticated user, if any


class GetStoryResponse(BaseModel):
    """Story with its tags and ranked comment tree."""

    short_url: str
    title: str
    url: str | None
    text: str | None
    text_html: str | None
    submitted_at: datetime
    submitter_username: str | None
    score: int | None
    comment_count: int | None
    user_voted: bool | None
    tags: list[str]
    comments: list[CommentItem]


class GetStoryUseCase:
    """Use case for viewing a story page.

    Viewing a story counts as reading every comment on it, so for an
    authenticated viewer the comments not yet read are marked read after
    the tree is built. The returned tree still reflects the read state from
    before the visit.
    """

    def __init__(
        self,
        story_service: StoryService,
        comment_service: CommentService,
        tag_service: TagService,
    ) -> None:
        """Initialize get story use case.

        Args:
            story_service: Story domain service
            comment_service: Comment domain service
            tag_service: Tag domain service
        """
        self.story_service = story_service
        self.comment_service = comment_service
        self.tag_service = tag_service

    async def execute(self, request: GetStoryRequest) -> GetStoryResponse:
        """Execute get story flow.

        Steps:
        1. Fetch the story with its aggregates
        2. Fetch its tags
        3. Build the ranked comment tree
        4. Mark the tree read for the viewer

        Args:
            request: Get story request

        Returns:
            Story projection with tags and comments

        Raises:
            NotFoundError: If the story does not exist
        """
        viewer_id = (
            UserId(request.viewer_id) if request.viewer_id is not None else None
        )

        story = await self.story_service.get_story_by_short_url(
            request.short_url,
            StoryFields(
                submitter_username=True,
                score=True,
                comment_count=True,
                check_voter=viewer_id,
            ),
        )
        if story is None:
            raise NotFoundError("Story", request.short_url)

        tags = await self.tag_service.get_story_tags(story.id)
        roots = await self.comment_service.get_comment_tree(
            story.id, CommentFields.for_viewer(viewer_id)
        )

        if viewer_id is not None:
            await self.comment_service.mark_tree_read(viewer_id, roots, same_user=True)

        logfire.info(
            "Story viewed",
            short_url=story.short_url,
            viewer_id=viewer_id,
            comments=count_comment_tree(roots),
        )

        return GetStoryResponse(
            short_url=story.short_url,
            title=story.title,
            url=story.url,
            text=story.text,
            text_html=story.text_html,
            submitted_at=story.submitted_at,
            submitter_username=story.submitter_username,
            score=story.score,
            comment_count=story.comment_count,
            user_voted=story.user_voted,
            tags=[tag.name for tag in tags],
            comments=[CommentItem.from_node(root) for root in roots],
        )
