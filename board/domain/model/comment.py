"""Comment entity.

Comments are threaded discussions on stories. Threading is stored as a
plain parent reference; the nested tree is rebuilt on every fetch and
never persisted.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import AwareDatetime, Field

from board.domain.model.common import DomainModel
from board.domain.value import CommentId, StoryId, UserId


class Comment(DomainModel):
    """Comment entity.

    Aggregates (score, username, viewer flags, story URL) are only present
    when requested through ``CommentFields``; ``None`` means "not fetched".
    ``user_read`` and ``user_voted`` are therefore tri-state.
    """

    id: CommentId
    story_id: StoryId
    user_id: UserId
    parent_id: Optional[CommentId] = None
    short_url: str = Field(min_length=1, max_length=32)
    # Naive datetimes are rejected; rank depends on the absolute instant
    commented_at: AwareDatetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    comment: str
    comment_html: str

    # Aggregates, present if requested
    score: Optional[int] = None
    username: Optional[str] = None
    user_voted: Optional[bool] = None
    user_read: Optional[bool] = None
    story_url: Optional[str] = None


class CommentCreate(DomainModel):
    """Fields required to insert a new comment."""

    story_id: StoryId
    parent_id: Optional[CommentId] = None
    user_id: UserId
    short_url: str
    comment: str
    comment_html: str
