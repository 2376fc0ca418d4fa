"""Story entity.

Stories are submitted links or text posts that comments hang off.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import StoryId, UserId


class Story(DomainModel):
    """Story entity.

    Aggregates are only present when requested through ``StoryFields``.
    """

    id: StoryId
    short_url: str = Field(min_length=1, max_length=32)
    title: str = Field(min_length=1, max_length=300)
    url: Optional[str] = None
    text: Optional[str] = None
    text_html: Optional[str] = None
    is_authored: bool = False
    submitter_id: UserId
    submitted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Aggregates, present if requested
    submitter_username: Optional[str] = None
    score: Optional[int] = None
    comment_count: Optional[int] = None
    user_voted: Optional[bool] = None
