"""Test configuration and helpers."""

from datetime import datetime, timezone

from board.domain.model import Comment
from board.domain.value import CommentId, StoryId, UserId

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def make_comment(
    comment_id: int,
    parent_id: int | None = None,
    score: int | None = 0,
    commented_at: datetime = EPOCH,
    user_read: bool | None = None,
    story_id: int = 1,
) -> Comment:
    """Build a comment row as a repository would return it.

    Args:
        comment_id: Comment ID, also used to derive the short URL
        parent_id: Parent comment ID, None for top-level comments
        score: Vote count; None simulates a fetch without scores
        commented_at: Posting time
        user_read: Viewer read state (None means not fetched)
        story_id: Owning story

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(comment_id),
        story_id=StoryId(story_id),
        user_id=UserId(1),
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        short_url=f"c{comment_id}",
        commented_at=commented_at,
        comment=f"comment {comment_id}",
        comment_html=f"<p>comment {comment_id}</p>",
        score=score,
        user_read=user_read,
    )
