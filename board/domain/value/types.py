"""Domain value objects for the board.

Value objects are immutable and defined by their values, not identity.
"""

from board.domain.value.common import ValueObject
from board.domain.value.identifiers import UserId


class CommentFields(ValueObject):
    """Optional aggregates to fetch alongside comment rows.

    Each flag adds a join; the matching attribute on the returned
    comments is None whenever its flag is off.
    """

    # Author's username
    username: bool = False
    # Vote count
    score: bool = False
    # Short URL of the owning story
    story_url: bool = False
    # If set, fetch whether this user has read each comment
    check_read: UserId | None = None
    # If set, fetch whether this user has voted on each comment
    check_voter: UserId | None = None

    @classmethod
    def for_viewer(cls, viewer_id: UserId | None) -> "CommentFields":
        """Fields needed to render a ranked comment tree for a viewer."""
        return cls(
            username=True,
            score=True,
            check_read=viewer_id,
            check_voter=viewer_id,
        )


class StoryFields(ValueObject):
    """Optional aggregates to fetch alongside a story row."""

    submitter_username: bool = False
    score: bool = False
    comment_count: bool = False
    check_voter: UserId | None = None
