"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Collection, List, Optional

from board.domain.model.comment import Comment, CommentCreate
from board.domain.value import CommentFields, CommentId, StoryId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_story(
        self, story_id: StoryId, fields: CommentFields
    ) -> List[Comment]:
        """Find all comments for a story.

        Rows come back in no particular order with respect to the tree.
        An unknown or empty story yields an empty list.

        Args:
            story_id: The story ID
            fields: Optional aggregates to fetch

        Returns:
            One comment per row
        """
        pass

    @abstractmethod
    async def find_by_short_url(
        self, short_url: str, fields: CommentFields
    ) -> Optional[Comment]:
        """Find a comment by its short URL.

        Args:
            short_url: The comment's public identifier
            fields: Optional aggregates to fetch

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, comment: CommentCreate) -> Comment:
        """Insert a comment.

        In the same transaction the author votes on the comment and
        marks it as read.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment (id and timestamp assigned by the store)
        """
        pass

    @abstractmethod
    async def mark_read(
        self, user_id: UserId, comment_ids: Collection[CommentId]
    ) -> None:
        """Record that a user has read the given comments.

        Issued as a single bulk insert. Pairs that already exist are
        skipped silently.

        Args:
            user_id: The reader
            comment_ids: Comments to mark as read
        """
        pass

    @abstractmethod
    async def toggle_vote(self, short_url: str, user_id: UserId) -> bool:
        """Cast the user's vote on a comment, or retract it if already cast.

        Must be atomic so that concurrent toggles never leave two votes.

        Args:
            short_url: The comment's public identifier
            user_id: The voter

        Returns:
            True if the comment exists, False otherwise
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment.

        Votes, read markers and replies are removed along with it.

        Args:
            comment_id: The comment ID to delete
        """
        pass
