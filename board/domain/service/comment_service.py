"""Comment domain service."""

from typing import Sequence

import logfire

from board.config import CommentSettings
from board.domain.error import ForbiddenError, NotFoundError, ValidationError
from board.domain.model.comment import Comment, CommentCreate
from board.domain.repository import CommentRepository
from board.domain.service.comment_tree import (
    CommentNode,
    assemble_comment_tree,
    collect_unread_ids,
    sort_comment_tree,
)
from board.domain.value import CommentFields, StoryId, UserId
from board.util.markup import render_text_html
from board.util.short_id import generate_short_id

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        settings: CommentSettings | None = None,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            settings: Comment settings (defaults apply when omitted)
        """
        self.comment_repository = comment_repository
        self.settings = settings or CommentSettings()

    async def get_comment_tree(
        self, story_id: StoryId, fields: CommentFields
    ) -> list[CommentNode]:
        """Get the ranked comment tree of a story.

        The score is always fetched since ranking needs it, whatever
        ``fields`` asks for.

        Args:
            story_id: Story ID
            fields: Optional aggregates to fetch

        Returns:
            Root nodes, every level ordered best first
        """
        with logfire.span(
            "comment_service.get_comment_tree",
            story_id=story_id,
            viewer_id=fields.check_read,
        ):
            if not fields.score:
                fields = fields.model_copy(update={"score": True})

            comments = await self.comment_repository.find_by_story(story_id, fields)
            roots = assemble_comment_tree(comments)
            sort_comment_tree(roots)

            logfire.info(
                "Comment tree built",
                story_id=story_id,
                rows=len(comments),
                roots=len(roots),
            )
            return roots

    async def mark_tree_read(
        self,
        viewer_id: UserId,
        roots: Sequence[CommentNode],
        same_user: bool,
    ) -> None:
        """Mark every comment of a tree as read by the viewer.

        Args:
            viewer_id: The user who viewed the tree
            roots: Root nodes of the tree
            same_user: Whether the tree was fetched with read state checked
                for ``viewer_id``; if so, comments already read are skipped
        """
        with logfire.span(
            "comment_service.mark_tree_read",
            viewer_id=viewer_id,
            same_user=same_user,
        ):
            comment_ids = collect_unread_ids(roots, same_user)
            if not comment_ids:
                logfire.debug("No unread comments to mark", viewer_id=viewer_id)
                return

            await self.comment_repository.mark_read(viewer_id, comment_ids)
            logfire.info(
                "Comments marked as read",
                viewer_id=viewer_id,
                count=len(comment_ids),
            )

    async def thread_depth(self, comment: Comment) -> int:
        """Count the comments from ``comment`` up to its thread's root.

        A top-level comment has depth 1. Counting stops once the depth
        exceeds ``max_depth``.
        """
        rows = await self.comment_repository.find_by_story(
            comment.story_id, CommentFields()
        )
        parents = {row.id: row.parent_id for row in rows}

        depth = 1
        ancestor = comment.parent_id
        while ancestor is not None and depth <= self.settings.max_depth:
            depth += 1
            ancestor = parents.get(ancestor)
        return depth

    def validate_comment(
        self,
        story_id: StoryId,
        parent: Comment | None,
        text: str,
        parent_depth: int = 0,
    ) -> list[str]:
        """Check a new comment against the creation rules.

        Args:
            story_id: Story the comment is posted on
            parent: Comment being replied to, if any
            text: Raw comment text
            parent_depth: Depth of ``parent`` in its thread, 0 without one

        Returns:
            Every violation message; empty if the comment is valid
        """
        errors: list[str] = []

        if not text.strip():
            errors.append("Comment cannot be empty.")
        elif len(text) > self.settings.max_length:
            errors.append(
                f"Comment is too long (maximum is {self.settings.max_length} characters)."
            )

        if parent is not None and parent.story_id != story_id:
            errors.append("Parent comment does not belong to this story.")
        elif parent_depth >= self.settings.max_depth:
            errors.append(
                "Reply is nested too deeply "
                f"(maximum is {self.settings.max_depth} levels)."
            )

        return errors

    async def create_comment(
        self,
        story_id: StoryId,
        parent: Comment | None,
        author_id: UserId,
        text: str,
    ) -> Comment:
        """Create a comment on a story or a reply to another comment.

        The author's vote and read marker are written together with the
        comment, so the returned comment already carries ``score=1`` and
        both viewer flags set.

        Args:
            story_id: Story ID
            parent: Comment being replied to (None for top-level)
            author_id: Author user ID
            text: Raw comment text

        Returns:
            Created comment

        Raises:
            ValidationError: With every violated rule
        """
        with logfire.span(
            "comment_service.create_comment",
            story_id=story_id,
            author_id=author_id,
            parent_id=parent.id if parent else None,
        ):
            parent_depth = 0
            if parent is not None and parent.story_id == story_id:
                parent_depth = await self.thread_depth(parent)

            errors = self.validate_comment(story_id, parent, text, parent_depth)
            if errors:
                logfire.info(
                    "Comment rejected", story_id=story_id, errors=errors
                )
                raise ValidationError(errors)

            created = await self.comment_repository.create(
                CommentCreate(
                    story_id=story_id,
                    parent_id=parent.id if parent else None,
                    user_id=author_id,
                    short_url=generate_short_id(self.settings.short_url_length),
                    comment=text,
                    comment_html=render_text_html(text),
                )
            )

            logfire.info(
                "Comment created",
                comment_id=created.id,
                short_url=created.short_url,
                story_id=story_id,
            )
            return created.model_copy(
                update={"score": 1, "user_voted": True, "user_read": True}
            )

    async def get_comment_by_short_url(
        self, short_url: str, fields: CommentFields | None = None
    ) -> Comment | None:
        """Get a comment by its short URL.

        Args:
            short_url: Comment short URL
            fields: Optional aggregates to fetch

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_short_url", short_url=short_url
        ):
            comment = await self.comment_repository.find_by_short_url(
                short_url, fields or CommentFields()
            )
            if comment is None:
                logfire.warn("Comment not found", short_url=short_url)
            return comment

    async def toggle_vote(self, short_url: str, user_id: UserId) -> bool:
        """Cast or retract the user's vote on a comment.

        Args:
            short_url: Comment short URL
            user_id: Voter

        Returns:
            True if the comment exists, False otherwise
        """
        with logfire.span(
            "comment_service.toggle_vote", short_url=short_url, user_id=user_id
        ):
            found = await self.comment_repository.toggle_vote(short_url, user_id)
            if not found:
                logfire.warn("Vote on non-existent comment", short_url=short_url)
            return found

    async def delete_comment(self, short_url: str, user_id: UserId) -> None:
        """Delete a comment written by the user.

        Args:
            short_url: Comment short URL
            user_id: User requesting the deletion

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment", short_url=short_url, user_id=user_id
        ):
            comment = await self.comment_repository.find_by_short_url(
                short_url, CommentFields()
            )
            if comment is None:
                raise NotFoundError("Comment", short_url)
            if comment.user_id != user_id:
                logfire.warn(
                    "Comment deletion by non-author",
                    short_url=short_url,
                    user_id=user_id,
                    author_id=comment.user_id,
                )
                raise ForbiddenError("comment", short_url, user_id)

            await self.comment_repository.delete(comment.id)
            logfire.info("Comment deleted", comment_id=comment.id, short_url=short_url)
