"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's ORM mapping. Aggregate columns are only present in
a row when the query asked for them; missing keys map to None.
"""

from typing import Any, Dict

from board.domain.model import Comment, Story, Tag, User
from board.domain.value import CommentId, StoryId, TagId, UserId


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        username=row["username"],
        email=row.get("email"),
        registered_at=row["registered_at"],
    )


def row_to_story(row: Dict[str, Any]) -> Story:
    """Convert database row to Story domain model.

    Args:
        row: Database row as dict, possibly with aggregate columns

    Returns:
        Story domain model
    """
    return Story(
        id=StoryId(row["id"]),
        short_url=row["short_url"],
        title=row["title"],
        url=row.get("url"),
        text=row.get("text"),
        text_html=row.get("text_html"),
        is_authored=row["is_authored"],
        submitter_id=UserId(row["submitter_id"]),
        submitted_at=row["submitted_at"],
        submitter_username=row.get("submitter_username"),
        score=row.get("score"),
        comment_count=row.get("comment_count"),
        user_voted=row.get("user_voted"),
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict, possibly with aggregate columns

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        story_id=StoryId(row["story_id"]),
        user_id=UserId(row["user_id"]),
        parent_id=CommentId(row["parent_id"])
        if row.get("parent_id") is not None
        else None,
        short_url=row["short_url"],
        commented_at=row["commented_at"],
        comment=row["comment"],
        comment_html=row["comment_html"],
        score=row.get("score"),
        username=row.get("username"),
        user_voted=row.get("user_voted"),
        user_read=row.get("user_read"),
        story_url=row.get("story_url"),
    )


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    Args:
        row: Database row as dict

    Returns:
        Tag domain model
    """
    return Tag(
        id=TagId(row["id"]),
        name=row["name"],
        description=row.get("description") or "",
    )
