"""SQLAlchemy table definitions for the board.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("username", String(64), nullable=False, unique=True),
    Column("email", String(255), nullable=True),
    Column(
        "registered_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(30), nullable=False, unique=True),
    Column("description", Text, nullable=False, server_default=""),
)

# ============================================================================
# STORIES TABLE
# ============================================================================
stories_table = Table(
    "stories",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("short_url", String(32), nullable=False, unique=True),
    Column("title", String(300), nullable=False),
    Column("url", Text, nullable=True),
    Column("text", Text, nullable=True),
    Column("text_html", Text, nullable=True),
    Column("is_authored", Boolean, nullable=False, server_default="false"),
    Column(
        "submitter_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "submitted_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

Index("idx_stories_submitter_id", stories_table.c.submitter_id)
Index("idx_stories_submitted_at", stories_table.c.submitted_at.desc())

# ============================================================================
# STORY_TAGS TABLE (junction table for many-to-many relationship)
# ============================================================================
story_tags_table = Table(
    "story_tags",
    metadata,
    Column(
        "story_id",
        Integer,
        ForeignKey("stories.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        Integer,
        ForeignKey("tags.id", ondelete="RESTRICT"),
        primary_key=True,
    ),
)

Index("idx_story_tags_tag_id", story_tags_table.c.tag_id)

# ============================================================================
# STORY_VOTES TABLE (one row per user per story, no surrogate key)
# ============================================================================
story_votes_table = Table(
    "story_votes",
    metadata,
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    ),
    Column(
        "story_id",
        Integer,
        ForeignKey("stories.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

Index("idx_story_votes_story_id", story_votes_table.c.story_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "story_id",
        Integer,
        ForeignKey("stories.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "parent_id",
        Integer,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("short_url", String(32), nullable=False, unique=True),
    Column(
        "commented_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column("comment", Text, nullable=False),
    Column("comment_html", Text, nullable=False),
)

Index("idx_comments_story_id", comments_table.c.story_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_user_id", comments_table.c.user_id)

# ============================================================================
# COMMENT_VOTES TABLE (one row per user per comment, no surrogate key)
# ============================================================================
comment_votes_table = Table(
    "comment_votes",
    metadata,
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    ),
    Column(
        "comment_id",
        Integer,
        ForeignKey("comments.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

Index("idx_comment_votes_comment_id", comment_votes_table.c.comment_id)

# ============================================================================
# READ_COMMENTS TABLE (append-only read markers)
# ============================================================================
read_comments_table = Table(
    "read_comments",
    metadata,
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    ),
    Column(
        "comment_id",
        Integer,
        ForeignKey("comments.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)
