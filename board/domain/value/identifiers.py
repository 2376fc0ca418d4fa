"""Strongly typed identifiers for board entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting. All identifiers are
store-assigned integers.
"""

from typing import NewType

# Core domain entity identifiers
UserId = NewType("UserId", int)
StoryId = NewType("StoryId", int)
CommentId = NewType("CommentId", int)
TagId = NewType("TagId", int)
