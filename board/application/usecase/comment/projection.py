"""Public projection of comments."""

from datetime import datetime

from pydantic import BaseModel

from board.domain.model import Comment
from board.domain.service import CommentNode, iter_comment_tree


class CommentItem(BaseModel):
    """Comment as exposed by the API.

    Recursive structure mirroring the comment tree. Internal IDs are never
    exposed; comments are addressed by their short URL.
    """

    short_url: str
    commented_at: datetime
    comment: str
    comment_html: str
    username: str | None
    score: int | None
    children: list["CommentItem"]

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        """Project a single comment, without replies."""
        return cls(
            short_url=comment.short_url,
            commented_at=comment.commented_at,
            comment=comment.comment,
            comment_html=comment.comment_html,
            username=comment.username,
            score=comment.score,
            children=[],
        )

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentItem":
        """Project a tree node with its replies, keeping their order.

        Items are built children first from a flat walk of the tree, so
        building never recurses.

        Args:
            node: Domain comment tree node

        Returns:
            API response model with every reply converted
        """
        items: dict[int, CommentItem] = {}
        for current in reversed(list(iter_comment_tree([node]))):
            item = cls.from_comment(current.comment)
            item.children = [items.pop(id(child)) for child in current.children]
            items[id(current)] = item
        return items[id(node)]
