"""Comment tree assembly and ordering.

Stories store their comments as flat rows with a parent reference. These
helpers turn such a row set into a nested tree, order every level by rank
and walk the result. They are pure, synchronous and never touch the store.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

import logfire

from board.domain.model.comment import Comment
from board.domain.service.ranking import comment_rank
from board.domain.value import CommentId


@dataclass
class CommentNode:
    """Node in a story's comment tree.

    Wraps a comment with its replies. The ordering of ``children`` is
    transient and only meaningful for the fetch that built it.
    """

    comment: Comment
    children: list["CommentNode"] = field(default_factory=list)


def assemble_comment_tree(comments: Iterable[Comment]) -> list[CommentNode]:
    """Build the comment tree of a story from its flat comment rows.

    Comments without a parent become roots. A comment whose parent is not
    in the row set is dropped (with everything below it) and a warning is
    logged; inconsistent input never raises.

    Args:
        comments: All comments of one story, in any order

    Returns:
        Root nodes with replies nested below them, in no particular order
    """
    nodes: dict[CommentId, CommentNode] = {}
    for comment in comments:
        nodes[comment.id] = CommentNode(comment=comment)

    roots: list[CommentNode] = []
    for node in nodes.values():
        parent_id = node.comment.parent_id
        if parent_id is None:
            roots.append(node)
            continue

        parent = nodes.get(parent_id)
        if parent is None:
            logfire.warn(
                "Comment with nonexistent parent dropped from tree",
                comment_id=node.comment.id,
                parent_id=parent_id,
                story_id=node.comment.story_id,
            )
            continue

        parent.children.append(node)

    return roots


def _node_rank(node: CommentNode) -> float:
    return comment_rank(node.comment)


def sort_comment_tree(roots: list[CommentNode]) -> None:
    """Order every sibling group of a tree by rank, best first.

    Sorts in place without recursing, so reply chains of any depth work.
    Ties keep their current relative order since ``list.sort`` is stable.

    Args:
        roots: Root nodes; every comment must have been fetched with its score

    Raises:
        FieldNotFetchedError: If any comment lacks its score
    """
    # A node's rank ignores its children, so the order of sorting is free
    for node in list(iter_comment_tree(roots)):
        node.children.sort(key=_node_rank)
    roots.sort(key=_node_rank)


def iter_comment_tree(roots: Sequence[CommentNode]) -> Iterator[CommentNode]:
    """Yield every node of a tree, parents before their children."""
    stack = list(reversed(roots))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def count_comment_tree(roots: Sequence[CommentNode]) -> int:
    """Count the nodes of a tree."""
    return sum(1 for _ in iter_comment_tree(roots))


def collect_unread_ids(
    roots: Sequence[CommentNode], same_user: bool
) -> list[CommentId]:
    """Collect the comments of a tree that still need a read marker.

    Args:
        roots: Root nodes of the tree
        same_user: Whether the tree was fetched with read state checked for
            the same user that is being marked. If so, only comments whose
            ``user_read`` is exactly False are collected; comments with no
            fetched read state are left alone. Otherwise every comment is
            collected.

    Returns:
        Comment IDs, parents before children
    """
    return [
        node.comment.id
        for node in iter_comment_tree(roots)
        if not same_user or node.comment.user_read is False
    ]
