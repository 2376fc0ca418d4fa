"""Unit tests for the CommentItem projection."""

from board.application.usecase.comment import CommentItem
from board.config import CommentSettings
from board.domain.service import assemble_comment_tree, sort_comment_tree
from tests.conftest import make_comment


def _chain(depth):
    return [make_comment(1)] + [
        make_comment(i, parent_id=i - 1) for i in range(2, depth + 1)
    ]


class TestFromNode:
    def test_keeps_sibling_order(self):
        roots = assemble_comment_tree(
            [
                make_comment(1),
                make_comment(2, parent_id=1),
                make_comment(3, parent_id=1, score=9),
            ]
        )
        sort_comment_tree(roots)

        item = CommentItem.from_node(roots[0])

        assert [child.short_url for child in item.children] == ["c3", "c2"]

    def test_long_reply_chain_is_projected(self):
        """Building the projection does not recurse per level."""
        depth = 5000
        [root] = assemble_comment_tree(_chain(depth))

        item = CommentItem.from_node(root)

        levels = 1
        while item.children:
            [item] = item.children
            levels += 1
        assert levels == depth

    def test_deepest_allowed_thread_serializes(self):
        depth = CommentSettings().max_depth
        [root] = assemble_comment_tree(_chain(depth))

        payload = CommentItem.from_node(root).model_dump_json()

        assert payload.count('"short_url"') == depth
