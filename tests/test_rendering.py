from __future__ import annotations

import pytest

from bst_toolkit.binary_search_tree import BinarySearchTree, TreeNode
from bst_toolkit.rendering import (
    describe_tree,
    format_traversals,
    level_order,
    render_tree,
)


def test_render_tree_balanced_sample() -> None:
    tree = BinarySearchTree([50, 30, 70, 20, 40, 60, 80])
    assert render_tree(tree) == "\n".join(["50", "30 70", "20 40 60 80"])


def test_render_tree_marks_missing_children() -> None:
    tree = BinarySearchTree([2, 1, 4, 3])
    assert render_tree(tree) == "\n".join(["2", "1 4", "· · 3 ·"])


def test_render_tree_accepts_bare_nodes() -> None:
    root = TreeNode(1, right=TreeNode(2))
    assert render_tree(root) == "\n".join(["1", "· 2"])


def test_render_tree_empty_tree() -> None:
    assert render_tree(BinarySearchTree()) == "<empty>"
    assert render_tree(None) == "<empty>"


def test_level_order_trims_trailing_sentinels() -> None:
    tree = BinarySearchTree([10, 5, 15, 12])
    assert level_order(tree) == [10, 5, 15, None, None, 12]
    assert level_order(BinarySearchTree()) == []


def test_format_traversals_lines() -> None:
    tree = BinarySearchTree([50, 30, 70])
    assert format_traversals(tree) == [
        "Inorder traversal: 30 50 70",
        "Preorder traversal: 50 30 70",
        "Postorder traversal: 30 70 50",
    ]


def test_describe_tree_non_empty() -> None:
    tree = BinarySearchTree([50, 30, 70])
    assert describe_tree(tree) == [
        "Size: 3 nodes",
        "Height: 1",
        "Empty: No",
        "Minimum: 30",
        "Maximum: 70",
        "Current values (sorted): 30 50 70",
        "Level order: 50 30 70",
    ]


def test_describe_tree_empty_does_not_raise() -> None:
    assert describe_tree(BinarySearchTree()) == [
        "Size: 0 nodes",
        "Height: -1",
        "Empty: Yes",
    ]


def test_render_tree_truncates_deep_trees() -> None:
    tree = BinarySearchTree(range(1000))
    rows = render_tree(tree, max_levels=3).splitlines()
    assert rows == ["0", "· 1", "· · · 2", "..."]


def test_render_tree_default_cap_keeps_shallow_trees_whole() -> None:
    tree = BinarySearchTree([25, 15, 35, 10, 20, 30, 40, 5, 12, 18, 22])
    assert "..." not in render_tree(tree)
    assert render_tree(tree).splitlines()[-1].startswith("5 12 18 22")


def test_render_tree_rejects_non_positive_level_cap() -> None:
    with pytest.raises(ValueError):
        render_tree(BinarySearchTree([1]), max_levels=0)


def test_level_order_of_long_chain_stays_linear() -> None:
    tree = BinarySearchTree(range(2000))
    listing = level_order(tree)
    assert len(listing) == 2 * 2000 - 1
    assert [value for value in listing if value is not None] == list(range(2000))


def test_describe_tree_level_order_marks_missing_children() -> None:
    lines = describe_tree(BinarySearchTree([10, 5, 15, 12]))
    assert lines[-1] == "Level order: 10 5 15 · · 12"
