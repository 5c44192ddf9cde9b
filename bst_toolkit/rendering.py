"""Text rendering helpers for binary search trees.

``render_tree`` draws one row per tree level with missing children shown as
centred dots, which keeps the shape of skewed trees visible in terminal
output.  The padded rows double in width every level, so the picture is cut
off after ``max_levels`` rows.  The remaining helpers format the traversal and
statistics blocks printed by the demo front-end.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List, Optional, Union

from .binary_search_tree import BinarySearchTree, TreeNode

__all__ = [
    "describe_tree",
    "format_traversals",
    "level_order",
    "render_tree",
]

TreeLike = Union[BinarySearchTree, TreeNode, None]

PLACEHOLDER = "·"
DEFAULT_MAX_LEVELS = 6


def _root_of(tree: TreeLike) -> Optional[TreeNode]:
    if isinstance(tree, BinarySearchTree):
        return tree.root
    return tree


def _format_slot(value: Optional[int]) -> str:
    return PLACEHOLDER if value is None else str(value)


def render_tree(tree: TreeLike, *, max_levels: int = DEFAULT_MAX_LEVELS) -> str:
    """Render *tree* level-by-level, marking missing nodes with ``·``.

    Rows stop at the deepest real node, so the output never ends with a
    dot-only row.  Trees deeper than *max_levels* end with a ``...`` row.
    """

    if max_levels < 1:
        raise ValueError("max_levels must be positive")
    root = _root_of(tree)
    if root is None:
        return "<empty>"

    rows: List[str] = []
    level: List[Optional[TreeNode]] = [root]
    while any(node is not None for node in level):
        if len(rows) == max_levels:
            rows.append("...")
            break
        rows.append(" ".join(_format_slot(None if node is None else node.value) for node in level))
        level = [
            child
            for node in level
            for child in ((node.left, node.right) if node is not None else (None, None))
        ]
    return "\n".join(rows)


def level_order(tree: TreeLike) -> List[Optional[int]]:
    """Return breadth-first values with ``None`` for missing children.

    Only children of real nodes get a slot, and trailing ``None`` sentinels
    are trimmed, so the listing stays linear in the tree size.
    """

    root = _root_of(tree)
    result: List[Optional[int]] = []
    queue: Deque[Optional[TreeNode]] = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(None if node is None else node.value)
        if node is not None:
            queue.extend((node.left, node.right))
    while result and result[-1] is None:
        result.pop()
    return result


def _join(values: Iterable[Optional[int]]) -> str:
    return " ".join(_format_slot(value) for value in values)


def format_traversals(tree: BinarySearchTree) -> List[str]:
    """Return the inorder, preorder and postorder listings as display lines."""

    return [
        f"Inorder traversal: {_join(tree.inorder())}",
        f"Preorder traversal: {_join(tree.preorder())}",
        f"Postorder traversal: {_join(tree.postorder())}",
    ]


def describe_tree(tree: BinarySearchTree) -> List[str]:
    """Summarise size, height and extrema of *tree*.

    Min, max and the value listings are only included for non-empty trees so
    the helper never raises ``EmptyTreeError``.
    """

    lines = [
        f"Size: {tree.get_size()} nodes",
        f"Height: {tree.get_height()}",
        f"Empty: {'Yes' if tree.is_empty() else 'No'}",
    ]
    if not tree.is_empty():
        lines.extend(
            [
                f"Minimum: {tree.find_min()}",
                f"Maximum: {tree.find_max()}",
                f"Current values (sorted): {_join(tree.inorder())}",
                f"Level order: {_join(level_order(tree))}",
            ]
        )
    return lines
