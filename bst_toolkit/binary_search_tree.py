"""Integer binary search tree engine.

The module exposes the node type and the tree used by the demo front-end in
``bst_demo.py`` together with the single domain error raised by the engine.

* ``TreeNode`` – a ``@dataclass`` holding one integer and two optional
  children, with classification helpers for the deletion cases.
* ``BinarySearchTree`` – insert, search and delete by iterative descent, with
  deletion relinking the parent slot to the subtree root returned by
  ``_detach``, plus min/max lookups, size/height statistics and lazy
  inorder/preorder/postorder traversals.
* ``EmptyTreeError`` – raised by ``find_min``/``find_max`` when the tree has no
  nodes.

Duplicate insertions, deleting an absent value and search misses are ordinary
outcomes and never raise.  No operation recurses: traversals and statistics
keep an explicit stack, so strictly sorted insertion orders only cost time
(a chain of depth ``n``), never interpreter stack.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

__all__ = [
    "BinarySearchTree",
    "EmptyTreeError",
    "TreeNode",
]


class EmptyTreeError(LookupError):
    """Raised when a min/max lookup is attempted on an empty tree."""


def _require_int(value: object, *, name: str = "value") -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer")
    return value


@dataclass(slots=True)
class TreeNode:
    """Single tree node owning its left and right subtrees."""

    value: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def __post_init__(self) -> None:
        _require_int(self.value, name="TreeNode value")

    def is_leaf(self) -> bool:
        """Return ``True`` when the node has no children."""

        return self.left is None and self.right is None

    def has_one_child(self) -> bool:
        """Return ``True`` when exactly one child slot is occupied."""

        return (self.left is None) != (self.right is None)

    def has_two_children(self) -> bool:
        return self.left is not None and self.right is not None

    def __repr__(self) -> str:
        return f"TreeNode(value={self.value})"


class BinarySearchTree:
    """Unbalanced binary search tree over distinct integers."""

    __slots__ = ("root",)

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        self.root: Optional[TreeNode] = None
        if values is not None:
            for value in values:
                self.insert(value)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def insert(self, value: int) -> None:
        """Insert *value* as a new leaf.

        Inserting a value that is already present leaves the tree untouched.
        """

        value = _require_int(value)
        if self.root is None:
            self.root = TreeNode(value)
            logger.debug("Inserted %d as root", value)
            return

        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = TreeNode(value)
                    break
                node = node.right
            else:
                logger.debug("Ignored duplicate %d", value)
                return
        logger.debug("Inserted %d under %d", value, node.value)

    def delete(self, value: int) -> None:
        """Remove *value* from the tree; absent values are ignored."""

        value = _require_int(value)
        parent: Optional[TreeNode] = None
        node = self.root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return

        replacement = self._detach(node)
        if parent is None:
            self.root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement

    def _detach(self, node: TreeNode) -> Optional[TreeNode]:
        """Remove *node*'s value and return the root of what remains of its subtree."""

        if node.is_leaf():
            logger.debug("Deleted leaf %d", node.value)
            return None
        if node.left is None:
            logger.debug("Deleted %d, spliced right child", node.value)
            return node.right
        if node.right is None:
            logger.debug("Deleted %d, spliced left child", node.value)
            return node.left

        # The successor has no left child, so unlinking it is a leaf removal
        # or a single-child splice.
        successor_parent = node
        successor = node.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        logger.debug("Deleted %d, replaced by successor %d", node.value, successor.value)
        node.value = successor.value
        if successor_parent is node:
            successor_parent.right = successor.right
        else:
            successor_parent.left = successor.right
        return node

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def search(self, value: int) -> bool:
        """Return ``True`` if *value* is stored in the tree."""

        value = _require_int(value)
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def find_min(self) -> int:
        """Return the smallest stored value.

        Raises
        ------
        EmptyTreeError
            If the tree has no nodes.
        """

        if self.root is None:
            raise EmptyTreeError("Tree is empty")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.value

    def find_max(self) -> int:
        """Return the largest stored value, raising ``EmptyTreeError`` when empty."""

        if self.root is None:
            raise EmptyTreeError("Tree is empty")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.value

    def is_empty(self) -> bool:
        return self.root is None

    def get_size(self) -> int:
        """Count the nodes in the tree."""

        return sum(1 for _ in self.preorder())

    def get_height(self) -> int:
        """Return the number of edges on the longest root-to-leaf path.

        An empty tree has height ``-1`` and a single node has height ``0``.
        """

        height = -1
        stack: List[Tuple[TreeNode, int]] = [(self.root, 0)] if self.root is not None else []
        while stack:
            node, depth = stack.pop()
            height = max(height, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return height

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------
    def inorder(self) -> Iterator[int]:
        """Yield stored values in ascending order."""

        stack: List[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def preorder(self) -> Iterator[int]:
        """Yield each node before its left and right subtrees."""

        stack: List[TreeNode] = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def postorder(self) -> Iterator[int]:
        """Yield both subtrees before the node itself."""

        # Each node is pushed twice: once to expand its children, once to emit.
        stack: List[Tuple[TreeNode, bool]] = (
            [(self.root, False)] if self.root is not None else []
        )
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.value
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self.get_size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        return self.search(value)

    def __iter__(self) -> Iterator[int]:
        return self.inorder()

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self.inorder())})"
