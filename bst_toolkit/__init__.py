"""Integer binary search tree toolkit."""

from .binary_search_tree import BinarySearchTree, EmptyTreeError, TreeNode
from .rendering import describe_tree, format_traversals, level_order, render_tree
from .visualization import build_networkx_graph, tree_layout

__all__ = [
    "BinarySearchTree",
    "EmptyTreeError",
    "TreeNode",
    "build_networkx_graph",
    "describe_tree",
    "format_traversals",
    "level_order",
    "render_tree",
    "tree_layout",
]
