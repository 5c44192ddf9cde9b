"""NetworkX export helpers for binary search trees.

``build_networkx_graph`` converts a tree into an ``nx.DiGraph`` whose edges
point from parent to child and carry a ``side`` attribute, and ``tree_layout``
computes hierarchical coordinates so callers can hand both straight to
``networkx.draw``.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import networkx as nx

from .binary_search_tree import BinarySearchTree, TreeNode

__all__ = [
    "build_networkx_graph",
    "tree_layout",
]


def build_networkx_graph(tree: BinarySearchTree) -> nx.DiGraph:
    """Convert *tree* to a NetworkX ``DiGraph``.

    Nodes are the stored integers; every edge is annotated with
    ``side="left"`` or ``side="right"``.
    """

    graph = nx.DiGraph()
    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = stack.pop()
        graph.add_node(node.value)
        for side, child in (("left", node.left), ("right", node.right)):
            if child is None:
                continue
            graph.add_edge(node.value, child.value, side=side)
            stack.append(child)
    return graph


def tree_layout(tree: BinarySearchTree) -> Dict[int, Tuple[float, float]]:
    """Return ``{value: (x, y)}`` with x the inorder rank and y the negated depth."""

    positions: Dict[int, Tuple[float, float]] = {}
    stack: List[Tuple[TreeNode, int]] = []
    node = tree.root
    depth = 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node = node.left
            depth += 1
        current, depth = stack.pop()
        positions[current.value] = (float(len(positions)), float(-depth))
        node = current.right
        depth += 1
    return positions
