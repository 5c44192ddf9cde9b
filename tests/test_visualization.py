from __future__ import annotations

import networkx as nx

from bst_toolkit.binary_search_tree import BinarySearchTree
from bst_toolkit.visualization import build_networkx_graph, tree_layout


def test_build_networkx_graph_mirrors_tree_edges() -> None:
    tree = BinarySearchTree([50, 30, 70, 20])
    graph = build_networkx_graph(tree)

    assert isinstance(graph, nx.DiGraph)
    assert set(graph.nodes) == {20, 30, 50, 70}
    assert graph.number_of_edges() == 3
    assert graph.edges[50, 30]["side"] == "left"
    assert graph.edges[50, 70]["side"] == "right"
    assert graph.edges[30, 20]["side"] == "left"
    assert nx.is_arborescence(graph)


def test_build_networkx_graph_empty_tree() -> None:
    graph = build_networkx_graph(BinarySearchTree())
    assert graph.number_of_nodes() == 0


def test_tree_layout_uses_inorder_rank_and_depth() -> None:
    tree = BinarySearchTree([50, 30, 70, 20])
    assert tree_layout(tree) == {
        20: (0.0, -2.0),
        30: (1.0, -1.0),
        50: (2.0, 0.0),
        70: (3.0, -1.0),
    }
    assert tree_layout(BinarySearchTree()) == {}


def test_export_handles_long_chains() -> None:
    tree = BinarySearchTree(range(3000))
    graph = build_networkx_graph(tree)
    assert graph.number_of_edges() == 2999
    assert nx.dag_longest_path_length(graph) == tree.get_height()
    layout = tree_layout(tree)
    assert layout[2999] == (2999.0, -2999.0)
