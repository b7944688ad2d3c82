"""Integration tests for the graphs package within routegraph."""

import pytest


def test_graphs_import_from_main():
    """Test that graph API can be imported from main routegraph package."""
    from routegraph import Graph, MinPriorityQueue, connected_nodes, shortest_path

    assert Graph is not None
    assert MinPriorityQueue is not None
    assert shortest_path is not None
    assert connected_nodes is not None


def test_graphs_in_all_exports():
    """Test that graph exports are in __all__."""
    import routegraph

    graph_exports = {
        "Edge", "Graph", "MinPriorityQueue", "ShortestPathResult",
        "shortest_path", "dijkstra", "connected_nodes",
        "reconstruct_path", "node_index_map", "adjacency_matrix",
    }
    error_exports = {
        "GraphError", "UnknownNodeError", "InvalidWeightError",
        "NoPathFoundError", "EmptyQueueError",
    }

    all_exports = set(routegraph.__all__)
    assert graph_exports.issubset(all_exports), "Graph exports missing from __all__"
    assert error_exports.issubset(all_exports), "Error exports missing from __all__"


def test_all_errors_share_base():
    """Test every library error derives from GraphError."""
    from routegraph import (
        EmptyQueueError,
        GraphError,
        InvalidWeightError,
        NoPathFoundError,
        UnknownNodeError,
    )

    for exc in (EmptyQueueError, InvalidWeightError, NoPathFoundError, UnknownNodeError):
        assert issubclass(exc, GraphError)


def test_reference_scenario():
    """Test the four-node walkthrough end to end."""
    from routegraph import Graph

    G = Graph()
    for key, value in [("A", 10), ("B", 20), ("C", 30), ("D", 40)]:
        G.add_node(key, value)
    G.add_edge("A", "B", 5)
    G.add_edge("B", "C", 8)
    G.add_edge("C", "D", 12)
    G.add_edge("A", "D", 15)

    result = G.shortest_path("A", "D")
    assert (result.path, result.distance) == (["A", "D"], 15)
    assert set(G.connected_nodes("A")) == {"A", "B", "C", "D"}

    G.remove_node("B")

    result = G.shortest_path("A", "D")
    assert (result.path, result.distance) == (["A", "D"], 15)
    assert set(G.connected_nodes("A")) == {"A", "D"}


def test_retry_after_mutation():
    """Test a failed query succeeds once the caller adds the missing edge."""
    from routegraph import Graph, GraphError

    G = Graph()
    G.add_node("A")
    G.add_node("B")

    with pytest.raises(GraphError):
        G.shortest_path("A", "B")

    G.add_edge("A", "B", 2)
    assert G.shortest_path("A", "B").path == ["A", "B"]
