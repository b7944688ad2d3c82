"""
Graph package for routegraph.

Provides:
- Directed, weighted Graph with node payloads (Graph, Edge)
- Indexed binary min-heap with decrease-key (MinPriorityQueue)
- Shortest paths (shortest_path, dijkstra)
- Forward reachability (connected_nodes)
- Helpers (reconstruct_path, node_index_map, adjacency_matrix)

Node and neighbor iteration follow insertion order, and equal heap keys are
extracted earliest-inserted-first, so results are reproducible.
"""

from .core import Edge, Graph
from .heap import MinPriorityQueue
from .shortest import ShortestPathResult, dijkstra, shortest_path
from .traversal import connected_nodes
from .utils import adjacency_matrix, node_index_map, reconstruct_path

__all__ = [
    "Edge",
    "Graph",
    "MinPriorityQueue",
    "ShortestPathResult",
    "shortest_path",
    "dijkstra",
    "connected_nodes",
    "reconstruct_path",
    "node_index_map",
    "adjacency_matrix",
]

# Example usage:
# from routegraph.graphs import Graph, shortest_path
#
# G = Graph()
# for key in ("A", "B", "C"):
#     G.add_node(key)
# G.add_edge("A", "B", 1.0)
# G.add_edge("B", "C", 2.0)
# shortest_path(G, "A", "C").path  # ['A', 'B', 'C']
