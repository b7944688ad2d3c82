"""routegraph - directed weighted graphs with Dijkstra shortest paths."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_adjacency_consistent,
    assert_heap_ordered,
    dangling_edges,
    debug_context,
    is_debug_enabled,
    is_heap_ordered,
    set_debug_enabled,
)

# Errors
from .exceptions import (
    EmptyQueueError,
    GraphError,
    InvalidWeightError,
    NoPathFoundError,
    UnknownNodeError,
)

# Graphs
from .graphs import (
    Edge,
    Graph,
    MinPriorityQueue,
    ShortestPathResult,
    adjacency_matrix,
    connected_nodes,
    dijkstra,
    node_index_map,
    reconstruct_path,
    shortest_path,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graphs
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
    # Errors
    "GraphError",
    "UnknownNodeError",
    "InvalidWeightError",
    "NoPathFoundError",
    "EmptyQueueError",
    # Diagnostics
    "is_heap_ordered",
    "assert_heap_ordered",
    "dangling_edges",
    "assert_adjacency_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
