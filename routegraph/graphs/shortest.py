"""
Shortest path algorithms: Dijkstra over an indexed decrease-key heap.

Edge weights are validated as non-negative when inserted, so the greedy
finalization of Dijkstra's algorithm holds for every Graph.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import math
from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional, Tuple

from ..exceptions import NoPathFoundError, UnknownNodeError
from ..logging import get_logger
from .core import Graph
from .heap import MinPriorityQueue
from .utils import reconstruct_path

logger = get_logger(__name__)


@dataclass(frozen=True)
class ShortestPathResult:
    """
    Outcome of a point-to-point shortest path query.

    Attributes:
        path: Node keys from start to end, inclusive.
        distance: Sum of edge weights along ``path``.
    """

    path: List[Hashable]
    distance: float


def _initial_queue(
    graph: Graph, source: Hashable
) -> Tuple[Dict[Hashable, float], Dict[Hashable, Optional[Hashable]], MinPriorityQueue]:
    dist: Dict[Hashable, float] = {}
    parent: Dict[Hashable, Optional[Hashable]] = {}
    queue = MinPriorityQueue()

    # Insertion order fixes the tie-break: earliest registered node first
    for node in graph.nodes():
        dist[node] = 0.0 if node == source else math.inf
        parent[node] = None
        queue.insert(dist[node], node)

    return dist, parent, queue


def _relax(
    graph: Graph,
    current: Hashable,
    dist: Dict[Hashable, float],
    parent: Dict[Hashable, Optional[Hashable]],
    queue: MinPriorityQueue,
) -> None:
    for v, weight in graph.neighbors(current):
        # Finalized nodes already hold their minimum distance
        if v not in queue:
            continue
        alt = dist[current] + weight
        if alt < dist[v]:
            dist[v] = alt
            parent[v] = current
            queue.decrease_key(v, alt)


def shortest_path(graph: Graph, start: Hashable, end: Hashable) -> ShortestPathResult:
    """
    Find the minimum-weight directed path from start to end.

    Every node is queued at +inf except start (0). Nodes are finalized in
    ascending distance order; the search stops as soon as end is extracted.

    Args:
        graph: Graph to search.
        start: Source node.
        end: Target node.

    Returns:
        ShortestPathResult with the node sequence and its total weight.
        For ``start == end`` the result is ``([start], 0.0)``.

    Raises:
        UnknownNodeError: If start or end is not in the graph.
        NoPathFoundError: If end is not reachable from start.

    Complexity: O((V + E) log V).

    Example:
        >>> G = Graph()
        >>> for key in "ABCD":
        ...     G.add_node(key)
        >>> G.add_edge("A", "B", 5)
        >>> G.add_edge("B", "C", 8)
        >>> G.add_edge("C", "D", 12)
        >>> G.add_edge("A", "D", 15)
        >>> shortest_path(G, "A", "D")
        ShortestPathResult(path=['A', 'D'], distance=15.0)
    """
    for key in (start, end):
        if key not in graph:
            raise UnknownNodeError(key)

    dist, parent, queue = _initial_queue(graph, start)

    while not queue.is_empty():
        current = queue.extract_min()

        # Everything left is unreachable from start
        if dist[current] == math.inf:
            break

        if current == end:
            path = reconstruct_path(parent, end)
            logger.debug(
                "Shortest path %r -> %r: %r (distance %r)",
                start,
                end,
                path,
                dist[end],
            )
            return ShortestPathResult(path=path, distance=dist[end])

        _relax(graph, current, dist, parent, queue)

    logger.debug("No path from %r to %r", start, end)
    raise NoPathFoundError(start, end)


def dijkstra(
    graph: Graph, source: Hashable
) -> Tuple[Dict[Hashable, float], Dict[Hashable, Optional[Hashable]]]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Computes shortest distances from source to every node of the graph.

    Args:
        graph: Graph to search.
        source: Source node.

    Returns:
        Tuple of:
        - dist: Dictionary mapping node -> shortest distance from source (float or inf)
        - parent: Dictionary mapping node -> previous node on shortest path
          (None for the source and for unreachable nodes)

    Raises:
        UnknownNodeError: If source is not in the graph.

    Complexity: O((V + E) log V).

    Example:
        >>> dist, parent = dijkstra(G, "A")
        >>> reconstruct_path(parent, "C")
        ['A', 'B', 'C']
    """
    if source not in graph:
        raise UnknownNodeError(source)

    dist, parent, queue = _initial_queue(graph, source)

    while not queue.is_empty():
        current = queue.extract_min()
        if dist[current] == math.inf:
            break
        _relax(graph, current, dist, parent, queue)

    return dist, parent
