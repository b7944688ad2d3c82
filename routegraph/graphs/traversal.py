"""
Graph traversal: forward reachability by iterative depth-first search.

An explicit stack bounds traversal depth by heap memory instead of the
interpreter recursion limit.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.3 (DFS).
"""

from typing import Hashable, List, Set

from ..exceptions import UnknownNodeError
from ..logging import get_logger
from .core import Graph

logger = get_logger(__name__)


def connected_nodes(graph: Graph, start: Hashable) -> List[Hashable]:
    """
    Return every node reachable from start by following outgoing edges.

    Only forward reachability is reported; this is not an undirected
    connectivity check.

    Args:
        graph: Graph to traverse.
        start: Root node.

    Returns:
        List of reachable node keys (start included) in DFS visitation
        order. Callers should treat it as unordered.

    Raises:
        UnknownNodeError: If start is not in the graph.

    Complexity: O(V + E).

    Example:
        >>> G = Graph()
        >>> for key in "ABC":
        ...     G.add_node(key)
        >>> G.add_edge("A", "B", 1)
        >>> connected_nodes(G, "A")
        ['A', 'B']
    """
    if start not in graph:
        raise UnknownNodeError(start)

    order: List[Hashable] = []
    visited: Set[Hashable] = set()
    stack: List[Hashable] = [start]

    while stack:
        u = stack.pop()
        if u in visited:
            continue
        visited.add(u)
        order.append(u)

        # Push in reverse so neighbors are visited in edge order
        for v, _ in reversed(graph.neighbors(u)):
            if v not in visited:
                stack.append(v)

    logger.debug("%d nodes reachable from %r", len(order), start)
    return order
