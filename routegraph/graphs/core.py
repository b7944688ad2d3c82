"""
Core graph data structures.

Provides the directed, weighted Graph with a node registry (key -> payload)
and an adjacency index (source -> {target -> Edge}). The adjacency index is
the single source of truth for edge existence and never references a node
that is missing from the registry.
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Hashable, List, Tuple

from ..diagnostics import assert_adjacency_consistent, is_debug_enabled
from ..exceptions import InvalidWeightError, UnknownNodeError
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Edge:
    """Directed edge ``source -> target`` with a non-negative weight."""

    source: Hashable
    target: Hashable
    weight: float


def _validate_weight(weight: Any) -> None:
    # bool is a Real subclass but never a meaningful weight
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidWeightError(weight)
    if not math.isfinite(weight) or weight < 0:
        raise InvalidWeightError(weight)


class Graph:
    """
    Directed, weighted graph with per-node payloads.

    Nodes are identified by caller-supplied hashable keys. At most one edge
    exists per ordered (source, target) pair; adding it again overwrites the
    weight. Nodes and edges are never created implicitly.

    Nodes are listed in insertion order and neighbors in edge insertion
    order, which keeps algorithm results reproducible.

    Attributes:
        node_data: Node registry mapping key -> payload.
        adj: Adjacency index mapping source -> {target -> Edge}.

    Complexity:
        - add_node, add_edge, remove_edge: O(1) amortized
        - remove_node: O(V) to scrub incoming edges
        - neighbors: O(deg(v))

    Example:
        >>> G = Graph()
        >>> G.add_node("A", 10)
        >>> G.add_node("B", 20)
        >>> G.add_edge("A", "B", 5)
        >>> G.neighbors("A")
        [('B', 5)]
    """

    def __init__(self) -> None:
        self.node_data: Dict[Hashable, Any] = {}
        self.adj: Dict[Hashable, Dict[Hashable, Edge]] = {}

    def __contains__(self, key: Hashable) -> bool:
        return key in self.node_data

    def __len__(self) -> int:
        return len(self.node_data)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, edges={self.number_of_edges()})"

    def add_node(self, key: Hashable, value: Any = None) -> None:
        """
        Add a node with an optional payload.

        Adding a key that already exists is a no-op; the stored payload is
        kept.

        Args:
            key: Hashable node identifier.
            value: Arbitrary payload stored with the node.
        """
        if key in self.node_data:
            return
        self.node_data[key] = value
        self.adj[key] = {}
        logger.debug("Added node %r", key)

    def remove_node(self, key: Hashable) -> None:
        """
        Remove a node and every edge it participates in.

        Both outgoing and incoming edges are deleted. Removing a missing key
        is a no-op.

        Args:
            key: Node to remove.
        """
        if key not in self.node_data:
            return

        outgoing = self.adj.pop(key)
        incoming = 0
        for targets in self.adj.values():
            if targets.pop(key, None) is not None:
                incoming += 1
        del self.node_data[key]

        logger.debug(
            "Removed node %r with %d outgoing and %d incoming edges",
            key,
            len(outgoing),
            incoming,
        )
        if is_debug_enabled():
            assert_adjacency_consistent(self)

    def add_edge(self, source: Hashable, target: Hashable, weight: float) -> None:
        """
        Add or overwrite the directed edge ``source -> target``.

        Args:
            source: Existing source node.
            target: Existing target node.
            weight: Non-negative finite edge weight.

        Raises:
            UnknownNodeError: If either endpoint is not in the graph.
            InvalidWeightError: If the weight is negative, non-finite or not
                a real number.
        """
        for key in (source, target):
            if key not in self.node_data:
                raise UnknownNodeError(key)
        _validate_weight(weight)

        self.adj[source][target] = Edge(source, target, weight)
        logger.debug("Set edge %r -> %r (weight %r)", source, target, weight)

    def remove_edge(self, source: Hashable, target: Hashable) -> None:
        """
        Remove the directed edge ``source -> target``.

        A no-op when either endpoint or the edge itself is absent. The
        reverse edge, if any, is left untouched.
        """
        if source not in self.node_data or target not in self.node_data:
            return
        if self.adj[source].pop(target, None) is not None:
            logger.debug("Removed edge %r -> %r", source, target)

    def neighbors(self, key: Hashable) -> List[Tuple[Hashable, float]]:
        """
        Return the outgoing neighbors of a node with edge weights.

        Args:
            key: Node to get neighbors for.

        Returns:
            List of (target, weight) tuples in edge insertion order; empty if
            the node has no outgoing edges.

        Raises:
            UnknownNodeError: If the node is not in the graph.
        """
        if key not in self.node_data:
            raise UnknownNodeError(key)
        return [(target, edge.weight) for target, edge in self.adj[key].items()]

    def predecessors(self, key: Hashable) -> List[Hashable]:
        """
        Return the nodes with an edge into ``key``.

        Raises:
            UnknownNodeError: If the node is not in the graph.
        """
        if key not in self.node_data:
            raise UnknownNodeError(key)
        return [source for source, targets in self.adj.items() if key in targets]

    def has_node(self, key: Hashable) -> bool:
        return key in self.node_data

    def has_edge(self, source: Hashable, target: Hashable) -> bool:
        return target in self.adj.get(source, {})

    def value(self, key: Hashable) -> Any:
        """
        Return the payload stored with a node.

        Raises:
            UnknownNodeError: If the node is not in the graph.
        """
        if key not in self.node_data:
            raise UnknownNodeError(key)
        return self.node_data[key]

    def weight(self, source: Hashable, target: Hashable) -> float:
        """
        Return the weight of edge ``source -> target``.

        Raises:
            UnknownNodeError: If either endpoint is not in the graph.
            KeyError: If both nodes exist but the edge does not.
        """
        for key in (source, target):
            if key not in self.node_data:
                raise UnknownNodeError(key)
        try:
            return self.adj[source][target].weight
        except KeyError:
            raise KeyError(f"No edge {source!r} -> {target!r}") from None

    def nodes(self) -> List[Hashable]:
        """Return all node keys in insertion order."""
        return list(self.node_data)

    def edges(self) -> List[Edge]:
        """Return all edges, grouped by source in node insertion order."""
        return [edge for targets in self.adj.values() for edge in targets.values()]

    def number_of_edges(self) -> int:
        return sum(len(targets) for targets in self.adj.values())

    def shortest_path(self, start: Hashable, end: Hashable):
        """Shortest path from ``start`` to ``end``; see :func:`shortest_path`."""
        from .shortest import shortest_path

        return shortest_path(self, start, end)

    def connected_nodes(self, start: Hashable) -> List[Hashable]:
        """Nodes reachable from ``start``; see :func:`connected_nodes`."""
        from .traversal import connected_nodes

        return connected_nodes(self, start)
