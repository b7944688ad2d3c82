"""
Utility functions for graph algorithms.

Provides helpers for path reconstruction, node indexing and dense matrix
export.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Tuple

import numpy as np

from ..exceptions import UnknownNodeError
from .core import Graph


def reconstruct_path(
    parent: Dict[Hashable, Optional[Hashable]], target: Hashable
) -> Optional[List[Hashable]]:
    """
    Reconstruct path from source to target using parent map.

    The parent map should come from a shortest-path algorithm where
    parent[node] is the previous node on the shortest path, or None if the
    node is the source or unreachable.

    Args:
        parent: Dictionary mapping node -> parent node (or None).
        target: Target node to reconstruct path to.

    Returns:
        List of nodes from source to target (inclusive), ``[target]`` when
        target has no parent, or None if target is absent from the map or
        the parent links form a cycle.

    Example:
        >>> parent = {'A': None, 'B': 'A', 'C': 'B'}
        >>> reconstruct_path(parent, 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path(parent, 'D') is None
        True
    """
    if target not in parent:
        return None

    path = [target]
    seen = {target}
    current = parent[target]
    # Membership test instead of truthiness: keys like 0 or "" are valid
    while current is not None:
        if current in seen:
            return None
        seen.add(current)
        path.append(current)
        current = parent.get(current)

    path.reverse()
    return path


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create a mapping from nodes to indices 0..n-1.

    The given iteration order is kept (first occurrence wins on
    duplicates), so passing ``graph.nodes()`` yields registry order.

    Args:
        nodes: Iterable of hashable nodes.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'c', 'b'])
        >>> node_to_idx
        {'c': 0, 'a': 1, 'b': 2}
    """
    ordered = list(dict.fromkeys(nodes))
    return {node: idx for idx, node in enumerate(ordered)}, ordered


def adjacency_matrix(graph: Graph, nodes: Optional[Iterable[Hashable]] = None) -> np.ndarray:
    """
    Dense weight matrix of a graph.

    ``W[i, j]`` is the weight of edge ``nodes[i] -> nodes[j]``, ``np.inf``
    where there is no edge and 0 on the diagonal unless a self-loop sets it.

    Args:
        graph: Graph instance.
        nodes: Optional node subset/order (defaults to ``graph.nodes()``).

    Returns:
        (n, n) float64 array in node index order.

    Raises:
        UnknownNodeError: If a requested node is not in the graph.

    Example:
        >>> W = adjacency_matrix(G)
        >>> W.shape
        (4, 4)
    """
    if nodes is None:
        nodes = graph.nodes()
    node_to_idx, idx_to_node = node_index_map(nodes)
    for node in idx_to_node:
        if node not in graph:
            raise UnknownNodeError(node)

    n = len(idx_to_node)
    W = np.full((n, n), np.inf, dtype=np.float64)
    np.fill_diagonal(W, 0.0)

    for u in idx_to_node:
        i = node_to_idx[u]
        for v, weight in graph.neighbors(u):
            j = node_to_idx.get(v)
            if j is not None:
                W[i, j] = weight

    return W
