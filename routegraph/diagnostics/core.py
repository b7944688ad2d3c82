"""Invariant checks for priority queues and graphs.

These helpers operate on the public containers of
:class:`~routegraph.graphs.heap.MinPriorityQueue` (``heap``/``index``) and
:class:`~routegraph.graphs.core.Graph` (``node_data``/``adj``) without
importing them, so the graph modules can call back into diagnostics.
"""

from __future__ import annotations

from typing import Any, Hashable, List, Sequence, Tuple


def is_heap_ordered(entries: Sequence[Sequence[Any]]) -> bool:
    """
    Check the binary min-heap property over a list of heap entries.

    Parameters
    ----------
    entries:
        Heap array of ``(key, sequence, ...)`` tuples. Ordering uses the
        first two fields, so equal keys are ordered by sequence number.

    Returns
    -------
    bool
        True if every non-root entry compares >= its parent.
    """
    for i in range(1, len(entries)):
        parent = (i - 1) // 2
        if tuple(entries[i][:2]) < tuple(entries[parent][:2]):
            return False
    return True


def assert_heap_ordered(queue: Any) -> None:
    """
    Assert that a priority queue satisfies heap order and that its
    item-to-position index agrees with the heap array.

    Parameters
    ----------
    queue:
        Object exposing ``heap`` (list of ``(key, sequence, item)``) and
        ``index`` (dict of item -> position).

    Raises
    ------
    ValueError
        If the heap order is violated or the index is stale.
    """
    heap = queue.heap
    if not is_heap_ordered(heap):
        raise ValueError("Priority queue violates the min-heap property.")

    if len(queue.index) != len(heap):
        raise ValueError(
            f"Priority queue index tracks {len(queue.index)} items "
            f"but the heap holds {len(heap)}."
        )
    for position, entry in enumerate(heap):
        item = entry[2]
        if queue.index.get(item) != position:
            raise ValueError(
                f"Priority queue index for {item!r} is stale "
                f"(expected position {position})."
            )


def dangling_edges(graph: Any) -> List[Tuple[Hashable, Hashable]]:
    """
    List edges in the adjacency index that reference a missing node.

    Parameters
    ----------
    graph:
        Object exposing ``node_data`` (node registry) and ``adj``
        (source -> {target -> edge}).

    Returns
    -------
    list of (source, target)
        Offending ordered pairs; empty when the index is consistent.
    """
    nodes = graph.node_data
    dangling = []
    for source, targets in graph.adj.items():
        for target in targets:
            if source not in nodes or target not in nodes:
                dangling.append((source, target))
    return dangling


def assert_adjacency_consistent(graph: Any) -> None:
    """
    Assert that no edge of the graph references a node outside its registry.

    Raises
    ------
    ValueError
        If dangling edges are found.
    """
    dangling = dangling_edges(graph)
    if dangling:
        raise ValueError(f"Adjacency index references removed nodes: {dangling}")

    stray = [source for source in graph.adj if source not in graph.node_data]
    if stray:
        raise ValueError(f"Adjacency index keeps entries for removed nodes: {stray}")
