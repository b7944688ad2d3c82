"""Exception hierarchy for routegraph.

All errors raised by the library derive from :class:`GraphError`. The
concrete errors also inherit from the closest built-in exception so callers
that already catch ``KeyError``/``ValueError``/``IndexError`` keep working.
"""

from __future__ import annotations

from typing import Any, Hashable, Optional


class GraphError(Exception):
    """Base class for all routegraph errors."""


class UnknownNodeError(GraphError, KeyError):
    """An operation referenced a node key that is not in the graph."""

    def __init__(self, key: Hashable, message: Optional[str] = None):
        self.key = key
        super().__init__(message or f"Node {key!r} not in graph")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0])


class InvalidWeightError(GraphError, ValueError):
    """Edge weight is negative, non-finite or not a real number."""

    def __init__(self, weight: Any, message: Optional[str] = None):
        self.weight = weight
        super().__init__(
            message
            or f"Edge weight must be a non-negative finite number, got {weight!r}"
        )


class NoPathFoundError(GraphError):
    """No directed path connects the requested start and end nodes."""

    def __init__(self, start: Hashable, end: Hashable):
        self.start = start
        self.end = end
        super().__init__(f"No path found from {start!r} to {end!r}")


class EmptyQueueError(GraphError, IndexError):
    """Extraction from an empty priority queue.

    Unreachable through the public algorithms; seeing it means the queue was
    misused directly.
    """

    def __init__(self, message: str = "extract from an empty priority queue"):
        super().__init__(message)


__all__ = [
    "GraphError",
    "UnknownNodeError",
    "InvalidWeightError",
    "NoPathFoundError",
    "EmptyQueueError",
]
