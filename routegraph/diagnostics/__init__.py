"""Diagnostics and debugging utilities for routegraph."""

from .core import (
    assert_adjacency_consistent,
    assert_heap_ordered,
    dangling_edges,
    is_heap_ordered,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_heap_ordered",
    "assert_heap_ordered",
    "dangling_edges",
    "assert_adjacency_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
