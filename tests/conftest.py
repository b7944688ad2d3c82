"""Pytest configuration and shared fixtures for routegraph tests.

This module provides:
- A deterministic numpy RNG fixture
- The four-node reference graph used across the algorithm tests
- A factory for small random graphs used by brute-force checks
"""

import os
from typing import Callable

import numpy as np
import pytest

from routegraph import Graph, set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_mode():
    """Run every test with invariant checking switched on."""
    set_debug_enabled(True)
    yield
    set_debug_enabled(False)


@pytest.fixture
def abcd_graph() -> Graph:
    """A -> B (5), B -> C (8), C -> D (12), A -> D (15); payloads 10..40."""
    G = Graph()
    G.add_node("A", 10)
    G.add_node("B", 20)
    G.add_node("C", 30)
    G.add_node("D", 40)
    G.add_edge("A", "B", 5)
    G.add_edge("B", "C", 8)
    G.add_edge("C", "D", 12)
    G.add_edge("A", "D", 15)
    return G


@pytest.fixture
def random_graph(rng: np.random.Generator) -> Callable[..., Graph]:
    """Factory building a random directed graph on integer keys 0..n-1."""

    def build(n: int = 6, density: float = 0.4, max_weight: int = 10) -> Graph:
        G = Graph()
        for node in range(n):
            G.add_node(node, f"payload-{node}")
        for u in range(n):
            for v in range(n):
                if u != v and rng.random() < density:
                    G.add_edge(u, v, int(rng.integers(0, max_weight + 1)))
        return G

    return build
