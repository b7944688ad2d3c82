"""Benchmark shortest path queries on random sparse graphs."""

import time
from typing import Dict

import numpy as np

from routegraph import Graph, connected_nodes, shortest_path


def random_sparse_graph(n_nodes: int, out_degree: int, seed: int = 0) -> Graph:
    """Build a directed graph with ``out_degree`` random edges per node.

    A chain 0 -> 1 -> ... -> n-1 is always present so every query has a path.
    """
    rng = np.random.default_rng(seed)
    G = Graph()
    for node in range(n_nodes):
        G.add_node(node)
    for node in range(n_nodes - 1):
        G.add_edge(node, node + 1, float(rng.uniform(1.0, 10.0)))
    for node in range(n_nodes):
        targets = rng.integers(0, n_nodes, size=out_degree)
        weights = rng.uniform(0.0, 10.0, size=out_degree)
        for target, weight in zip(targets, weights):
            G.add_edge(node, int(target), float(weight))
    return G


def benchmark_shortest_path(
    n_nodes: int,
    out_degree: int = 4,
    n_queries: int = 20,
) -> Dict[str, float]:
    """Benchmark point-to-point shortest path queries.

    Args:
        n_nodes: Number of nodes.
        out_degree: Random outgoing edges per node.
        n_queries: Number of (start, end) queries.

    Returns:
        Dictionary with timing results.
    """
    G = random_sparse_graph(n_nodes, out_degree)
    rng = np.random.default_rng(1)
    starts = rng.integers(0, n_nodes // 2, size=n_queries)
    ends = rng.integers(n_nodes // 2, n_nodes, size=n_queries)

    # Warmup
    shortest_path(G, 0, n_nodes - 1)

    start = time.perf_counter()
    for s, e in zip(starts, ends):
        shortest_path(G, int(s), int(e))
    end = time.perf_counter()

    total_time = end - start
    return {
        "n_nodes": n_nodes,
        "n_edges": G.number_of_edges(),
        "total_time_sec": total_time,
        "time_per_query_sec": total_time / n_queries,
    }


def benchmark_reachability(n_nodes: int, out_degree: int = 4) -> Dict[str, float]:
    """Benchmark a full reachability sweep from node 0."""
    G = random_sparse_graph(n_nodes, out_degree)

    start = time.perf_counter()
    reached = connected_nodes(G, 0)
    end = time.perf_counter()

    return {
        "n_nodes": n_nodes,
        "n_reached": len(reached),
        "total_time_sec": end - start,
    }


if __name__ == "__main__":
    print("Benchmarking shortest_path...")
    for n in (1_000, 10_000):
        results = benchmark_shortest_path(n_nodes=n)
        print(f"shortest_path ({n} nodes, {results['n_edges']} edges):")
        print(f"  Time per query: {results['time_per_query_sec']*1e3:.2f} ms")

    results = benchmark_reachability(n_nodes=10_000)
    print(f"connected_nodes (10000 nodes): {results['total_time_sec']*1e3:.2f} ms")
