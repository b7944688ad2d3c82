"""
Example: Route planning with routegraph

Builds a small directed road network, queries shortest routes and reachable
destinations, then closes a junction and queries again.
"""

import logging

from routegraph import (
    Graph,
    NoPathFoundError,
    adjacency_matrix,
    configure_logging,
    dijkstra,
)


def build_network() -> Graph:
    """Four junctions with payloads and one-way roads."""
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


def example_queries(G: Graph) -> None:
    print("=" * 60)
    print("Example 1: Shortest route and reachability")
    print("=" * 60)

    result = G.shortest_path("A", "D")
    print(f"Shortest route A -> D: {' -> '.join(result.path)} (distance {result.distance})")
    print(f"Reachable from A: {sorted(G.connected_nodes('A'))}")

    dist, _ = dijkstra(G, "A")
    print(f"All distances from A: {dist}")
    print("Weight matrix:")
    print(adjacency_matrix(G))
    print()


def example_closure(G: Graph) -> None:
    print("=" * 60)
    print("Example 2: Closing junction B")
    print("=" * 60)

    G.remove_node("B")
    result = G.shortest_path("A", "D")
    print(f"Shortest route A -> D: {' -> '.join(result.path)} (distance {result.distance})")
    print(f"Reachable from A: {sorted(G.connected_nodes('A'))}")

    try:
        G.shortest_path("A", "C")
    except NoPathFoundError as exc:
        print(f"A -> C: {exc}")
    print()


if __name__ == "__main__":
    configure_logging(level=logging.WARNING)
    network = build_network()
    example_queries(network)
    example_closure(network)
    print("Route planning demo complete")
