"""Performance benchmarks for routegraph.

Microbenchmarks for shortest path queries and reachability sweeps on
random sparse graphs.
"""
