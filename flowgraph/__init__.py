"""flowgraph: generic graph algorithms over pluggable graph storage.

flowgraph provides a small graph contract with adjacency-list and
adjacency-matrix backends, and classical algorithms written against that
contract only.

Primary API:
    AdjacencyListGraph, AdjacencyMatrixGraph - graph backends
    Edge, Vertex - data model
    bfs_fold() and friends - breadth-first folds
    dijkstra() - single-source shortest paths
    ford_fulkerson() - maximum flow with vertex capacities
    MinHeap, MaxHeap - binary heaps

Example:
    from flowgraph import AdjacencyListGraph, Edge, dijkstra

    g = AdjacencyListGraph(is_directed=False)
    g.add_edge(Edge(1, 2, 1.0))
    g.add_edge(Edge(2, 3, 1.0))
    dist = dijkstra(g, 1)  # {1: 0.0, 2: 1.0, 3: 2.0}
"""

from __future__ import annotations

from flowgraph import logging
from flowgraph._version import __version__
from flowgraph.algorithms import (
    FlowSummary,
    ResidualGraph,
    bfs_fold,
    bfs_path,
    bfs_path_exists,
    bfs_print,
    build_bfs_preds,
    dijkstra,
    ford_fulkerson,
    shortest_paths,
    split_vertex_capacities,
)
from flowgraph.datastructures import MaxHeap, MinHeap
from flowgraph.graph import (
    AdjacencyListGraph,
    AdjacencyMatrixGraph,
    Edge,
    Graph,
    GraphBase,
    Vertex,
)
from flowgraph.graph.convert import from_networkx, to_networkx
from flowgraph.measure import Measure, measure_for, register_measure

__all__ = [
    # Version
    "__version__",
    # Graphs
    "Graph",
    "GraphBase",
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "Edge",
    "Vertex",
    # Measures
    "Measure",
    "measure_for",
    "register_measure",
    # Data structures
    "MaxHeap",
    "MinHeap",
    # Algorithms
    "bfs_fold",
    "bfs_path",
    "bfs_path_exists",
    "bfs_print",
    "build_bfs_preds",
    "dijkstra",
    "shortest_paths",
    "ford_fulkerson",
    "split_vertex_capacities",
    "ResidualGraph",
    "FlowSummary",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
