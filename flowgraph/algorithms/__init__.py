"""Graph algorithms: breadth-first folds, shortest paths and maximum flow."""

from flowgraph.algorithms.max_flow import (
    ResidualGraph,
    ford_fulkerson,
    split_vertex_capacities,
)
from flowgraph.algorithms.search import (
    bfs_fold,
    bfs_path,
    bfs_path_exists,
    bfs_print,
    build_bfs_preds,
)
from flowgraph.algorithms.spf import dijkstra, shortest_paths
from flowgraph.algorithms.types import EdgeKey, FlowSummary

__all__ = [
    "EdgeKey",
    "FlowSummary",
    "ResidualGraph",
    "bfs_fold",
    "bfs_path",
    "bfs_path_exists",
    "bfs_print",
    "build_bfs_preds",
    "dijkstra",
    "ford_fulkerson",
    "shortest_paths",
    "split_vertex_capacities",
]
