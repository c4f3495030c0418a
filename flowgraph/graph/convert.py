"""Graph conversion utilities between flowgraph graphs and NetworkX graphs.

Edge weights travel in an edge attribute (``weight`` by default) and vertex
payloads in a node attribute of the same name.
"""

from __future__ import annotations

from typing import Any, Dict, Type, Union

import networkx as nx

from flowgraph.graph.adjacency_list import AdjacencyListGraph
from flowgraph.graph.adjacency_matrix import AdjacencyMatrixGraph
from flowgraph.graph.base import Edge, Graph

_BACKENDS: Dict[str, Type[Graph]] = {
    "list": AdjacencyListGraph,
    "matrix": AdjacencyMatrixGraph,
}


def to_networkx(graph: Graph, weight_attr: str = "weight") -> Union[nx.DiGraph, nx.Graph]:
    """Convert a flowgraph graph to a NetworkX graph.

    Directed graphs become ``nx.DiGraph``, undirected ones ``nx.Graph``.
    Every vertex is added, including vertices left without edges by
    `remove_edge`.

    Args:
        graph: Graph to convert.
        weight_attr: Attribute name for edge weights and vertex payloads.

    Returns:
        A new NetworkX graph.
    """
    nx_graph = nx.DiGraph() if graph.is_directed else nx.Graph()
    for vertex_id, vertex in graph.get_vertices().items():
        nx_graph.add_node(vertex_id, **{weight_attr: vertex.weight})

    for vertex_id in graph.vertex_set():
        for neighbor_id, weight in (graph.neighbors(vertex_id) or {}).items():
            nx_graph.add_edge(vertex_id, neighbor_id, **{weight_attr: weight})
    return nx_graph


def from_networkx(
    nx_graph: Any,
    backend: str = "list",
    weight_attr: str = "weight",
    default_weight: Any = 1.0,
    **graph_kwargs: Any,
) -> Graph:
    """Convert a NetworkX graph with integer node ids to a flowgraph graph.

    Nodes without incident edges are dropped, since vertices only come into
    existence through edges. Parallel edges of a multigraph collapse into
    one arc carrying the weight of the last edge seen.

    Args:
        nx_graph: NetworkX graph (directed or undirected).
        backend: ``"list"`` or ``"matrix"``.
        weight_attr: Attribute holding edge weights and vertex payloads.
        default_weight: Weight for edges missing ``weight_attr``.
        **graph_kwargs: Forwarded to the backend constructor.

    Returns:
        A new graph of the requested backend.

    Raises:
        ValueError: If the backend is unknown or a node id is not an integer.
    """
    if backend not in _BACKENDS:
        valid = ", ".join(sorted(_BACKENDS))
        raise ValueError(f"Unknown backend '{backend}'. Valid values are: {valid}")

    for node in nx_graph.nodes:
        if isinstance(node, bool) or not isinstance(node, int):
            raise ValueError(f"Node ids must be integers, got {node!r}.")

    graph = _BACKENDS[backend](is_directed=nx_graph.is_directed(), **graph_kwargs)
    for u, v, data in nx_graph.edges(data=True):
        graph.add_edge(Edge(u, v, data.get(weight_attr, default_weight)))

    for node, data in nx_graph.nodes(data=True):
        if weight_attr in data:
            graph.set_vertex_weight(node, data[weight_attr])
    return graph
