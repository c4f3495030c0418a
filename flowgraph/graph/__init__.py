"""Graph primitives and storage backends.

This package provides the graph data model (`Vertex`, `Edge`, `GraphBase`),
the abstract `Graph` contract, the adjacency-list and adjacency-matrix
backends, and NetworkX conversion helpers (`convert`).
"""

from flowgraph.graph.adjacency_list import AdjacencyListGraph
from flowgraph.graph.adjacency_matrix import AdjacencyMatrixGraph, WeightMatrix
from flowgraph.graph.base import Edge, Graph, GraphBase, Vertex, VertexID

__all__ = [
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "Edge",
    "Graph",
    "GraphBase",
    "Vertex",
    "VertexID",
    "WeightMatrix",
]
