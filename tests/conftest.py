"""Shared graph fixtures."""

from __future__ import annotations

import random
from typing import Callable, List

import pytest

from flowgraph.graph import AdjacencyListGraph, AdjacencyMatrixGraph, Edge


@pytest.fixture
def two_branches() -> AdjacencyListGraph:
    # Undirected, all weights 1.0:
    #
    #      2───3
    #     /
    #    1
    #     \
    #      4───5
    g = AdjacencyListGraph(is_directed=False)
    g.add_edge(Edge(1, 2, 1.0))
    g.add_edge(Edge(2, 3, 1.0))
    g.add_edge(Edge(1, 4, 1.0))
    g.add_edge(Edge(4, 5, 1.0))
    return g


@pytest.fixture
def square() -> AdjacencyListGraph:
    # Directed:
    #       [1]        [1]
    #   ┌────────►1─────────┐
    #   │                   ▼
    #   0                   2
    #   │                   ▲
    #   │   [2]        [2]  │
    #   └────────►3─────────┘
    #   0 ──[5]──► 2 (direct)
    g = AdjacencyListGraph()
    g.add_edge(Edge(0, 1, 1.0))
    g.add_edge(Edge(1, 2, 1.0))
    g.add_edge(Edge(0, 3, 2.0))
    g.add_edge(Edge(3, 2, 2.0))
    g.add_edge(Edge(0, 2, 5.0))
    return g


@pytest.fixture
def square_matrix() -> AdjacencyMatrixGraph:
    # Same topology as `square`, stored in a matrix.
    g = AdjacencyMatrixGraph()
    g.add_edge(Edge(0, 1, 1.0))
    g.add_edge(Edge(1, 2, 1.0))
    g.add_edge(Edge(0, 3, 2.0))
    g.add_edge(Edge(3, 2, 2.0))
    g.add_edge(Edge(0, 2, 5.0))
    return g


CLRS_EDGES = [
    (0, 1, 16),
    (0, 2, 13),
    (1, 2, 10),
    (2, 1, 4),
    (1, 3, 12),
    (3, 2, 9),
    (2, 4, 14),
    (4, 3, 7),
    (3, 5, 20),
    (4, 5, 4),
]


@pytest.fixture
def clrs_network() -> AdjacencyListGraph:
    # Classic flow network, source 0, sink 5, max flow 23.
    # Vertices are uncapacitated.
    return AdjacencyListGraph.from_edges(
        (Edge(v1, v2, cap) for v1, v2, cap in CLRS_EDGES),
        default_vertex_weight=None,
    )


@pytest.fixture
def random_edges() -> Callable[[int, int, float, int], List[Edge]]:
    """Factory for reproducible random directed edge lists with integer weights."""

    def _make(seed: int, n: int = 7, density: float = 0.35, max_weight: int = 9) -> List[Edge]:
        rng = random.Random(seed)
        edges = []
        for v1 in range(n):
            for v2 in range(n):
                if v1 != v2 and rng.random() < density:
                    edges.append(Edge(v1, v2, rng.randint(1, max_weight)))
        return edges

    return _make
