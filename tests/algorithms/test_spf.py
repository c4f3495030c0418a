"""
Unit tests for Dijkstra over both graph backends.
"""

import math
from decimal import Decimal

import networkx as nx
import pytest

from flowgraph.algorithms.spf import PriorityVertex, dijkstra, shortest_paths
from flowgraph.graph import AdjacencyListGraph, AdjacencyMatrixGraph, Edge
from flowgraph.measure import DECIMAL, INT


def test_dijkstra_two_branches(two_branches):
    assert dijkstra(two_branches, 1) == {1: 0, 2: 1, 3: 2, 4: 1, 5: 2}


def test_dijkstra_prefers_cheaper_multi_hop(square):
    # Shortest 0->2 is 0->1->2 with cost 2.0, not the direct edge of cost 5.0
    assert dijkstra(square, 0) == {0: 0.0, 1: 1.0, 2: 2.0, 3: 2.0}


def test_dijkstra_matrix_backend_matches_list(square, square_matrix):
    assert dijkstra(square_matrix, 0) == dijkstra(square, 0)


def test_dijkstra_unreachable_vertices_are_infinite(square):
    dist = dijkstra(square, 2)
    assert dist[2] == 0.0
    assert all(math.isinf(dist[v]) for v in (0, 1, 3))


def test_dijkstra_unknown_source_is_empty(square):
    assert dijkstra(square, 42) == {}
    assert shortest_paths(square, 42) == ({}, {})


def test_dijkstra_source_is_zero_even_when_listed_last():
    g = AdjacencyListGraph()
    g.add_edge(Edge(1, 2, 3.0))
    g.add_edge(Edge(2, 3, 3.0))
    g.add_edge(Edge(3, 1, 3.0))
    dist = dijkstra(g, 3)
    assert dist == {3: 0.0, 1: 3.0, 2: 6.0}


def test_dijkstra_zero_weight_edges():
    g = AdjacencyMatrixGraph(is_directed=False)
    g.add_edge(Edge(0, 1, 0.0))
    g.add_edge(Edge(1, 2, 2.0))
    assert dijkstra(g, 0) == {0: 0.0, 1: 0.0, 2: 2.0}


def test_dijkstra_integer_measure():
    g = AdjacencyListGraph(measure=INT)
    g.add_edge(Edge(0, 1, 2))
    g.add_edge(Edge(1, 2, 3))
    g.add_edge(Edge(3, 0, 1))
    dist = dijkstra(g, 0)
    assert dist[2] == 5 and isinstance(dist[2], int)
    assert dist[3] == INT.infinity()


def test_dijkstra_decimal_measure():
    g = AdjacencyListGraph(is_directed=False, measure=DECIMAL)
    g.add_edge(Edge(0, 1, Decimal("0.1")))
    g.add_edge(Edge(1, 2, Decimal("0.2")))
    g.add_edge(Edge(0, 2, Decimal("0.4")))
    assert dijkstra(g, 0)[2] == Decimal("0.3")


def test_shortest_paths_predecessors(square):
    dist, pred = shortest_paths(square, 0)
    assert pred == {1: 0, 2: 1, 3: 0}
    assert 0 not in pred


@pytest.mark.parametrize("seed", range(12))
@pytest.mark.parametrize("directed", [True, False])
def test_dijkstra_matches_networkx(random_edges, seed, directed):
    edges = random_edges(seed)
    g = AdjacencyListGraph.from_edges(edges, is_directed=directed)
    G = nx.DiGraph() if directed else nx.Graph()
    for e in edges:
        G.add_edge(e.v1, e.v2, weight=e.weight)
    # undirected list graph keeps the last weight seen for a pair, like networkx

    for source in g.vertex_set():
        expected = nx.single_source_dijkstra_path_length(G, source)
        dist = dijkstra(g, source)
        for v in g.vertex_set():
            assert dist[v] == expected.get(v, math.inf)


@pytest.mark.parametrize("seed", range(6))
def test_matrix_backend_matches_networkx(random_edges, seed):
    edges = random_edges(seed, n=6)
    g = AdjacencyMatrixGraph.from_edges(edges)
    if 0 not in g:
        pytest.skip("vertex 0 not referenced")
    G = nx.DiGraph()
    G.add_nodes_from(g.vertex_set())
    G.add_weighted_edges_from((e.v1, e.v2, e.weight) for e in edges)

    expected = nx.single_source_dijkstra_path_length(G, 0)
    dist = dijkstra(g, 0)
    assert {v: d for v, d in dist.items() if not math.isinf(d)} == expected


def test_priority_vertex_orders_by_distance_only():
    assert PriorityVertex(1.0, 9) < PriorityVertex(2.0, 0)
    assert PriorityVertex(1.0, 9) == PriorityVertex(1.0, 0)


def test_dijkstra_does_not_mutate_graph(square):
    before = square.edges()
    dijkstra(square, 0)
    assert square.edges() == before
