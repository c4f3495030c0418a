"""Single-source shortest paths (Dijkstra) over the Graph contract."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Set, Tuple

from flowgraph.datastructures.heap import MinHeap
from flowgraph.graph.base import Graph, VertexID
from flowgraph.logging import get_logger
from flowgraph.measure import Measure

logger = get_logger(__name__)


@dataclass(order=True)
class PriorityVertex:
    """Heap entry ordered by distance only."""

    dist: Any
    id: VertexID = field(compare=False)


def shortest_paths(
    graph: Graph,
    source: VertexID,
    measure: Optional[Measure] = None,
) -> Tuple[Dict[VertexID, Any], Dict[VertexID, VertexID]]:
    """
    Dijkstra's SPF with lazy deletion.

    Every vertex is pushed once at initialization (the source at ``zero()``,
    the rest at ``infinity()``). An improved distance pushes a fresh entry
    instead of updating the old one; entries for vertices that are already
    finalized are discarded when popped.

    Edge weights must be non-negative under the measure's order. This is not
    checked.

    Args:
        graph: Graph to search.
        source: Source vertex.
        measure: Measure for weights and distances. Defaults to ``graph.measure``.

    Returns:
        A tuple of (dist, pred):
          - dist: Maps every vertex to its distance from ``source``;
            unreachable vertices map to ``measure.infinity()``.
          - pred: Maps each reachable vertex other than the source to its
            predecessor on a shortest path.
        Both are empty if ``source`` is not in the graph.
    """
    measure = measure or graph.measure
    if source not in graph.get_vertices():
        logger.debug("Source vertex %s is not in the graph", source)
        return {}, {}

    infinity = measure.infinity()
    dist: Dict[VertexID, Any] = {}
    pred: Dict[VertexID, VertexID] = {}
    visited: Set[VertexID] = set()
    queue: MinHeap[PriorityVertex] = MinHeap()

    for v in graph.vertex_set():
        dist[v] = measure.zero() if v == source else infinity
        queue.insert(PriorityVertex(dist[v], v))

    while queue:
        entry = queue.pop()
        if entry.id in visited:
            continue
        visited.add(entry.id)

        current = dist[entry.id]
        if measure.is_infinite(current):
            # everything left in the heap is unreachable
            continue

        for neighbor_id, weight in (graph.neighbors(entry.id) or {}).items():
            candidate = measure.add(current, weight)
            if candidate < dist.get(neighbor_id, infinity):
                dist[neighbor_id] = candidate
                pred[neighbor_id] = entry.id
                queue.insert(PriorityVertex(candidate, neighbor_id))

    return dist, pred


def dijkstra(
    graph: Graph,
    source: VertexID,
    measure: Optional[Measure] = None,
) -> Dict[VertexID, Any]:
    """
    Compute the shortest distance from ``source`` to every vertex.

    Example:
        >>> g = AdjacencyListGraph(is_directed=False)
        >>> g.add_edge(Edge(1, 2, 1.0))
        >>> g.add_edge(Edge(2, 3, 1.0))
        >>> dijkstra(g, 1)
        {1: 0.0, 2: 1.0, 3: 2.0}
    """
    dist, _ = shortest_paths(graph, source, measure)
    return dist
