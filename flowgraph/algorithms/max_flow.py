"""Maximum flow with vertex capacities (Ford-Fulkerson).

Vertex capacities are first removed by vertex splitting: a capacitated
vertex ``v`` gets a twin ``v'`` that takes over all of ``v``'s outgoing
edges, and a single edge ``v -> v'`` weighted by the capacity. The result is
a purely edge-capacitated graph, on which augmenting paths are found with
BFS over a `ResidualGraph` (Edmonds-Karp order).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple, Union, overload

from flowgraph.algorithms.search import bfs_path, build_bfs_preds
from flowgraph.algorithms.types import EdgeKey, FlowSummary
from flowgraph.config import FLOW_CONFIG, FlowConfig
from flowgraph.graph.base import Edge, Graph, Vertex, VertexID
from flowgraph.logging import get_logger
from flowgraph.measure import Measure

logger = get_logger(__name__)


def _is_capacitated(weight: Any, measure: Measure) -> bool:
    return weight is not None and measure.is_finite(weight)


def split_vertex_capacities(
    graph: Graph,
    measure: Optional[Measure] = None,
) -> Tuple[Graph, Dict[VertexID, VertexID]]:
    """
    Turn vertex capacities into edge capacities on a directed clone.

    For every vertex (in ascending id order) whose weight is a finite
    capacity, a twin id is allocated starting at ``max id + 1``. Each
    outgoing edge of the vertex is moved to start at the twin, and an edge
    ``vertex -> twin`` weighted by the capacity is added. All removals are
    applied before all additions. Capacities are then cleared from the
    vertex table, so no vertex of the result carries a finite capacity.

    The input graph is never mutated.

    Args:
        graph: Graph whose vertex weights are capacities. ``None`` and the
            measure's infinity mean "uncapacitated".
        measure: Measure of the capacities. Defaults to ``graph.measure``.

    Returns:
        A tuple of (transformed_graph, twins) where ``twins`` maps each twin
        id to the vertex it was split from.
    """
    measure = measure or graph.measure
    new_graph = graph.to_directed()
    twins: Dict[VertexID, VertexID] = {}

    vertices = new_graph.get_vertices()
    if not vertices:
        return new_graph, twins

    edges_to_remove: List[Tuple[VertexID, VertexID]] = []
    edges_to_add: List[Edge] = []
    next_id = max(vertices) + 1

    for v_id in sorted(vertices):
        capacity = vertices[v_id].weight
        if not _is_capacitated(capacity, measure):
            continue

        twins[next_id] = v_id
        for v2_id, weight in (new_graph.neighbors(v_id) or {}).items():
            edges_to_remove.append((v_id, v2_id))
            edges_to_add.append(Edge(next_id, v2_id, weight))
        edges_to_add.append(Edge(v_id, next_id, capacity))
        next_id += 1

    for v1, v2 in edges_to_remove:
        new_graph.remove_edge(v1, v2)
    for e in edges_to_add:
        new_graph.add_edge(e)

    for twin_id, v_id in twins.items():
        new_graph.set_vertex_weight(v_id, None)
        new_graph.set_vertex_weight(twin_id, None)

    logger.debug("Split %d capacitated vertices", len(twins))
    return new_graph, twins


class ResidualGraph:
    """
    Residual capacities of an edge-capacitated directed graph.

    Each arc ``(u, v)`` of the source graph has a forward residual and a
    reverse residual ``(v, u)``; anti-parallel arcs share the same pair of
    entries. Only arcs with residual above ``config.min_residual`` are
    exposed by `neighbors`, so BFS walks augmenting paths only.

    This is owned scratch state of the flow computation and deliberately
    does not implement the `Graph` mutation contract.
    """

    def __init__(self, measure: Measure, config: FlowConfig = FLOW_CONFIG) -> None:
        self.measure = measure
        self.config = config
        self._vertices: Dict[VertexID, Vertex] = {}
        self._residual: Dict[VertexID, Dict[VertexID, Any]] = {}
        self._capacity: Dict[EdgeKey, Any] = {}

    @classmethod
    def from_graph(
        cls,
        graph: Graph,
        measure: Optional[Measure] = None,
        config: FlowConfig = FLOW_CONFIG,
    ) -> ResidualGraph:
        """Build the residual graph of ``graph`` with zero flow everywhere."""
        residual = cls(measure or graph.measure, config)
        zero = residual.measure.zero()
        for v_id in graph.get_vertices():
            residual._vertices[v_id] = Vertex(v_id)
            residual._residual.setdefault(v_id, {})

        for v_id in graph.vertex_set():
            for v2_id, capacity in (graph.neighbors(v_id) or {}).items():
                residual._capacity[(v_id, v2_id)] = capacity
                forward = residual._residual.setdefault(v_id, {})
                forward[v2_id] = residual.measure.add(forward.get(v2_id, zero), capacity)
                residual._residual.setdefault(v2_id, {}).setdefault(v_id, zero)
                residual._vertices.setdefault(v2_id, Vertex(v2_id))
        return residual

    def get_vertices(self) -> Mapping[VertexID, Vertex]:
        return MappingProxyType(self._vertices)

    def neighbors(self, vertex_id: VertexID) -> Optional[Dict[VertexID, Any]]:
        arcs = self._residual.get(vertex_id)
        if arcs is None:
            return None
        return {v: r for v, r in arcs.items() if self.config.has_capacity(r)}

    def residual(self, v1: VertexID, v2: VertexID) -> Optional[Any]:
        return self._residual.get(v1, {}).get(v2)

    def capacity(self, v1: VertexID, v2: VertexID) -> Optional[Any]:
        """Original capacity of ``v1 -> v2``, or None if it was not an edge."""
        return self._capacity.get((v1, v2))

    def bottleneck(self, path: List[VertexID]) -> Any:
        return min(self._residual[u][v] for u, v in zip(path, path[1:]))

    def augment(self, path: List[VertexID], amount: Any) -> None:
        """Push ``amount`` along ``path``: forward residuals shrink, reverse ones grow."""
        for u, v in zip(path, path[1:]):
            self._residual[u][v] -= amount
            self._residual[v][u] = self.measure.add(self._residual[v][u], amount)

    def edge_flows(self) -> Dict[EdgeKey, Any]:
        """Net positive flow per original arc."""
        zero = self.measure.zero()
        flows: Dict[EdgeKey, Any] = {}
        for (u, v), capacity in self._capacity.items():
            flow = capacity - self._residual[u][v]
            if flow > zero:
                flows[(u, v)] = flow
        return flows

    def capacity_edges(self) -> List[EdgeKey]:
        return list(self._capacity)


@overload
def ford_fulkerson(
    graph: Graph,
    source: VertexID,
    sink: VertexID,
    *,
    measure: Optional[Measure] = None,
    return_summary: Literal[False] = False,
    config: FlowConfig = FLOW_CONFIG,
) -> Dict[EdgeKey, Any]: ...


@overload
def ford_fulkerson(
    graph: Graph,
    source: VertexID,
    sink: VertexID,
    *,
    measure: Optional[Measure] = None,
    return_summary: Literal[True],
    config: FlowConfig = FLOW_CONFIG,
) -> Tuple[Dict[EdgeKey, Any], FlowSummary]: ...


def ford_fulkerson(
    graph: Graph,
    source: VertexID,
    sink: VertexID,
    *,
    measure: Optional[Measure] = None,
    return_summary: bool = False,
    config: FlowConfig = FLOW_CONFIG,
) -> Union[Dict[EdgeKey, Any], Tuple[Dict[EdgeKey, Any], FlowSummary]]:
    """Compute a maximum flow from ``source`` to ``sink``.

    Edge weights are edge capacities; vertex weights are vertex capacities
    (``None`` or infinity for none). The steps are:
      1. Split capacitated vertices on a clone (`split_vertex_capacities`).
      2. Build a `ResidualGraph` of the split graph.
      3. Repeatedly find a fewest-hops augmenting path with BFS, push its
         bottleneck residual along it, and update forward and reverse
         residuals, until no path remains.

    Flow leaves from the source's in-half, so a source capacity limits the
    flow, and arrives at the sink's out-half when the sink is capacitated.

    Undirected graphs are treated as two opposite arcs per edge.

    Args:
        graph: Input graph. It is not modified.
        source: Source vertex.
        sink: Sink vertex.
        measure: Measure of capacities. Defaults to ``graph.measure``.
        return_summary: If True, also return a FlowSummary.
        config: Flow configuration (residual threshold, round limit).

    Returns:
        ``{(v1, v2): flow}`` for every edge of the input graph carrying
        positive flow, or ``(flows, summary)`` if ``return_summary`` is set.
        Unknown endpoints or ``source == sink`` give no flow.

    Notes:
        If an augmenting path has infinite bottleneck the flow is unbounded;
        augmentation stops, the path's edges and the total report infinity.

    Examples:
        >>> g = AdjacencyListGraph()
        >>> g.add_edge(Edge(0, 1, 3))
        >>> g.add_edge(Edge(1, 2, 2))
        >>> ford_fulkerson(g, 0, 2)
        {(0, 1): 2, (1, 2): 2}
    """
    measure = measure or graph.measure
    zero = measure.zero()
    vertices = graph.get_vertices()

    if source not in vertices or sink not in vertices or source == sink:
        logger.debug("No flow between %s and %s", source, sink)
        flows: Dict[EdgeKey, Any] = {}
        if return_summary:
            reachable = {source} if source in vertices else set()
            return flows, FlowSummary(zero, flows, {}, reachable, [], 0)
        return flows

    split_graph, twins = split_vertex_capacities(graph, measure)
    twin_of = {v_id: twin_id for twin_id, v_id in twins.items()}
    target = twin_of.get(sink, sink)
    residual = ResidualGraph.from_graph(split_graph, measure, config)

    total = zero
    rounds = 0
    unbounded_path: Optional[List[VertexID]] = None

    while True:
        if config.max_augmentations is not None and rounds >= config.max_augmentations:
            logger.warning(
                "Stopping after %d augmentations; flow may not be maximal", rounds
            )
            break

        path = bfs_path(residual, source, target)
        if path is None:
            break

        amount = residual.bottleneck(path)
        if measure.is_infinite(amount):
            logger.warning("Unbounded flow from %s to %s", source, sink)
            unbounded_path = path
            total = measure.infinity()
            break

        residual.augment(path, amount)
        total = measure.add(total, amount)
        rounds += 1
        logger.debug("Augmenting path %s carries %s", path, amount)

    def _original(v_id: VertexID) -> VertexID:
        return twins.get(v_id, v_id)

    def _internal(u: VertexID, v: VertexID) -> bool:
        return twins.get(v) == u

    if unbounded_path is not None:
        raw_flows = {
            (u, v): measure.infinity() for u, v in zip(unbounded_path, unbounded_path[1:])
        }
    else:
        raw_flows = residual.edge_flows()

    flows = {
        (_original(u), _original(v)): flow
        for (u, v), flow in raw_flows.items()
        if not _internal(u, v)
    }
    logger.debug("Max flow %s -> %s: %s in %d rounds", source, sink, total, rounds)

    if not return_summary:
        return flows

    reached = set(build_bfs_preds(residual, source))
    min_cut: List[EdgeKey] = []
    residual_cap: Dict[EdgeKey, Any] = {}
    for u, v in residual.capacity_edges():
        remaining = residual.residual(u, v)
        if _internal(u, v):
            key = (u, u)
        else:
            key = (_original(u), _original(v))
            residual_cap[key] = remaining
        if u in reached and v not in reached:
            min_cut.append(key)

    summary = FlowSummary(
        total_flow=total,
        edge_flow=flows,
        residual_cap=residual_cap,
        reachable={_original(v) for v in reached},
        min_cut=min_cut,
        augmentations=rounds,
    )
    return flows, summary
