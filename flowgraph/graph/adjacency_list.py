from __future__ import annotations

from typing import Any, Dict, List, Optional

from flowgraph.graph.base import Edge, Graph, GraphBase, VertexID


class AdjacencyListGraph(Graph):
    """
    Graph stored as nested dictionaries:
        {vertex_id: {neighbor_id: weight}}

    Every known vertex has an entry, possibly empty. Undirected graphs keep
    the structure symmetric: an arc ``(u, v)`` implies an arc ``(v, u)`` with
    the same weight.

    Attributes:
        adj_list: Outgoing adjacencies. Do not mutate directly; use the graph
            methods so the vertex table and edge log stay consistent.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.adj_list: Dict[VertexID, Dict[VertexID, Any]] = {}

    def _reset(self, is_directed: bool) -> None:
        self.graph = GraphBase(is_directed, self.graph.default_vertex_weight)
        self.adj_list = {}

    def neighbors(self, vertex_id: VertexID) -> Optional[Dict[VertexID, Any]]:
        adjacent = self.adj_list.get(vertex_id)
        if adjacent is None:
            return {} if vertex_id in self.graph.vertices else None
        return dict(adjacent)

    def degree(self, vertex_id: VertexID) -> Optional[int]:
        adjacent = self.adj_list.get(vertex_id)
        if adjacent is None:
            return 0 if vertex_id in self.graph.vertices else None
        return len(adjacent)

    def vertex_set(self) -> List[VertexID]:
        return list(self.graph.vertices)

    def add_edge(self, e: Edge) -> None:
        """
        Add the arc ``e.v1 -> e.v2`` (and the reverse arc if undirected).
        Missing endpoints are created with the default vertex weight.
        Adding an existing arc replaces its weight.
        """
        existed = e.v2 in self.adj_list.get(e.v1, {})
        self.adj_list.setdefault(e.v1, {})[e.v2] = e.weight
        self.adj_list.setdefault(e.v2, {})
        if not self.graph.is_directed:
            self.adj_list[e.v2][e.v1] = e.weight

        if existed:
            self.graph.change_edge_weight(e.v1, e.v2, e.weight)
        else:
            self.graph.add_edge(e)

    def remove_edge(self, v1: VertexID, v2: VertexID) -> Optional[Any]:
        adjacent = self.adj_list.get(v1)
        if adjacent is None or v2 not in adjacent:
            return None

        weight = adjacent.pop(v2)
        if not self.graph.is_directed:
            self.adj_list.get(v2, {}).pop(v1, None)
        self.graph.remove_edge(v1, v2)
        return weight

    def change_edge_weight(self, v1: VertexID, v2: VertexID, weight: Any) -> None:
        """
        Set the weight of ``v1 -> v2``. The arc is created if ``v1`` is known
        but the arc is not; an unknown ``v1`` leaves the graph unchanged.
        """
        adjacent = self.adj_list.get(v1)
        if adjacent is None:
            return

        if v2 not in adjacent:
            self.add_edge(Edge(v1, v2, weight))
            return

        adjacent[v2] = weight
        if not self.graph.is_directed:
            self.adj_list.setdefault(v2, {})[v1] = weight
        self.graph.change_edge_weight(v1, v2, weight)
