"""Graph data model and the abstract graph contract.

Vertices are identified by caller-chosen integers that act as stable keys
into the vertex table. Backends keep their own adjacency structure and share
``GraphBase`` for vertex bookkeeping and the edge log.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from pickle import dumps, loads
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar

from flowgraph.measure import FLOAT, Measure

VertexID = int

G = TypeVar("G", bound="Graph")


@dataclass
class Vertex:
    """
    A graph vertex.

    Attributes:
        id: Caller-assigned identifier, unique within a graph.
        weight: Generic payload. For flow problems this is the vertex
            capacity; ``None`` means the vertex carries no payload.
    """

    id: VertexID
    weight: Any = None


@dataclass(frozen=True)
class Edge:
    """
    A directed edge ``v1 -> v2`` carrying a weight.

    For undirected graphs the backends materialize both directions. The
    ``v1 <= v2`` orientation returned by `canonical()` is the expected form
    for undirected edges but is not enforced.
    """

    v1: VertexID
    v2: VertexID
    weight: Any

    def reversed(self) -> Edge:
        return replace(self, v1=self.v2, v2=self.v1)

    def canonical(self) -> Edge:
        return self if self.v1 <= self.v2 else self.reversed()


class GraphBase:
    """
    Vertex table, edge log and directedness shared by the storage backends.

    Every endpoint referenced by `add_edge` gets a vertex entry, created with
    ``default_vertex_weight`` the first time it is seen.

    The edge log is keyed by ``(v1, v2)``, so edge lookups are O(1). For
    undirected graphs a lookup also tries the reversed key.

    Attributes:
        vertices: Mapping of vertex id to Vertex.
        edges: Edge log in insertion order (read-only list copy).
        is_directed: Whether edges are one-way.
        default_vertex_weight: Payload given to auto-created vertices.
    """

    def __init__(
        self, is_directed: bool = True, default_vertex_weight: Any = None
    ) -> None:
        self.vertices: Dict[VertexID, Vertex] = {}
        self._edges: Dict[Tuple[VertexID, VertexID], Edge] = {}
        self.is_directed = is_directed
        self.default_vertex_weight = default_vertex_weight

    def ensure_vertex(self, vertex_id: VertexID) -> bool:
        """Create a default vertex if missing. Returns True if it was created."""
        if vertex_id in self.vertices:
            return False
        self.vertices[vertex_id] = Vertex(vertex_id, self.default_vertex_weight)
        return True

    def add_edge(self, e: Edge) -> None:
        self.ensure_vertex(e.v1)
        self.ensure_vertex(e.v2)
        self._edges[(e.v1, e.v2)] = e

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges.values())

    def _find_edge(
        self, v1: VertexID, v2: VertexID
    ) -> Optional[Tuple[VertexID, VertexID]]:
        if (v1, v2) in self._edges:
            return (v1, v2)
        if not self.is_directed and (v2, v1) in self._edges:
            return (v2, v1)
        return None

    def remove_edge(self, v1: VertexID, v2: VertexID) -> Optional[Any]:
        key = self._find_edge(v1, v2)
        if key is None:
            return None
        return self._edges.pop(key).weight

    def change_edge_weight(self, v1: VertexID, v2: VertexID, weight: Any) -> None:
        key = self._find_edge(v1, v2)
        if key is not None:
            self._edges[key] = replace(self._edges[key], weight=weight)


class Graph(ABC):
    """
    Abstract graph contract consumed by the algorithms.

    Queries on an unknown vertex id return ``None`` rather than raising.
    Callers must check for absence before using the result.

    Attributes:
        graph: The shared GraphBase.
        measure: Measure describing the edge weights.
    """

    def __init__(
        self,
        is_directed: bool = True,
        default_vertex_weight: Any = None,
        measure: Measure = FLOAT,
    ) -> None:
        self.graph = GraphBase(is_directed, default_vertex_weight)
        self.measure = measure

    @classmethod
    def from_edges(cls: Type[G], edges: Iterable[Edge], **kwargs: Any) -> G:
        """Build a graph by adding ``edges`` in order.

        Args:
            edges: Edges to add.
            **kwargs: Forwarded to the constructor.
        """
        g = cls(**kwargs)
        for e in edges:
            g.add_edge(e)
        return g

    #
    # Queries
    #
    @abstractmethod
    def neighbors(self, vertex_id: VertexID) -> Optional[Dict[VertexID, Any]]:
        """Return a fresh ``{neighbor_id: weight}`` dict, or None if unknown."""
        raise NotImplementedError

    @abstractmethod
    def degree(self, vertex_id: VertexID) -> Optional[int]:
        """Return the number of outgoing neighbors, or None if unknown."""
        raise NotImplementedError

    @abstractmethod
    def vertex_set(self) -> List[VertexID]:
        """Return the ids of all vertices."""
        raise NotImplementedError

    def get_vertices(self) -> Mapping[VertexID, Vertex]:
        """Return a read-only view of the vertex table."""
        return MappingProxyType(self.graph.vertices)

    @property
    def is_directed(self) -> bool:
        return self.graph.is_directed

    def edges(self) -> List[Edge]:
        """Return a copy of the edge log."""
        return list(self.graph.edges)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self.graph.vertices

    def __len__(self) -> int:
        return len(self.graph.vertices)

    #
    # Mutation
    #
    @abstractmethod
    def add_edge(self, e: Edge) -> None:
        raise NotImplementedError

    @abstractmethod
    def remove_edge(self, v1: VertexID, v2: VertexID) -> Optional[Any]:
        """Remove the edge ``v1 -> v2`` and return its weight, or None."""
        raise NotImplementedError

    @abstractmethod
    def change_edge_weight(self, v1: VertexID, v2: VertexID, weight: Any) -> None:
        raise NotImplementedError

    def set_vertex_weight(self, vertex_id: VertexID, weight: Any) -> bool:
        """Replace the payload of a known vertex.

        Returns:
            False if the vertex does not exist, True otherwise.
        """
        vertex = self.graph.vertices.get(vertex_id)
        if vertex is None:
            return False
        vertex.weight = weight
        return True

    #
    # Copies
    #
    def copy(self: G) -> G:
        """
        Make a deep copy of the graph and return it.
        Pickle is used for performance reasons.
        """
        return loads(dumps(self))

    def to_directed(self: G) -> G:
        """Return a directed deep copy holding every stored arc of this graph.

        Vertex payloads and the measure are preserved. For a directed graph
        this is the same as `copy()`.
        """
        if self.is_directed:
            return self.copy()

        directed = self._empty_like(is_directed=True)
        for vertex_id in sorted(self.graph.vertices):
            for neighbor_id, weight in (self.neighbors(vertex_id) or {}).items():
                directed.add_edge(Edge(vertex_id, neighbor_id, weight))
        for vertex in self.graph.vertices.values():
            directed._add_vertex(vertex)
        return directed

    def _add_vertex(self, vertex: Vertex) -> None:
        """Insert a vertex, keeping its payload, even if it has no edges."""
        self.graph.ensure_vertex(vertex.id)
        self.graph.vertices[vertex.id].weight = vertex.weight

    def _empty_like(self: G, is_directed: bool) -> G:
        clone = self.copy()
        clone._reset(is_directed)
        return clone

    @abstractmethod
    def _reset(self, is_directed: bool) -> None:
        """Drop all vertices and edges and set directedness."""
        raise NotImplementedError
