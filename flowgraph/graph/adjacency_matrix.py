"""Adjacency-matrix graph backend.

Edge weights live in a square float matrix indexed by vertex id. A cell that
holds ``inf`` means "no edge", which keeps a zero-weight edge distinguishable
from a missing one.

Caller contract: vertex ids are contiguous from 0, so the vertex count is the
maximum id + 1. `neighbors` and `degree` scan a whole matrix row, O(V) per
call; this backend suits small dense graphs.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

import numpy as np

from flowgraph.config import MATRIX_CONFIG
from flowgraph.graph.base import Edge, Graph, GraphBase, Vertex, VertexID
from flowgraph.measure import FLOAT

ABSENT = math.inf


class WeightMatrix:
    """
    Square float matrix with an ``inf`` absent-entry sentinel.

    The matrix grows on `set` when an index falls outside the current size.
    Reads outside the current size return the sentinel.
    """

    def __init__(self, size: int = 0) -> None:
        self._data = np.full((size, size), ABSENT, dtype=float)

    @staticmethod
    def _check_index(row: int, col: int) -> None:
        if row < 0 or col < 0:
            raise ValueError(f"Matrix indices must be non-negative, got ({row}, {col}).")

    def rows(self) -> int:
        return self._data.shape[0]

    def columns(self) -> int:
        return self._data.shape[1]

    def get(self, row: int, col: int) -> float:
        self._check_index(row, col)
        if row >= self.rows() or col >= self.columns():
            return ABSENT
        return float(self._data[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        self._check_index(row, col)
        required = max(row, col) + 1
        if required > self.rows():
            self.resize(MATRIX_CONFIG.next_size(required, self.rows()))
        self._data[row, col] = value

    def row(self, index: int) -> np.ndarray:
        """Return a read-only view of one row."""
        view = self._data[index]
        view.flags.writeable = False
        return view

    def resize(self, size: int) -> None:
        """Grow (or shrink) to ``size`` x ``size``, keeping overlapping cells."""
        data = np.full((size, size), ABSENT, dtype=float)
        keep = min(size, self.rows())
        data[:keep, :keep] = self._data[:keep, :keep]
        self._data = data


class AdjacencyMatrixGraph(Graph):
    """
    Graph backed by a `WeightMatrix`. Edge weights are floats.

    Attributes:
        adj_matrix: The weight matrix. Use the graph methods to mutate it.
    """

    def __init__(
        self,
        is_directed: bool = True,
        default_vertex_weight: Any = None,
        size: Optional[int] = None,
    ) -> None:
        super().__init__(is_directed, default_vertex_weight, measure=FLOAT)
        initial = MATRIX_CONFIG.initial_size if size is None else size
        self.adj_matrix = WeightMatrix(initial)
        self._vertex_count = 0

    def _reset(self, is_directed: bool) -> None:
        self.graph = GraphBase(is_directed, self.graph.default_vertex_weight)
        self.adj_matrix = WeightMatrix(self.adj_matrix.rows())
        self._vertex_count = 0

    def _add_vertex(self, vertex: Vertex) -> None:
        super()._add_vertex(vertex)
        self._vertex_count = max(self._vertex_count, vertex.id + 1)

    def _known(self, vertex_id: VertexID) -> bool:
        return 0 <= vertex_id < self._vertex_count

    def _finite_columns(self, vertex_id: VertexID) -> np.ndarray:
        if vertex_id >= self.adj_matrix.rows():
            return np.empty(0, dtype=int)
        return np.flatnonzero(np.isfinite(self.adj_matrix.row(vertex_id)))

    def neighbors(self, vertex_id: VertexID) -> Optional[Dict[VertexID, float]]:
        if not self._known(vertex_id):
            return None
        if vertex_id >= self.adj_matrix.rows():
            return {}
        row = self.adj_matrix.row(vertex_id)
        return {int(col): float(row[col]) for col in np.flatnonzero(np.isfinite(row))}

    def degree(self, vertex_id: VertexID) -> Optional[int]:
        if not self._known(vertex_id):
            return None
        return int(self._finite_columns(vertex_id).size)

    def vertex_set(self) -> List[VertexID]:
        return list(range(self._vertex_count))

    def _write(self, v1: VertexID, v2: VertexID, weight: float) -> None:
        self.adj_matrix.set(v1, v2, weight)
        if not self.graph.is_directed:
            self.adj_matrix.set(v2, v1, weight)

    def add_edge(self, e: Edge) -> None:
        """
        Store ``e.v1 -> e.v2`` (mirrored if undirected). An infinite weight
        is the absent sentinel, so it removes the arc instead.
        """
        weight = float(e.weight)
        existed = math.isfinite(self.adj_matrix.get(e.v1, e.v2))
        if not math.isfinite(weight):
            self.remove_edge(e.v1, e.v2)
            return
        self._write(e.v1, e.v2, weight)
        self._vertex_count = max(self._vertex_count, e.v1 + 1, e.v2 + 1)

        if existed:
            self.graph.change_edge_weight(e.v1, e.v2, weight)
        else:
            self.graph.add_edge(Edge(e.v1, e.v2, weight))

    def remove_edge(self, v1: VertexID, v2: VertexID) -> Optional[float]:
        if not (self._known(v1) and self._known(v2)):
            return None
        weight = self.adj_matrix.get(v1, v2)
        if not math.isfinite(weight):
            return None

        self._write(v1, v2, ABSENT)
        self.graph.remove_edge(v1, v2)
        return weight

    def change_edge_weight(self, v1: VertexID, v2: VertexID, weight: float) -> None:
        if not self._known(v1):
            return
        self.add_edge(Edge(v1, v2, weight))
