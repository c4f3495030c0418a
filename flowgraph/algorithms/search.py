"""Breadth-first traversal built around a single fold primitive.

`bfs_fold` threads an accumulator through every vertex reachable from the
start, each visited exactly once in breadth-first order. The other helpers
are folds with a particular accumulator.
"""

from __future__ import annotations

from collections import deque
from typing import (
    Any,
    Callable,
    Deque,
    Dict,
    List,
    Mapping,
    Optional,
    Protocol,
    Set,
    Tuple,
    TypeVar,
)

from flowgraph.graph.base import Vertex, VertexID

A = TypeVar("A")

#: Fold step: ``(predecessor, vertex, accumulator) -> accumulator``.
FoldFunc = Callable[[Optional[VertexID], Vertex, A], A]


class Traversable(Protocol):
    """Anything BFS can walk: the `Graph` contract or a residual graph."""

    def neighbors(self, vertex_id: VertexID) -> Optional[Mapping[VertexID, Any]]: ...

    def get_vertices(self) -> Mapping[VertexID, Vertex]: ...


def bfs_fold(
    graph: Traversable,
    vertex_id: VertexID,
    fold_func: FoldFunc[A],
    base: A,
) -> A:
    """
    Breadth-first fold over the vertices reachable from ``vertex_id``.

    The queue holds ``(predecessor, vertex)`` pairs and may contain the same
    vertex several times; entries for already visited vertices are skipped
    when popped. ``fold_func`` must not mutate the graph.

    Args:
        graph: Graph to traverse.
        vertex_id: Start vertex.
        fold_func: Called once per reachable vertex as
            ``fold_func(predecessor, vertex, acc)`` and returns the new
            accumulator. The start vertex has predecessor None.
        base: Initial accumulator.

    Returns:
        The final accumulator, or ``base`` if the start vertex is unknown.
    """
    vertices = graph.get_vertices()
    queue: Deque[Tuple[Optional[VertexID], VertexID]] = deque([(None, vertex_id)])
    visited: Set[VertexID] = set()
    acc = base

    while queue:
        pred, node_id = queue.popleft()
        if node_id in visited:
            continue
        vertex = vertices.get(node_id)
        if vertex is None:
            continue

        acc = fold_func(pred, vertex, acc)

        for neighbor_id in graph.neighbors(node_id) or {}:
            if neighbor_id not in visited:
                queue.append((node_id, neighbor_id))
        visited.add(node_id)
    return acc


def bfs_print(
    graph: Traversable,
    vertex_id: VertexID,
    emit: Callable[[str], Any] = print,
) -> List[VertexID]:
    """Report each visited vertex through ``emit`` and return the visit order."""

    def _visit(_: Optional[VertexID], vertex: Vertex, order: List[VertexID]) -> List[VertexID]:
        emit(f"Visiting vertex {vertex.id}")
        order.append(vertex.id)
        return order

    return bfs_fold(graph, vertex_id, _visit, [])


def bfs_path_exists(graph: Traversable, start: VertexID, finish: VertexID) -> bool:
    """Return True if ``finish`` is reachable from ``start``."""
    return bfs_fold(
        graph,
        start,
        lambda _, vertex, found: found or vertex.id == finish,
        False,
    )


def _add_pred(
    pred: Optional[VertexID],
    vertex: Vertex,
    preds: Dict[VertexID, Optional[VertexID]],
) -> Dict[VertexID, Optional[VertexID]]:
    preds[vertex.id] = pred
    return preds


def build_bfs_preds(
    graph: Traversable, vertex_id: VertexID
) -> Dict[VertexID, Optional[VertexID]]:
    """
    Map every vertex reachable from ``vertex_id`` to its BFS predecessor.

    The start vertex maps to None. Following predecessors from any key ends
    at the start vertex.
    """
    return bfs_fold(graph, vertex_id, _add_pred, {})


def bfs_path(
    graph: Traversable, start: VertexID, finish: VertexID
) -> Optional[List[VertexID]]:
    """
    Return a fewest-hops path ``[start, ..., finish]``, or None if
    ``finish`` is unreachable.
    """
    preds = build_bfs_preds(graph, start)
    if finish not in preds:
        return None

    path = [finish]
    while path[-1] != start:
        path.append(preds[path[-1]])
    path.reverse()
    return path
