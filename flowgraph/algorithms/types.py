"""Types and data structures for algorithm results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Set, Tuple

from flowgraph.graph.base import VertexID

#: Edge identifier tuple: (source_vertex, target_vertex)
EdgeKey = Tuple[VertexID, VertexID]


@dataclass(frozen=True)
class FlowSummary:
    """Summary of max-flow computation results.

    All vertex ids are the caller's ids; split twins are mapped back to the
    vertex they were created for.

    Attributes:
        total_flow: Maximum flow value achieved.
        edge_flow: Positive flow per edge, indexed by ``(v1, v2)``.
        residual_cap: Remaining capacity per original edge.
        reachable: Vertices reachable from the source in the final residual graph.
        min_cut: Saturated edges crossing the s-t cut. A saturated vertex
            capacity appears as the pair ``(v, v)``.
        augmentations: Number of augmenting paths used.
    """

    total_flow: Any
    edge_flow: Dict[EdgeKey, Any]
    residual_cap: Dict[EdgeKey, Any]
    reachable: Set[VertexID]
    min_cut: List[EdgeKey]
    augmentations: int
