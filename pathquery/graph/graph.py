"""In-memory weighted directed graph.

Vertices are stored in a dict keyed by their caller-assigned integer
key; each vertex owns its outgoing edges by value. Construction is
best-effort: duplicate vertices and edges naming an unknown endpoint
are ignored rather than rejected with an exception.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, KeysView, Optional, Sequence, Tuple

from ..domain.errors import GraphError, VertexNotFoundError
from ..domain.models import Edge, Vertex, Weight

logger = logging.getLogger(__name__)


class Graph:
    """Weighted directed graph with integer vertex keys.

    Weights are expected to be non-negative; this is not checked.
    """

    def __init__(self) -> None:
        self._vertices: Dict[int, Vertex] = {}

    @classmethod
    def from_edges(
        cls,
        vertices: Iterable[int],
        edges: Iterable[Tuple[int, int, Weight]],
    ) -> Graph:
        """Build a graph from vertex keys and (from, to, weight) triples."""
        graph = cls()
        for key in vertices:
            graph.add_vertex(key)
        for from_key, to_key, weight in edges:
            graph.add_edge(from_key, to_key, weight)
        return graph

    def add_vertex(self, key: int) -> None:
        if key in self._vertices:
            logger.debug("Duplicate vertex ignored", extra={"vertex": key})
            return
        self._vertices[key] = Vertex(key)

    def add_edge(self, from_key: int, to_key: int, weight: Weight) -> bool:
        """Append an edge ``from_key -> to_key`` with the given weight.

        Returns:
            True if the edge was added, False if either endpoint is not
            in the graph (the edge is dropped and no vertex is created).
        """
        source = self._vertices.get(from_key)
        if source is None or to_key not in self._vertices:
            logger.debug(
                "Edge dropped, endpoint not in graph",
                extra={"from_vertex": from_key, "to_vertex": to_key},
            )
            return False
        source.edges.append(Edge(to_key, weight))
        return True

    def get_vertex(self, key: int) -> Optional[Vertex]:
        return self._vertices.get(key)

    def get_vertex_or_raise(self, key: int) -> Vertex:
        """Get a vertex by key, raising if not found.

        Raises:
            VertexNotFoundError: If the vertex is not in the graph.
        """
        vertex = self._vertices.get(key)
        if vertex is None:
            raise VertexNotFoundError(f"Vertex not found: {key}", vertex_key=key)
        return vertex

    def edges(self, key: int) -> Sequence[Edge]:
        """Outgoing edges of ``key``; empty for unknown vertices."""
        vertex = self._vertices.get(key)
        return tuple(vertex.edges) if vertex is not None else ()

    def edge_weight(self, from_key: int, to_key: int) -> Optional[Weight]:
        """Weight of the lightest edge ``from_key -> to_key``, or None."""
        weights = [e.weight for e in self.edges(from_key) if e.target == to_key]
        return min(weights) if weights else None

    def path_weight(self, path: Sequence[int]) -> Weight:
        """Return the total weight of walking along ``path``.

        Raises:
            GraphError: If two consecutive keys are not joined by an edge.
        """
        total: Weight = 0
        for u, v in zip(path[:-1], path[1:]):
            weight = self.edge_weight(u, v)
            if weight is None:
                raise GraphError(f"Edge {u}->{v} not present in graph")
            total += weight
        return total

    def keys(self) -> KeysView[int]:
        return self._vertices.keys()

    @property
    def edge_count(self) -> int:
        return sum(len(v.edges) for v in self._vertices.values())

    def __contains__(self, key: object) -> bool:
        return key in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[int]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self)}, edges={self.edge_count})"
