"""Domain models for pathquery.

Edges and results are frozen dataclasses with slots. Vertices own their
adjacency list and are only mutated through Graph. Per-query solver
state is kept apart from the vertex in VertexState records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

Weight = Union[int, float]


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed weighted edge, owned by its source vertex.

    Attributes:
        target: Key of the destination vertex
        weight: Non-negative edge weight
    """

    target: int
    weight: Weight


@dataclass(slots=True)
class Vertex:
    """A graph vertex with its outgoing edges.

    Attributes:
        key: Caller-assigned unique key
        edges: Outgoing edges in insertion order
    """

    key: int
    edges: List[Edge] = field(default_factory=list)


@dataclass(slots=True)
class VertexState:
    """Per-query scratch state of one vertex.

    ``distance`` is None while the vertex is unreached. ``predecessor``
    is the key of the vertex the current best distance came from.
    """

    distance: Optional[Weight] = None
    visited: bool = False
    predecessor: Optional[int] = None

    @property
    def reached(self) -> bool:
        return self.distance is not None

    def clear(self) -> None:
        self.distance = None
        self.visited = False
        self.predecessor = None


@dataclass(frozen=True, slots=True)
class SolveOutcome:
    """Outcome of a single shortest-path query."""

    success: bool

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of route computation between two vertices.

    Attributes:
        path: Ordered tuple of vertex keys from source to target
        total_weight: Sum of edge weights along the path, inf if none
    """

    path: tuple[int, ...]
    total_weight: Weight

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of vertices in the route."""
        return len(self.path)

    @property
    def source(self) -> Optional[int]:
        return self.path[0] if self.path else None

    @property
    def target(self) -> Optional[int]:
        return self.path[-1] if self.path else None


@dataclass(frozen=True, slots=True)
class GraphQuery:
    """A graph description plus one query, as read from an input source.

    Attributes:
        vertices: Vertex keys in input order
        edges: (from_key, to_key, weight) triples in input order
        source: Query source key
        target: Query target key
    """

    vertices: tuple[int, ...]
    edges: tuple[tuple[int, int, Weight], ...]
    source: int
    target: int
