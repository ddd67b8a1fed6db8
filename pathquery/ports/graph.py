"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts between the graph core and the
input sources and route solvers that drive it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, TextIO

if TYPE_CHECKING:
    from ..domain.models import GraphQuery, RouteResult
    from ..graph.graph import Graph


class GraphRepositoryPort(Protocol):
    """Port for loading a graph from persistent storage.

    Implementation: adapters/graph/csv_repository.py
    """

    def load(self) -> Graph:
        """Load the graph.

        Returns:
            A fully built Graph.
        """
        ...


class QueryReaderPort(Protocol):
    """Port for reading a graph description and one query from a stream.

    Implementation: adapters/graph/stream_reader.py
    """

    def read(self, stream: TextIO, prompt: Optional[TextIO] = None) -> GraphQuery:
        """Read vertices, edges and a (source, target) pair.

        Args:
            stream: Text stream to read from.
            prompt: Optional stream for interactive prompts.

        Returns:
            The parsed GraphQuery.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py (DijkstraSolver)
    """

    def solve(self, graph: Graph, source: int, target: int) -> RouteResult:
        """Find the shortest path between two vertices.

        Returns:
            RouteResult with path and total weight.
        """
        ...

    def solve_safe(self, graph: Graph, source: int, target: int) -> RouteResult:
        """Like solve(), but returns an empty RouteResult on failure."""
        ...
