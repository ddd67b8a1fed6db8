"""Dijkstra Route Solver adapter.

This adapter wraps DijkstraSolver and adds:
- Domain model output (RouteResult)
- Typed errors for absent vertices and unreachable targets
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NoPathFoundError, VertexNotFoundError
from ...domain.models import RouteResult
from ...graph.dijkstra import DijkstraSolver
from ...graph.graph import Graph

EMPTY_ROUTE = RouteResult(path=(), total_weight=float("inf"))


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph, source: int, target: int) -> RouteResult:
        """Find the shortest path between two vertices.

        Args:
            graph: The graph to search.
            source: Source vertex key.
            target: Target vertex key.

        Returns:
            RouteResult with path and total weight.

        Raises:
            VertexNotFoundError: If source or target is not in the graph.
            NoPathFoundError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source, "target": target},
        )

        if source not in graph:
            raise VertexNotFoundError(
                f"Source vertex not in graph: {source}",
                vertex_key=source,
            )
        if target not in graph:
            raise VertexNotFoundError(
                f"Target vertex not in graph: {target}",
                vertex_key=target,
            )

        route = self._run(graph, source, target)

        if route.is_empty:
            self._logger.warning(
                "No route found",
                extra={"source": source, "target": target},
            )
            raise NoPathFoundError(
                f"No path from {source} to {target}",
                source=source,
                target=target,
            )

        self._logger.info(
            "Route found",
            extra={
                "source": source,
                "target": target,
                "stops": route.num_stops,
                "total_weight": route.total_weight,
            },
        )
        return route

    def solve_safe(self, graph: Graph, source: int, target: int) -> RouteResult:
        """Find the shortest path, returning an empty result on failure.

        Like solve(), but returns an empty RouteResult instead of raising.
        """
        return self._run(graph, source, target)

    def _run(self, graph: Graph, source: int, target: int) -> RouteResult:
        solver = DijkstraSolver(graph)
        if not solver.solve(source, target):
            return EMPTY_ROUTE
        distance = solver.distance
        assert distance is not None
        return RouteResult(path=tuple(solver.get_path()), total_weight=distance)
