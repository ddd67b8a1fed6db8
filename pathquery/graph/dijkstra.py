"""Shortest-path computation using Dijkstra's algorithm.

DijkstraSolver is a query session over a borrowed Graph. All per-query
state (distance, visited flag, predecessor) lives in a side table owned
by the session, so the graph is never mutated by a query and several
sessions may share one graph.

The frontier is a binary heap (``heapq``) with lazy deletion: a vertex
whose distance improves is pushed again and older entries are skipped
when popped after the vertex is finalized.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Callable, Dict, List, Optional, Tuple

from ..domain.models import SolveOutcome, VertexState, Weight
from .graph import Graph

logger = logging.getLogger(__name__)

RelaxObserver = Callable[[int, Optional[Weight], Weight], None]


class DijkstraSolver:
    """Single-source, single-target shortest-path session.

    Usage:
        solver = DijkstraSolver(graph)
        if solver.solve(1, 4).success:
            print(solver.get_path(), solver.distance)

    A session must not run two queries at the same time. ``solve``
    resets the scratch state itself, so sequential queries are
    independent.

    Args:
        graph: The graph to query. Borrowed, never modified.
        on_relax: Optional callback ``(key, old_distance, new_distance)``
            invoked every time a vertex distance is set or lowered.
    """

    def __init__(self, graph: Graph, on_relax: Optional[RelaxObserver] = None) -> None:
        self._graph = graph
        self._on_relax = on_relax
        self._states: Dict[int, VertexState] = {}
        self._source: Optional[int] = None
        self._target: Optional[int] = None
        self._solved = False

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def source(self) -> Optional[int]:
        return self._source

    @property
    def target(self) -> Optional[int]:
        return self._target

    @property
    def solved(self) -> bool:
        """True after a successful ``solve`` and until the next reset."""
        return self._solved

    @property
    def distance(self) -> Optional[Weight]:
        """Finalized distance of the last solved target, or None."""
        if not self._solved or self._target is None:
            return None
        return self._states[self._target].distance

    def reset(self) -> None:
        """Clear all per-query state so the session can serve a new query."""
        for state in self._states.values():
            state.clear()
        # vertices added to the graph since the last query
        for key in self._graph.keys():
            if key not in self._states:
                self._states[key] = VertexState()
        self._source = None
        self._target = None
        self._solved = False

    def state(self, key: int) -> Optional[VertexState]:
        """Scratch state of vertex ``key`` for the current query."""
        return self._states.get(key)

    def distance_to(self, key: int) -> Optional[Weight]:
        state = self._states.get(key)
        return state.distance if state is not None else None

    def solve(self, from_key: int, to_key: int) -> SolveOutcome:
        """Compute the minimum-weight path from ``from_key`` to ``to_key``.

        Returns:
            SolveOutcome(success=False) if either key is absent or the
            target is unreachable, SolveOutcome(success=True) otherwise.
        """
        self.reset()
        if from_key not in self._graph or to_key not in self._graph:
            logger.debug(
                "Query endpoint not in graph",
                extra={"source": from_key, "target": to_key},
            )
            return SolveOutcome(success=False)

        self._source = from_key
        self._target = to_key
        states = self._states

        counter = itertools.count()
        self._update(from_key, 0, None)
        frontier: List[Tuple[Weight, int, int]] = [(0, next(counter), from_key)]

        while frontier:
            _, _, key = heapq.heappop(frontier)
            current = states[key]
            if current.visited:
                continue  # stale entry
            current.visited = True

            if key == to_key:
                self._solved = True
                logger.debug(
                    "Query solved",
                    extra={"source": from_key, "target": to_key, "distance": current.distance},
                )
                return SolveOutcome(success=True)

            assert current.distance is not None
            for edge in self._graph.edges(key):
                neighbour = states[edge.target]
                if neighbour.visited:
                    continue
                candidate = current.distance + edge.weight
                if neighbour.distance is None or candidate < neighbour.distance:
                    self._update(edge.target, candidate, key)
                    heapq.heappush(frontier, (candidate, next(counter), edge.target))

        logger.debug("No path", extra={"source": from_key, "target": to_key})
        return SolveOutcome(success=False)

    def get_path(self) -> List[int]:
        """Vertex keys from source to target of the last query.

        Empty if the last query failed or the session was reset.
        """
        if self._target is None:
            return []
        state = self._states.get(self._target)
        if state is None or not state.reached:
            return []

        path: List[int] = []
        key: Optional[int] = self._target
        while key is not None:
            path.append(key)
            key = self._states[key].predecessor
        path.reverse()
        return path

    def _update(self, key: int, distance: Weight, predecessor: Optional[int]) -> None:
        state = self._states[key]
        if self._on_relax is not None:
            self._on_relax(key, state.distance, distance)
        state.distance = distance
        state.predecessor = predecessor


def dijkstra(graph: Graph, start: int, end: int) -> Tuple[List[int], float]:
    """Compute the shortest path between two vertices.

    Returns:
        The path from ``start`` to ``end`` (inclusive) and its total
        weight, or ``([], float("inf"))`` if no path exists.
    """
    solver = DijkstraSolver(graph)
    if not solver.solve(start, end):
        return [], float("inf")
    distance = solver.distance
    assert distance is not None
    return solver.get_path(), distance
