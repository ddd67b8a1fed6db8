"""Graph core: the weighted directed graph and the Dijkstra solver.

This subpackage holds the in-memory graph that callers build
incrementally and the query session that runs shortest-path searches
on top of it.
"""

from .dijkstra import DijkstraSolver, dijkstra
from .graph import Graph

__all__ = ["Graph", "DijkstraSolver", "dijkstra"]
