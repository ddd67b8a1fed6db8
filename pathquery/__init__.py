"""Top-level package for pathquery.

Single-source, single-target shortest paths over weighted directed
graphs with non-negative weights (Dijkstra's algorithm). Build a Graph,
open a DijkstraSolver on it and issue queries.
"""

from .domain.models import RouteResult, SolveOutcome
from .graph import DijkstraSolver, Graph, dijkstra

__all__ = ["Graph", "DijkstraSolver", "dijkstra", "SolveOutcome", "RouteResult"]

__version__ = "0.1.0"
