"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the graph core and external
adapters. They enable dependency injection and make the system testable.
"""

from .graph import GraphRepositoryPort, QueryReaderPort, RouteSolverPort
from .rendering import RouteRendererPort

__all__ = [
    # Graph
    "GraphRepositoryPort",
    "QueryReaderPort",
    "RouteSolverPort",
    # Rendering
    "RouteRendererPort",
]
