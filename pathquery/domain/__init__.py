"""Domain layer - Core models and errors.

This module contains the graph records, query results and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    InputFormatError,
    NoPathFoundError,
    PathQueryError,
    VertexNotFoundError,
)
from .models import (
    Edge,
    GraphQuery,
    RouteResult,
    SolveOutcome,
    Vertex,
    VertexState,
    Weight,
)

__all__ = [
    # Models
    "Edge",
    "Vertex",
    "VertexState",
    "SolveOutcome",
    "RouteResult",
    "GraphQuery",
    "Weight",
    # Errors
    "PathQueryError",
    "GraphError",
    "VertexNotFoundError",
    "NoPathFoundError",
    "InputFormatError",
    "ConfigurationError",
]
