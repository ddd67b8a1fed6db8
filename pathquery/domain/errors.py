"""Typed domain errors for pathquery.

The graph core itself never raises for absent vertices or unreachable
targets; these errors are used by the adapters (readers, route solver)
that want an explicit failure instead of an empty result.

All errors inherit from PathQueryError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PathQueryError(Exception):
    """Base error for the pathquery domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(PathQueryError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class VertexNotFoundError(PathQueryError):
    """Vertex key not found in the graph.

    Attributes:
        vertex_key: The key that was not found
    """

    vertex_key: Optional[int] = None


@dataclass
class NoPathFoundError(PathQueryError):
    """No path exists between the requested vertices.

    Attributes:
        source: Source vertex key
        target: Target vertex key
    """

    source: Optional[int] = None
    target: Optional[int] = None


@dataclass
class InputFormatError(PathQueryError):
    """Malformed graph description on an input stream.

    Attributes:
        token: The offending token, None when input ended early
        expected: What the reader was looking for
    """

    token: Optional[str] = None
    expected: str = ""


@dataclass
class ConfigurationError(PathQueryError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
