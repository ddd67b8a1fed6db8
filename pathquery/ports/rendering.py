"""Rendering port - Abstraction for presenting route results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import RouteResult


class RouteRendererPort(Protocol):
    """Port for turning a route into text.

    Implementation: adapters/rendering/arrow_renderer.py
    """

    def render(self, route: RouteResult, show_weight: bool = False) -> str:
        """Render a non-empty route."""
        ...

    def render_no_path(self, source: int, target: int) -> str:
        """Render the message shown when no path exists."""
        ...
