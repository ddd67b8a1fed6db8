"""Rendering adapters - Implementations of RouteRendererPort."""

from .arrow_renderer import ArrowRouteRenderer

__all__ = ["ArrowRouteRenderer"]
