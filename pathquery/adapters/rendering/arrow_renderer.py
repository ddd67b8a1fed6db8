"""Plain-text route renderer.

Prints a route as its vertex keys joined by an arrow, e.g. ``1 -> 2 -> 4``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...config import OutputConfig, get_config
from ...domain.models import RouteResult


@dataclass
class ArrowRouteRenderer:
    """Renders routes as arrow-separated vertex keys.

    This adapter implements RouteRendererPort.

    Attributes:
        config: Output configuration (separator, no-path message)
    """

    config: OutputConfig = field(default_factory=lambda: get_config().output)

    def render(self, route: RouteResult, show_weight: bool = False) -> str:
        text = self.config.separator.join(str(key) for key in route.path)
        if show_weight:
            text += f" (total weight: {route.total_weight})"
        return text

    def render_no_path(self, source: int, target: int) -> str:
        return self.config.no_path_message.format(source=source, target=target)
