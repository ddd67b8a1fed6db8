from pathquery.adapters.rendering import ArrowRouteRenderer
from pathquery.config import OutputConfig
from pathquery.domain.models import RouteResult


def test_render_joins_keys_with_arrow():
    renderer = ArrowRouteRenderer(OutputConfig())

    assert renderer.render(RouteResult(path=(1, 2, 3), total_weight=3)) == "1 -> 2 -> 3"


def test_render_with_weight():
    renderer = ArrowRouteRenderer(OutputConfig())
    route = RouteResult(path=(5,), total_weight=0)

    assert renderer.render(route, show_weight=True) == "5 (total weight: 0)"


def test_custom_separator_and_message():
    renderer = ArrowRouteRenderer(
        OutputConfig(separator=",", no_path_message="none {source}-{target}")
    )

    assert renderer.render(RouteResult(path=(1, 2), total_weight=1)) == "1,2"
    assert renderer.render_no_path(1, 2) == "none 1-2"
