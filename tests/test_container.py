import pytest

from pathquery.adapters.graph import CSVGraphRepository, DijkstraRouteSolver, StreamGraphReader
from pathquery.adapters.rendering import ArrowRouteRenderer
from pathquery.config import AppConfig
from pathquery.container import Container, get_container, reset_container
from pathquery.ports.graph import GraphRepositoryPort, QueryReaderPort, RouteSolverPort
from pathquery.ports.rendering import RouteRendererPort


def test_default_bindings():
    container = Container.create_default(AppConfig())

    assert isinstance(container.resolve(QueryReaderPort), StreamGraphReader)
    assert isinstance(container.resolve(GraphRepositoryPort), CSVGraphRepository)
    assert isinstance(container.resolve(RouteSolverPort), DijkstraRouteSolver)
    assert isinstance(container.resolve(RouteRendererPort), ArrowRouteRenderer)


def test_singletons_are_shared():
    container = Container.create_default(AppConfig())

    assert container.resolve(RouteSolverPort) is container.resolve(RouteSolverPort)

    container.clear_singletons()
    container.register(RouteSolverPort, DijkstraRouteSolver, singleton=False)
    assert container.resolve(RouteSolverPort) is not container.resolve(RouteSolverPort)


def test_register_replaces_binding():
    container = Container(config=AppConfig())
    container.register(RouteRendererPort, lambda: "first")
    assert container.resolve(RouteRendererPort) == "first"

    container.register(RouteRendererPort, lambda: "second")

    assert container.resolve(RouteRendererPort) == "second"


def test_unregistered_type_raises():
    container = Container(config=AppConfig())

    assert not container.is_registered(RouteSolverPort)
    with pytest.raises(KeyError):
        container.resolve(RouteSolverPort)


def test_clear_all():
    container = Container.create_default(AppConfig())

    container.clear_all()

    assert not container.is_registered(QueryReaderPort)


def test_global_container():
    reset_container()
    try:
        assert get_container() is get_container()
    finally:
        reset_container()
