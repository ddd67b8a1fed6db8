import pytest

from pathquery.domain.errors import GraphError, VertexNotFoundError
from pathquery.domain.models import Edge
from pathquery.graph import Graph


def test_add_vertex_is_idempotent():
    graph = Graph()
    graph.add_vertex(1)
    graph.add_vertex(2)
    assert graph.add_edge(1, 2, 3)

    graph.add_vertex(1)

    assert len(graph) == 2
    # duplicate insert must not wipe the existing adjacency list
    assert graph.edges(1) == (Edge(2, 3),)


def test_keys_need_not_be_contiguous():
    graph = Graph.from_edges([42, -7, 1000], [(42, -7, 1), (-7, 1000, 2)])

    assert list(graph) == [42, -7, 1000]
    assert -7 in graph
    assert 0 not in graph


def test_add_edge_with_unknown_destination_is_dropped():
    graph = Graph()
    graph.add_vertex(1)

    added = graph.add_edge(1, 99, 5)

    assert added is False
    assert 99 not in graph
    assert graph.edges(1) == ()
    assert len(graph) == 1


def test_add_edge_with_unknown_source_is_dropped():
    graph = Graph()
    graph.add_vertex(2)

    assert graph.add_edge(1, 2, 5) is False
    assert 1 not in graph
    assert graph.edge_count == 0


def test_parallel_edges_and_self_loops_are_kept():
    graph = Graph.from_edges([1, 2], [(1, 2, 5), (1, 2, 3), (1, 1, 0)])

    assert graph.edge_count == 3
    assert graph.edge_weight(1, 2) == 3
    assert graph.edge_weight(1, 1) == 0
    assert graph.edge_weight(2, 1) is None


def test_get_vertex():
    graph = Graph.from_edges([1], [])

    assert graph.get_vertex(1).key == 1
    assert graph.get_vertex(2) is None


def test_get_vertex_or_raise():
    graph = Graph()

    with pytest.raises(VertexNotFoundError) as excinfo:
        graph.get_vertex_or_raise(5)

    assert excinfo.value.vertex_key == 5


def test_edges_of_unknown_vertex_is_empty():
    assert Graph().edges(3) == ()


def test_path_weight():
    graph = Graph.from_edges([1, 2, 3], [(1, 2, 1), (2, 3, 2.5)])

    assert graph.path_weight([1, 2, 3]) == 3.5
    assert graph.path_weight([1]) == 0
    assert graph.path_weight([]) == 0

    with pytest.raises(GraphError):
        graph.path_weight([3, 1])


def test_repr():
    graph = Graph.from_edges([1, 2], [(1, 2, 1)])
    assert repr(graph) == "Graph(vertices=2, edges=1)"
