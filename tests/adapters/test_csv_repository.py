"""Tests for the CSV graph repository."""

import pytest

from pathquery.adapters.graph import CSVGraphRepository
from pathquery.config import GraphConfig
from pathquery.domain.errors import GraphError


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "vertices.csv").write_text(
        "vertex_id\n1\n2\n3\n\n", encoding="utf-8"
    )
    (tmp_path / "edges.csv").write_text(
        "from_id,to_id,weight\n1,2,1.5\n2,3,2\n3,9,1\n,,\n",
        encoding="utf-8",
    )
    return tmp_path


def test_load_graph(data_dir):
    repo = CSVGraphRepository(GraphConfig(data_dir=data_dir))

    graph = repo.load()

    assert list(graph) == [1, 2, 3]
    assert graph.edge_weight(1, 2) == 1.5
    assert graph.edge_weight(2, 3) == 2
    # edge to unknown vertex 9 dropped, blank row skipped
    assert graph.edge_count == 2
    assert 9 not in graph


def test_load_is_cached(data_dir):
    repo = CSVGraphRepository(GraphConfig(data_dir=data_dir))

    assert repo.load() is repo.load()

    repo.clear_cache()
    (data_dir / "vertices.csv").write_text("vertex_id\n7\n", encoding="utf-8")
    assert list(repo.load()) == [7]


def test_missing_file_raises_graph_error(tmp_path):
    repo = CSVGraphRepository(GraphConfig(data_dir=tmp_path))

    with pytest.raises(GraphError) as excinfo:
        repo.load()

    assert isinstance(excinfo.value.cause, OSError)


def test_bad_weight_raises_graph_error(data_dir):
    (data_dir / "edges.csv").write_text(
        "from_id,to_id,weight\n1,2,heavy\n", encoding="utf-8"
    )
    repo = CSVGraphRepository(GraphConfig(data_dir=data_dir))

    with pytest.raises(GraphError):
        repo.load()


def test_missing_column_raises_graph_error(data_dir):
    (data_dir / "vertices.csv").write_text("id\n1\n", encoding="utf-8")
    repo = CSVGraphRepository(GraphConfig(data_dir=data_dir))

    with pytest.raises(GraphError):
        repo.load()
