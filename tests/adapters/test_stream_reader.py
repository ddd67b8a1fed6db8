"""Tests for the text stream graph reader."""

import io

import pytest

from pathquery.adapters.graph.stream_reader import (
    PROMPT_QUERY,
    PROMPT_VERTEX_COUNT,
    StreamGraphReader,
    parse_weight,
)
from pathquery.domain.errors import InputFormatError


SAMPLE = """4
1 2 3 4
4
1 2 1
2 3 2
1 3 5
3 4 1
1 4
"""


class TestStreamGraphReader:
    @pytest.fixture
    def reader(self):
        return StreamGraphReader()

    def test_reads_full_description(self, reader):
        query = reader.read(io.StringIO(SAMPLE))

        assert query.vertices == (1, 2, 3, 4)
        assert query.edges == ((1, 2, 1), (2, 3, 2), (1, 3, 5), (3, 4, 1))
        assert (query.source, query.target) == (1, 4)

    def test_line_breaks_do_not_matter(self, reader):
        query = reader.read(io.StringIO(" ".join(SAMPLE.split())))

        assert query.vertices == (1, 2, 3, 4)
        assert query.target == 4

    def test_empty_graph(self, reader):
        query = reader.read(io.StringIO("0 0 1 2"))

        assert query.vertices == ()
        assert query.edges == ()
        assert (query.source, query.target) == (1, 2)

    def test_prompts_written_when_requested(self, reader):
        prompt = io.StringIO()

        reader.read(io.StringIO(SAMPLE), prompt)

        lines = prompt.getvalue().splitlines()
        assert lines[0] == PROMPT_VERTEX_COUNT
        assert lines[-1] == PROMPT_QUERY
        assert len(lines) == 5

    def test_truncated_input(self, reader):
        with pytest.raises(InputFormatError) as excinfo:
            reader.read(io.StringIO("2 1 2 1 1 2"))

        assert excinfo.value.token is None
        assert excinfo.value.expected == "edge weight"

    def test_non_numeric_key(self, reader):
        with pytest.raises(InputFormatError) as excinfo:
            reader.read(io.StringIO("2 1 x"))

        assert excinfo.value.token == "x"

    def test_negative_count(self, reader):
        with pytest.raises(InputFormatError):
            reader.read(io.StringIO("-1"))


def test_parse_weight_keeps_integers():
    assert parse_weight("3") == 3
    assert isinstance(parse_weight("3"), int)
    assert parse_weight("2.5") == 2.5


def test_parse_weight_rejects_garbage():
    with pytest.raises(InputFormatError):
        parse_weight("heavy")
