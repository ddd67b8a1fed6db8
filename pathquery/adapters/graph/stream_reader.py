"""Text stream reader for graph descriptions.

Reads whitespace-separated tokens in this order:

1. number of vertices, then that many vertex keys
2. number of edges, then that many ``from to weight`` triples
3. one ``from to`` query pair

Line breaks carry no meaning. Prompts are written before each section
when a prompt stream is given.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, TextIO, Tuple

from ...domain.errors import InputFormatError
from ...domain.models import GraphQuery, Weight

PROMPT_VERTEX_COUNT = "Type number of vertices"
PROMPT_VERTICES = "Type vertices (key)"
PROMPT_EDGE_COUNT = "Type number of edges"
PROMPT_EDGES = "Type edges (from key, to key, weight)"
PROMPT_QUERY = "Type from and to vertices which should be solved"


def parse_weight(token: str) -> Weight:
    """Parse an edge weight, keeping integral values as ``int``.

    Raises:
        InputFormatError: If the token is not a number.
    """
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError as e:
        raise InputFormatError(
            f"Invalid edge weight: {token!r}", cause=e, token=token, expected="weight"
        )


class _Tokens:
    """Lazy token iterator over a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._iter = self._generate(stream)

    @staticmethod
    def _generate(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def next(self, expected: str) -> str:
        token = next(self._iter, None)
        if token is None:
            raise InputFormatError(
                f"Unexpected end of input, expected {expected}", expected=expected
            )
        return token

    def next_int(self, expected: str) -> int:
        token = self.next(expected)
        try:
            return int(token)
        except ValueError as e:
            raise InputFormatError(
                f"Expected integer {expected}, got {token!r}",
                cause=e,
                token=token,
                expected=expected,
            )

    def next_count(self, expected: str) -> int:
        count = self.next_int(expected)
        if count < 0:
            raise InputFormatError(
                f"Negative {expected}: {count}", token=str(count), expected=expected
            )
        return count


@dataclass
class StreamGraphReader:
    """Reads a GraphQuery from a text stream (e.g. stdin).

    This adapter implements QueryReaderPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def read(self, stream: TextIO, prompt: Optional[TextIO] = None) -> GraphQuery:
        """Read one graph description and query.

        Args:
            stream: Text stream to read from.
            prompt: Optional stream receiving interactive prompts.

        Returns:
            The parsed GraphQuery. Edges are returned as read; unknown
            endpoints are left for the graph to drop.

        Raises:
            InputFormatError: On truncated or non-numeric input.
        """
        tokens = _Tokens(stream)

        self._prompt(prompt, PROMPT_VERTEX_COUNT)
        vertex_count = tokens.next_count("vertex count")
        self._prompt(prompt, PROMPT_VERTICES)
        vertices = tuple(tokens.next_int("vertex key") for _ in range(vertex_count))

        self._prompt(prompt, PROMPT_EDGE_COUNT)
        edge_count = tokens.next_count("edge count")
        self._prompt(prompt, PROMPT_EDGES)
        edges: List[Tuple[int, int, Weight]] = []
        for _ in range(edge_count):
            from_key = tokens.next_int("edge source key")
            to_key = tokens.next_int("edge target key")
            weight = parse_weight(tokens.next("edge weight"))
            edges.append((from_key, to_key, weight))

        self._prompt(prompt, PROMPT_QUERY)
        source = tokens.next_int("query source key")
        target = tokens.next_int("query target key")

        self._logger.debug(
            "Graph description read",
            extra={"vertices": len(vertices), "edges": len(edges)},
        )
        return GraphQuery(
            vertices=vertices, edges=tuple(edges), source=source, target=target
        )

    @staticmethod
    def _prompt(prompt: Optional[TextIO], text: str) -> None:
        if prompt is not None:
            print(text, file=prompt, flush=True)
