"""CSV Graph Repository adapter.

Loads a graph from two CSV files:
- vertices file with a ``vertex_id`` column
- edges file with ``from_id``, ``to_id`` and ``weight`` columns

Edges naming an unknown vertex are dropped by the graph, as with any
other construction path.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError, InputFormatError
from ...graph.graph import Graph
from .stream_reader import parse_weight


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph:
        """Load the graph from CSV files.

        Raises:
            GraphError: If the graph cannot be loaded.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "vertices_path": str(self.config.vertices_path),
                "edges_path": str(self.config.edges_path),
            },
        )

        try:
            graph = self._load_graph_from_csv()
        except (OSError, KeyError, ValueError, InputFormatError) as e:
            raise GraphError(
                f"Failed to load graph: {e}",
                file_path=str(self.config.data_dir),
                cause=e,
            )

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"vertices": len(graph), "edges": graph.edge_count},
        )
        return graph

    def _load_graph_from_csv(self) -> Graph:
        graph = Graph()

        with self.config.vertices_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                vertex_id = (row["vertex_id"] or "").strip()
                if vertex_id:
                    graph.add_vertex(int(vertex_id))

        dropped = 0
        with self.config.edges_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                from_id = (row["from_id"] or "").strip()
                to_id = (row["to_id"] or "").strip()
                weight = (row["weight"] or "").strip()

                if not from_id or not to_id or not weight:
                    continue

                if not graph.add_edge(int(from_id), int(to_id), parse_weight(weight)):
                    dropped += 1

        if dropped:
            self._logger.warning(
                "Edges dropped, endpoint not in graph",
                extra={"dropped": dropped},
            )
        return graph

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
