"""Command-line front-end for pathquery.

Reads a graph and one query from stdin:

    <vertex count> <keys...> <edge count> <from to weight...> <from> <to>

or, with ``--vertices``/``--edges``, loads the graph from CSV files and
takes the query from ``--from``/``--to``. Prints the shortest path on
stdout, or a "no path" message on stderr.

Exit codes: 0 path found, 1 no path, 2 invalid input.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .config import AppConfig, GraphConfig, get_config
from .container import Container
from .domain.errors import ConfigurationError, GraphError, InputFormatError
from .graph.graph import Graph
from .logging_setup import configure_logging
from .ports.graph import GraphRepositoryPort, QueryReaderPort, RouteSolverPort
from .ports.rendering import RouteRendererPort

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_PATH = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathquery",
        description="Shortest path between two vertices of a weighted directed graph.",
    )
    parser.add_argument(
        "--vertices", type=Path, help="CSV file with a vertex_id column"
    )
    parser.add_argument(
        "--edges", type=Path, help="CSV file with from_id,to_id,weight columns"
    )
    parser.add_argument("--from", dest="source", type=int, help="source vertex key")
    parser.add_argument("--to", dest="target", type=int, help="target vertex key")
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="do not print input prompts"
    )
    parser.add_argument(
        "--show-distance",
        action="store_true",
        help="append the total path weight to the output",
    )
    parser.add_argument("--log-level", help="override PQ_LOG_LEVEL")
    return parser


def _csv_container(config: AppConfig, vertices: Path, edges: Path) -> Container:
    from .adapters.graph import CSVGraphRepository

    # joining an absolute file name onto data_dir yields the file name itself
    graph_config = GraphConfig(
        data_dir=vertices.parent,
        vertices_file=vertices.name,
        edges_file=str(edges.resolve()),
    )
    container = Container.create_default(config)
    container.register(GraphRepositoryPort, lambda: CSVGraphRepository(graph_config))
    return container


def run(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    container: Optional[Container] = None,
) -> int:
    """Run the command line and return the process exit code."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = build_parser()
    args = parser.parse_args(argv)
    config = container.config if container is not None else get_config()

    try:
        configure_logging(config.observability, level=args.log_level, stream=stderr)
    except ConfigurationError as e:
        print(f"Error: {e}", file=stderr)
        return EXIT_BAD_INPUT

    csv_mode = args.vertices is not None or args.edges is not None
    if csv_mode:
        if args.vertices is None or args.edges is None:
            parser.error("--vertices and --edges must be given together")
        if args.source is None or args.target is None:
            parser.error("--from and --to are required with CSV input")
        if container is None:
            container = _csv_container(config, args.vertices, args.edges)
    elif container is None:
        container = Container.create_default(config)

    try:
        if csv_mode:
            graph: Graph = container.resolve(GraphRepositoryPort).load()
            source, target = args.source, args.target
        else:
            prompt = None if args.quiet or not config.output.prompts else stdout
            query = container.resolve(QueryReaderPort).read(stdin, prompt)
            graph = Graph.from_edges(query.vertices, query.edges)
            source, target = query.source, query.target
    except (InputFormatError, GraphError) as e:
        print(f"Error: {e}", file=stderr)
        return EXIT_BAD_INPUT

    route = container.resolve(RouteSolverPort).solve_safe(graph, source, target)
    renderer = container.resolve(RouteRendererPort)
    logger.debug(
        "Query finished",
        extra={"source": source, "target": target, "found": not route.is_empty},
    )

    if route.is_empty:
        print(renderer.render_no_path(source, target), file=stderr)
        return EXIT_NO_PATH

    print(renderer.render(route, show_weight=args.show_distance), file=stdout)
    return EXIT_OK


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
