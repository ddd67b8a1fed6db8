"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- StreamGraphReader: Reads a graph and one query from a text stream
- CSVGraphRepository: Loads a graph from CSV files
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .csv_repository import CSVGraphRepository
from .dijkstra_solver import DijkstraRouteSolver
from .stream_reader import StreamGraphReader

__all__ = ["CSVGraphRepository", "DijkstraRouteSolver", "StreamGraphReader"]
