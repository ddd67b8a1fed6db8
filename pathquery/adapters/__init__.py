"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the graph core to:
- Input sources (text streams, CSV files)
- The Dijkstra route solver
- Text rendering of routes
"""
