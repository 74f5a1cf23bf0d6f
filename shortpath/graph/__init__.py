"""Graph store and path-finding algorithms.

This subpackage contains the in-memory graph, Dijkstra's shortest-path
engine, and helpers to build graphs from edge definitions.
"""

from .dijkstra import DijkstraPathSolver, shortest_path
from .load_graph import build_graph, build_graph_from_lines, default_graph, parse_edge_line
from .store import Graph

__all__ = [
    "Graph",
    "DijkstraPathSolver",
    "shortest_path",
    "build_graph",
    "build_graph_from_lines",
    "default_graph",
    "parse_edge_line",
]
