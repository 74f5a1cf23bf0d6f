"""shortpath - single-pair shortest paths over small in-memory graphs.

    from shortpath import Graph

    graph = Graph()
    for name in ("A", "B", "C"):
        graph.add_node(name)
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 2)
    graph.add_edge("A", "C", 4)
    graph.shortest_path("A", "C")  # PathResult(node_names=('A', 'B', 'C'), distance=3)
"""

from .domain import (
    GraphError,
    InvalidReferenceError,
    NodeView,
    PathResult,
    ShortestPathError,
)
from .graph import DijkstraPathSolver, Graph, default_graph, shortest_path

__all__ = [
    "Graph",
    "DijkstraPathSolver",
    "shortest_path",
    "default_graph",
    "PathResult",
    "NodeView",
    "ShortestPathError",
    "InvalidReferenceError",
    "GraphError",
]
