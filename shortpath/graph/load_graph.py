"""Building graphs from node names and edge definitions.

Edge definitions come either as tuples or as text lines in the
``FromNode ToNode Weight`` format typed at the console.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple, Union

from ..config import GraphConfig
from ..domain.errors import GraphError
from .store import Graph

EdgeSpec = Union[Tuple[str, str, int], Tuple[str, str, int, bool]]

DEFAULT_NODES = ("A", "B", "C", "D", "E", "F", "G", "H", "I")

DEFAULT_EDGES: Tuple[EdgeSpec, ...] = (
    ("A", "B", 4, True),
    ("A", "C", 6, True),
    ("C", "D", 8, True),
    ("D", "E", 4, True),
    ("D", "G", 1, True),
    ("E", "F", 3, True),
    ("F", "B", 2, True),
    ("F", "H", 6, True),
    ("G", "H", 5, True),
    ("G", "F", 4, True),
    ("E", "I", 8, True),
    ("G", "I", 5, True),
    # One way only
    ("E", "B", 2, False),
)


def parse_edge_line(line: str) -> Tuple[str, str, int]:
    """Parse a ``FromNode ToNode Weight`` line.

    Raises:
        GraphError: If the line does not hold exactly three fields or the
            weight is not a non-negative integer.
    """
    fields = line.split()
    if len(fields) != 3:
        raise GraphError(
            "Edge must be given as 'FromNode ToNode Weight'",
            line=line,
        )

    from_name, to_name, weight_str = fields
    try:
        weight = int(weight_str)
    except ValueError as e:
        raise GraphError("Edge weight must be an integer", line=line, cause=e)
    if weight < 0:
        raise GraphError("Edge weight must be non-negative", line=line)

    return from_name, to_name, weight


def build_graph(
    nodes: Iterable[str],
    edges: Iterable[EdgeSpec],
    config: Optional[GraphConfig] = None,
) -> Graph:
    """Build a graph from node names and edge tuples.

    Each edge is ``(from, to, weight)`` or ``(from, to, weight, bidirectional)``.

    Raises:
        InvalidReferenceError: If an edge names an unknown node.
    """
    graph = Graph(config=config) if config is not None else Graph()
    for name in nodes:
        graph.add_node(name)
    for spec in edges:
        from_name, to_name, weight = spec[0], spec[1], spec[2]
        bidirectional = bool(spec[3]) if len(spec) > 3 else False
        graph.add_edge(from_name, to_name, weight, bidirectional=bidirectional)
    return graph


def build_graph_from_lines(
    nodes: Iterable[str],
    lines: Sequence[str],
    config: Optional[GraphConfig] = None,
) -> Graph:
    """Build a graph from node names and ``FromNode ToNode Weight`` lines.

    Blank lines and lines starting with ``#`` are skipped.
    """
    edges = [
        parse_edge_line(line)
        for line in lines
        if line.strip() and not line.lstrip().startswith("#")
    ]
    return build_graph(nodes, edges, config=config)


def default_graph(config: Optional[GraphConfig] = None) -> Graph:
    """Return the nine-node demo graph."""
    return build_graph(DEFAULT_NODES, DEFAULT_EDGES, config=config)
