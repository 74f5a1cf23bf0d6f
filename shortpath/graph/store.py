"""In-memory graph store.

Nodes live in a dense arena: each name maps to an integer slot, and each
slot owns its list of outgoing edges. Edges reference their target by
slot, so predecessor links computed by the engine are plain indices.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence

from ..config import GraphConfig, get_config
from ..domain.errors import GraphError, InvalidReferenceError
from ..domain.models import Edge, NodeView, PathResult
from ..ports.graph import PathSolverPort
from .dijkstra import DijkstraPathSolver


@dataclass
class Graph:
    """Directed weighted graph keyed by node name.

    Implements GraphStorePort. Node names are normalized (stripped and
    upper-cased) unless ``config.normalize_case`` is off.

    Example:
        graph = Graph()
        for name in "ABC":
            graph.add_node(name)
        graph.add_edge("A", "B", 1)
        graph.add_edge("B", "C", 2, bidirectional=True)
        graph.shortest_path("A", "C")
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    solver: Optional[PathSolverPort] = None

    _slots: Dict[str, int] = field(default_factory=dict, repr=False)
    _names: List[str] = field(default_factory=list, repr=False)
    _edges: List[List[Edge]] = field(default_factory=list, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.solver is None:
            self.solver = DijkstraPathSolver(early_exit=self.config.early_exit)

    def normalize(self, name: str) -> str:
        if self.config.normalize_case:
            return name.strip().upper()
        return name

    def add_node(self, name: str) -> None:
        """Insert a node, replacing any node with the same name.

        A replaced node keeps its slot, so edges targeting it stay valid,
        but its own outgoing edges are dropped.
        """
        key = self.normalize(name)
        slot = self._slots.get(key)
        if slot is not None:
            self._edges[slot] = []
            self._logger.debug("Node replaced", extra={"node": key})
            return

        self._slots[key] = len(self._names)
        self._names.append(key)
        self._edges.append([])
        self._logger.debug("Node added", extra={"node": key})

    def add_edge(
        self,
        from_name: str,
        to_name: str,
        weight: int,
        bidirectional: bool = False,
    ) -> None:
        """Add a directed edge, or a pair of them when bidirectional.

        Args:
            from_name: Source node name.
            to_name: Target node name.
            weight: Non-negative integer weight.
            bidirectional: Also add the reverse edge with the same weight.

        Raises:
            InvalidReferenceError: If either endpoint is not in the graph.
            GraphError: If the weight is negative or not an integer.
        """
        source = self._require(from_name)
        target = self._require(to_name)

        if isinstance(weight, bool) or not isinstance(weight, int):
            raise GraphError(f"Edge weight must be an integer, got {weight!r}")
        if weight < 0:
            raise GraphError(f"Edge weight must be non-negative, got {weight}")

        self._edges[source].append(Edge(target=target, weight=weight))
        if bidirectional:
            self._edges[target].append(Edge(target=source, weight=weight))

        self._logger.debug(
            "Edge added",
            extra={
                "from": self._names[source],
                "to": self._names[target],
                "weight": weight,
                "bidirectional": bidirectional,
            },
        )

    def has_edge(self, from_name: str, to_name: str) -> bool:
        """Check whether any edge leads from ``from_name`` to ``to_name``.

        Returns False when ``from_name`` is not in the graph.
        """
        source = self.slot_of(from_name)
        if source is None:
            return False
        target = self.slot_of(to_name)
        return any(edge.target == target for edge in self._edges[source])

    def has_node(self, name: str) -> bool:
        return self.normalize(name) in self._slots

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_node(name)

    def __len__(self) -> int:
        return len(self._names)

    def slot_of(self, name: str) -> Optional[int]:
        return self._slots.get(self.normalize(name))

    def name_at(self, slot: int) -> str:
        return self._names[slot]

    def out_edges(self, slot: int) -> Sequence[Edge]:
        return self._edges[slot]

    def nodes(self) -> Iterator[NodeView]:
        """Yield every node with its outgoing edges, in insertion order."""
        for slot, name in enumerate(self._names):
            yield NodeView(
                name=name,
                edges=tuple(
                    (self._names[edge.target], edge.weight)
                    for edge in self._edges[slot]
                ),
            )

    def render(self) -> str:
        """Render the graph as text, one line per node."""
        lines = ["Graph Visualization:"]
        for node in self.nodes():
            edges_text = ", ".join(f"{target}({weight})" for target, weight in node.edges)
            lines.append(f"Node {node.name} -> {edges_text}")
        return "\n".join(lines)

    def shortest_path(self, source: str, dest: str) -> PathResult:
        """Find the shortest path between two nodes with Dijkstra.

        Raises:
            InvalidReferenceError: If either node is not in the graph.
        """
        assert self.solver is not None
        return self.solver.solve(self, source, dest)

    def _require(self, name: str) -> int:
        slot = self.slot_of(name)
        if slot is None:
            raise InvalidReferenceError(
                f"Node not in graph: {name}",
                node_name=name,
            )
        return slot
