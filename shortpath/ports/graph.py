"""Graph ports - Abstractions for graph storage and routing.

These protocols define the contracts between the graph store and the
shortest-path engine. The engine only reads edge structure through
GraphStorePort; all per-query state lives in the engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Edge, NodeView, PathResult


class GraphStorePort(Protocol):
    """Port for a graph of named nodes kept in a dense arena.

    Implementation: graph/store.py
    """

    def __len__(self) -> int:
        """Return the number of arena slots (nodes)."""
        ...

    def slot_of(self, name: str) -> Optional[int]:
        """Return the arena slot for a node name, or None if absent."""
        ...

    def name_at(self, slot: int) -> str:
        """Return the node name stored in an arena slot."""
        ...

    def out_edges(self, slot: int) -> Sequence[Edge]:
        """Return the outgoing edges of the node in a slot."""
        ...

    def nodes(self) -> Iterator[NodeView]:
        """Enumerate nodes with their outgoing (target, weight) pairs."""
        ...


class PathSolverPort(Protocol):
    """Port for shortest-path computation.

    Implementation: graph/dijkstra.py (DijkstraPathSolver)
    """

    def solve(self, graph: GraphStorePort, source: str, dest: str) -> PathResult:
        """Find the shortest path between two nodes.

        Args:
            graph: The graph to search.
            source: Source node name.
            dest: Destination node name.

        Returns:
            PathResult with the node names and total distance.
        """
        ...
