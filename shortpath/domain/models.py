"""Immutable domain models for shortpath.

All models are frozen dataclasses with slots. They have no external
dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field

NO_PATH_DISTANCE = -1


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted edge owned by its source node.

    Attributes:
        target: Arena slot of the target node
        weight: Non-negative integer weight
    """

    target: int
    weight: int


@dataclass(frozen=True, slots=True)
class NodeView:
    """Read-only view of a node for display and inspection.

    Attributes:
        name: Normalized node name
        edges: Outgoing (target name, weight) pairs in insertion order
    """

    name: str
    edges: tuple[tuple[str, int], ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query.

    Attributes:
        node_names: Ordered node names from source to destination
        distance: Total weight of the path, or -1 when no path exists
    """

    node_names: tuple[str, ...] = field(default_factory=tuple)
    distance: int = NO_PATH_DISTANCE

    @property
    def found(self) -> bool:
        """Check if a path was found."""
        return self.distance != NO_PATH_DISTANCE

    @property
    def num_stops(self) -> int:
        """Return the number of nodes on the path."""
        return len(self.node_names)

    @classmethod
    def unreachable(cls) -> PathResult:
        return cls(node_names=(), distance=NO_PATH_DISTANCE)
