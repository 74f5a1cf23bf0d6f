"""Shortest-path computation using Dijkstra's algorithm.

The engine reads edge structure through GraphStorePort and keeps all
per-query state (distances, predecessors, finalized set) in arrays sized
to the graph's arena, so nothing is written back to the graph.

Edge weights must be non-negative. Under that precondition the first
time a node is popped from the heap its distance is final, which is what
makes both the stale-entry skip and the early exit correct.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..config import get_config
from ..domain.errors import InvalidReferenceError
from ..domain.models import PathResult
from ..ports.graph import GraphStorePort

logger = logging.getLogger(__name__)

INFINITY = float("inf")


def _resolve(graph: GraphStorePort, name: str) -> int:
    slot = graph.slot_of(name)
    if slot is None:
        raise InvalidReferenceError(
            f"Node not in graph: {name}",
            node_name=name,
        )
    return slot


def shortest_path(
    graph: GraphStorePort,
    source: str,
    dest: str,
    early_exit: bool = True,
) -> PathResult:
    """Compute the shortest path between two nodes using Dijkstra.

    Parameters
    ----------
    graph:
        Graph store to search.
    source:
        Name of the start node.
    dest:
        Name of the destination node.
    early_exit:
        Stop as soon as ``dest`` is finalized. Turning it off runs the
        queue to exhaustion and returns the same result.

    Returns
    -------
    PathResult
        Node names from ``source`` to ``dest`` (inclusive) and the total
        distance. If no path exists, ``PathResult((), -1)``.

    Raises
    ------
    InvalidReferenceError
        If either node is not in the graph.
    """
    start = _resolve(graph, source)
    end = _resolve(graph, dest)

    size = len(graph)
    distances: List[float] = [INFINITY] * size
    previous: List[Optional[int]] = [None] * size
    visited: List[bool] = [False] * size
    distances[start] = 0

    logger.debug("Solving path", extra={"source": source, "dest": dest, "nodes": size})

    heap: List[Tuple[float, int]] = [(0, start)]

    while heap:
        current_distance, u = heapq.heappop(heap)

        # Stale entry left behind by an earlier relaxation
        if visited[u]:
            continue

        visited[u] = True

        if early_exit and u == end:
            break

        for edge in graph.out_edges(u):
            v = edge.target
            if visited[v]:
                continue
            new_distance = current_distance + edge.weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    if distances[end] == INFINITY:
        logger.info("No path found", extra={"source": source, "dest": dest})
        return PathResult.unreachable()

    path: List[str] = []
    current: Optional[int] = end
    while current is not None:
        path.append(graph.name_at(current))
        current = previous[current]
    path.reverse()

    result = PathResult(node_names=tuple(path), distance=int(distances[end]))
    logger.info(
        "Path found",
        extra={
            "source": source,
            "dest": dest,
            "stops": result.num_stops,
            "distance": result.distance,
        },
    )
    return result


@dataclass
class DijkstraPathSolver:
    """Path solver using Dijkstra's shortest path algorithm.

    Implements PathSolverPort on top of ``shortest_path``.

    Attributes:
        early_exit: Stop once the destination is finalized
    """

    early_exit: bool = field(default_factory=lambda: get_config().graph.early_exit)

    def solve(self, graph: GraphStorePort, source: str, dest: str) -> PathResult:
        """Find the shortest path between two nodes.

        Raises:
            InvalidReferenceError: If either node is not in the graph.
        """
        return shortest_path(graph, source, dest, early_exit=self.early_exit)
