"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the graph store and the
path-finding engine, keeping the engine swappable and testable.
"""

from .graph import GraphStorePort, PathSolverPort

__all__ = [
    "GraphStorePort",
    "PathSolverPort",
]
