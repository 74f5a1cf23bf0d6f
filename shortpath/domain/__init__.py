"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    InvalidReferenceError,
    ShortestPathError,
)
from .models import NO_PATH_DISTANCE, Edge, NodeView, PathResult

__all__ = [
    # Models
    "Edge",
    "NodeView",
    "PathResult",
    "NO_PATH_DISTANCE",
    # Errors
    "ShortestPathError",
    "InvalidReferenceError",
    "GraphError",
    "ConfigurationError",
]
