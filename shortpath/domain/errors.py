"""Typed domain errors for shortpath.

All errors inherit from ShortestPathError and can optionally wrap a
root cause exception for debugging.

An unreachable destination is not an error: it is reported through
PathResult (empty path, distance -1).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ShortestPathError(Exception):
    """Base error for the shortpath domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidReferenceError(ShortestPathError):
    """An operation named a node that is not in the graph.

    Attributes:
        node_name: The node name that was not found
    """

    node_name: str = ""


@dataclass
class GraphError(ShortestPathError):
    """Malformed graph definition (edge line, weight).

    Attributes:
        line: The offending input line, if any
    """

    line: Optional[str] = None


@dataclass
class ConfigurationError(ShortestPathError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
