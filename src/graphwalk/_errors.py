"""Error types raised while building graphs from edge input."""

from enum import StrEnum
from typing import Self


class ErrorKind(StrEnum):
    """Category of an edge-input failure.

    Each member carries a docstring describing when it is raised.
    """

    def __new__(cls, value: str, doc: str = "") -> Self:
        """Create a new enum member with a docstring."""
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.__doc__ = doc
        return obj

    INVALID_VERTEX_INDEX = (
        "invalid-vertex-index",
        "A vertex identifier lies outside the graph's vertex range.",
    )
    MALFORMED_INPUT = (
        "malformed-input",
        "A token is not an integer, or the input ended before all edges were read.",
    )


class GraphInputError(Exception):
    """Base class for errors in the edges used to build a graph."""

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, message: str) -> None:
        self.kind = kind
        super().__init__(message)


class InvalidVertexIndexError(GraphInputError):
    """Raised when an edge endpoint is outside ``[0, vertex_count)``."""

    def __init__(self, vertex: int, vertex_count: int, *, one_based: bool = False) -> None:
        self.vertex = vertex
        self.vertex_count = vertex_count
        if one_based:
            valid = f"[1, {vertex_count}]"
        else:
            valid = f"[0, {vertex_count})"
        super().__init__(
            ErrorKind.INVALID_VERTEX_INDEX,
            f"Vertex {vertex} is out of range {valid}",
        )


class MalformedInputError(GraphInputError):
    """Raised when edge input is not a sequence of integer pairs."""

    def __init__(self, token: str | None, message: str) -> None:
        self.token = token
        super().__init__(ErrorKind.MALFORMED_INPUT, message)


class CycleError(Exception):
    """Raised by cycle-checking topological sorts on a back-edge."""

    def __init__(self, edge: tuple[int, int]) -> None:
        self.edge = edge
        super().__init__(f"Cycle detected at edge {edge[0]} -> {edge[1]}")
