"""Reading 1-based edge pairs from text input."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._errors import InvalidVertexIndexError, MalformedInputError
from ._graph import Graph

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from typing import TextIO

logger = logging.getLogger(__name__)


def iter_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-separated tokens from a text stream, line by line."""
    for line in stream:
        yield from line.split()


def _next_vertex(tokens: Iterator[str], vertex_count: int) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        msg = "Unexpected end of input while reading edges"
        raise MalformedInputError(None, msg) from None

    try:
        vertex = int(token)
    except ValueError:
        msg = f"Expected an integer vertex identifier, got {token!r}"
        raise MalformedInputError(token, msg) from None

    if not 1 <= vertex <= vertex_count:
        raise InvalidVertexIndexError(vertex, vertex_count, one_based=True)
    return vertex - 1


def read_edges(tokens: Iterable[str], edge_count: int, vertex_count: int) -> list[tuple[int, int]]:
    """Read ``edge_count`` pairs of 1-based vertex identifiers.

    Args:
        tokens: Token source. Only the tokens needed for ``edge_count`` pairs
            are consumed, so the same iterator can be read again for a
            following batch.
        edge_count: Number of ``source dest`` pairs to read.
        vertex_count: Number of vertices; identifiers must be in ``[1, vertex_count]``.

    Returns:
        The edges as 0-based ``(source, dest)`` tuples, in input order.

    Raises:
        MalformedInputError: If a token is not an integer or input runs out.
        InvalidVertexIndexError: If an identifier is out of range.

    """
    it = iter(tokens)
    edges: list[tuple[int, int]] = []
    for _ in range(edge_count):
        src = _next_vertex(it, vertex_count)
        dst = _next_vertex(it, vertex_count)
        edges.append((src, dst))
    logger.debug("Read %d edges", len(edges))
    return edges


def read_graph(
    stream: TextIO,
    vertex_count: int,
    edge_count: int,
    *,
    directed: bool = False,
    separate_batches: bool = False,
) -> Graph:
    """Build a graph from 1-based edge pairs on a text stream.

    By default a single batch of ``edge_count`` edges feeds both the adjacency
    matrix and the adjacency list. With ``separate_batches`` two batches are
    read: the first for the matrix, the second for the list.

    Args:
        stream: Text stream with whitespace-separated integers.
        vertex_count: Number of vertices.
        edge_count: Number of edges per batch.
        directed: Insert edges one way only.
        separate_batches: Read one batch per representation.

    Returns:
        The constructed Graph.

    """
    tokens = iter_tokens(stream)
    if not separate_batches:
        edges = read_edges(tokens, edge_count, vertex_count)
        return Graph.from_edges(vertex_count, edges, directed=directed)

    matrix_edges = read_edges(tokens, edge_count, vertex_count)
    list_edges = read_edges(tokens, edge_count, vertex_count)
    if sorted(matrix_edges) != sorted(list_edges):
        logger.warning("Matrix and list edge batches differ; the two representations will disagree")
    return Graph.from_edge_batches(vertex_count, matrix_edges, list_edges, directed=directed)
