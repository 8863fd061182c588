"""Immutable graph with adjacency-list and adjacency-matrix representations."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from graphwalk._errors import InvalidVertexIndexError

logger = logging.getLogger(__name__)


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise InvalidVertexIndexError(vertex, vertex_count)


@dataclass(frozen=True, slots=True)
class Graph:
    """A graph over the vertices ``0..vertex_count-1``.

    The graph holds two representations built from edge input:

    - ``adjacency[i]`` lists the neighbors of vertex ``i`` in edge-insertion order.
    - ``matrix[i][j]`` is True iff the edge ``(i, j)`` was inserted.

    Undirected graphs store every edge in both directions. Neither
    representation changes after construction.

    Attributes:
        vertex_count: Number of vertices.
        adjacency: Neighbor tuples, indexed by vertex.
        matrix: ``vertex_count x vertex_count`` edge-presence grid.
        directed: Whether edges were inserted one way only.

    """

    vertex_count: int
    adjacency: tuple[tuple[int, ...], ...]
    matrix: tuple[tuple[bool, ...], ...]
    directed: bool = False

    @classmethod
    def from_edges(
        cls,
        vertex_count: int,
        edges: Iterable[tuple[int, int]],
        *,
        directed: bool = False,
    ) -> Graph:
        """Build a graph from 0-based ``(source, dest)`` edges.

        Both representations are derived from the same edges, so they always agree.

        Args:
            vertex_count: Number of vertices.
            edges: 0-based edge pairs. Duplicates and self-loops are kept as given.
            directed: Insert ``source -> dest`` only instead of both directions.

        Returns:
            A new Graph instance.

        Raises:
            InvalidVertexIndexError: If an endpoint is outside ``[0, vertex_count)``.

        Example:
            >>> graph = Graph.from_edges(3, [(0, 1), (1, 2)])
            >>> graph.neighbors(1)
            (0, 2)

        """
        edge_list = list(edges)
        return cls.from_edge_batches(vertex_count, edge_list, edge_list, directed=directed)

    @classmethod
    def from_edge_batches(
        cls,
        vertex_count: int,
        matrix_edges: Iterable[tuple[int, int]],
        list_edges: Iterable[tuple[int, int]],
        *,
        directed: bool = False,
    ) -> Graph:
        """Build a graph whose matrix and adjacency list come from separate edge batches.

        The two representations are not reconciled and may disagree.

        Args:
            vertex_count: Number of vertices.
            matrix_edges: 0-based edges inserted into the adjacency matrix.
            list_edges: 0-based edges inserted into the adjacency list.
            directed: Insert ``source -> dest`` only instead of both directions.

        Returns:
            A new Graph instance.

        Raises:
            InvalidVertexIndexError: If an endpoint is outside ``[0, vertex_count)``.

        """
        if vertex_count < 0:
            msg = f"vertex_count must be non-negative, got {vertex_count}"
            raise ValueError(msg)

        matrix = [[False] * vertex_count for _ in range(vertex_count)]
        for src, dst in matrix_edges:
            _check_vertex(src, vertex_count)
            _check_vertex(dst, vertex_count)
            matrix[src][dst] = True
            if not directed:
                matrix[dst][src] = True

        adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
        edge_total = 0
        for src, dst in list_edges:
            _check_vertex(src, vertex_count)
            _check_vertex(dst, vertex_count)
            adjacency[src].append(dst)
            if not directed:
                adjacency[dst].append(src)
            edge_total += 1

        logger.debug(
            "Built %s graph with %d vertices and %d edges",
            "directed" if directed else "undirected",
            vertex_count,
            edge_total,
        )
        return cls(
            vertex_count=vertex_count,
            adjacency=tuple(tuple(neighbors) for neighbors in adjacency),
            matrix=tuple(tuple(row) for row in matrix),
            directed=directed,
        )

    def vertices(self) -> range:
        """All vertex indices in ascending order."""
        return range(self.vertex_count)

    def neighbors(self, vertex: int) -> tuple[int, ...]:
        """Get the neighbors of a vertex in adjacency-list order."""
        return self.adjacency[vertex]

    def has_edge(self, source: int, dest: int) -> bool:
        """Check the adjacency matrix for the edge ``(source, dest)``."""
        return self.matrix[source][dest]

    def edges(self) -> Iterator[tuple[int, int]]:
        """Iterate over ``(source, dest)`` pairs of the adjacency list.

        Undirected edges are yielded once per direction.
        """
        for src, neighbors in enumerate(self.adjacency):
            for dst in neighbors:
                yield src, dst

    def in_degrees(self) -> list[int]:
        """Count the edges entering each vertex over the adjacency list.

        Returns:
            List where index ``i`` holds the in-degree of vertex ``i``.

        """
        indegree = [0] * self.vertex_count
        for neighbors in self.adjacency:
            for dst in neighbors:
                indegree[dst] += 1
        return indegree

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return self.vertex_count

    def __contains__(self, vertex: object) -> bool:
        """Check if a vertex index belongs to the graph."""
        return isinstance(vertex, int) and 0 <= vertex < self.vertex_count
