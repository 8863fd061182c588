"""Topological sorts: DFS finish-order reversal and Kahn's in-degree algorithm."""

from __future__ import annotations

import logging
from collections import deque
from enum import IntEnum
from typing import TYPE_CHECKING

from graphwalk._errors import CycleError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._graph import Graph

logger = logging.getLogger(__name__)


class _Mark(IntEnum):
    UNVISITED = 0
    IN_PROGRESS = 1
    DONE = 2


def dfs_topological_sort(graph: Graph, *, detect_cycles: bool = False) -> list[int]:
    """Sort a graph topologically by reversing DFS finish order.

    Every vertex is pushed onto a stack once all of its unvisited neighbors
    have finished; popping the stack gives reverse post-order, which is a
    topological order when the graph is a DAG.

    Without ``detect_cycles`` a cyclic graph is not reported: the result
    still contains every vertex but the back-edge endpoints are out of order.

    Args:
        graph: The graph to sort.
        detect_cycles: Raise on the first edge into a vertex whose DFS has not
            finished yet.

    Returns:
        All vertices in topological order (if the graph is acyclic).

    Raises:
        CycleError: If ``detect_cycles`` is set and the graph contains a cycle.

    Example:
        >>> g = Graph.from_edges(3, [(0, 1), (1, 2)], directed=True)
        >>> dfs_topological_sort(g)
        [0, 1, 2]

    """
    marks = [_Mark.UNVISITED] * graph.vertex_count
    finished: list[int] = []

    for root in graph.vertices():
        if marks[root] is not _Mark.UNVISITED:
            continue
        marks[root] = _Mark.IN_PROGRESS
        stack = [(root, 0)]
        while stack:
            current, index = stack[-1]
            neighbors = graph.neighbors(current)
            if index == len(neighbors):
                stack.pop()
                marks[current] = _Mark.DONE
                finished.append(current)
                continue
            stack[-1] = (current, index + 1)
            child = neighbors[index]
            if marks[child] is _Mark.UNVISITED:
                marks[child] = _Mark.IN_PROGRESS
                stack.append((child, 0))
            elif detect_cycles and marks[child] is _Mark.IN_PROGRESS:
                raise CycleError((current, child))

    finished.reverse()
    return finished


def kahn_topological_sort(graph: Graph) -> list[int]:
    """Sort a graph topologically with Kahn's algorithm.

    Vertices with in-degree 0 are queued in index order; each dequeued vertex
    decrements the in-degree of its neighbors, and a neighbor is queued when
    its in-degree reaches exactly 0.

    Vertices on a cycle never reach in-degree 0, so for a cyclic graph the
    result is shorter than ``graph.vertex_count``. Callers check the length
    to detect a cycle; no exception is raised.

    Args:
        graph: The graph to sort.

    Returns:
        Vertices in topological order, complete only if the graph is acyclic.

    Example:
        >>> g = Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)], directed=True)
        >>> kahn_topological_sort(g)
        []

    """
    indegree = graph.in_degrees()
    queue = deque(vertex for vertex in graph.vertices() if indegree[vertex] == 0)
    order: list[int] = []

    while queue:
        current = queue.popleft()
        order.append(current)
        for neighbor in graph.neighbors(current):
            indegree[neighbor] -= 1
            if indegree[neighbor] == 0:
                queue.append(neighbor)

    if len(order) != graph.vertex_count:
        logger.debug("Kahn's sort stopped after %d of %d vertices", len(order), graph.vertex_count)
    return order


def is_topological_order(graph: Graph, order: Sequence[int]) -> bool:
    """Check that ``order`` lists every vertex once with each edge pointing forward."""
    if sorted(order) != list(graph.vertices()):
        return False
    position = {vertex: i for i, vertex in enumerate(order)}
    return all(position[src] < position[dst] for src, dst in graph.edges())
