"""Breadth-first and depth-first traversal over a graph's adjacency list."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from ._graph import Graph

logger = logging.getLogger(__name__)

type VisitCallback = Callable[[int], object]


def new_visited(graph: Graph) -> list[bool]:
    """Create a visited set for one sweep over ``graph``, all unvisited."""
    return [False] * graph.vertex_count


def bfs(graph: Graph, visited: list[bool], source: int) -> list[int]:
    """Breadth-first search from ``source``.

    Neighbors are enqueued in adjacency-list order, so vertices come out in
    non-decreasing distance from ``source``. Vertices already marked in
    ``visited`` are never enqueued.

    Args:
        graph: The graph to traverse.
        visited: Visited flags shared by the current sweep. Updated in place.
        source: Starting vertex.

    Returns:
        Vertices in visitation order.

    Example:
        >>> g = Graph.from_edges(4, [(0, 1), (1, 2), (2, 3)])
        >>> bfs(g, new_visited(g), 0)
        [0, 1, 2, 3]

    """
    order: list[int] = []
    visited[source] = True
    queue = deque([source])

    while queue:
        current = queue.popleft()
        order.append(current)
        for neighbor in graph.neighbors(current):
            if not visited[neighbor]:
                visited[neighbor] = True
                queue.append(neighbor)

    logger.debug("BFS from %d reached %d vertices", source, len(order))
    return order


def bfs_components(graph: Graph) -> list[list[int]]:
    """Run BFS from every vertex not reached by an earlier BFS.

    Returns:
        One visitation order per connected component, in order of the
        component's lowest vertex.

    """
    visited = new_visited(graph)
    return [bfs(graph, visited, vertex) for vertex in graph.vertices() if not visited[vertex]]


def bfs_sweep(graph: Graph) -> list[int]:
    """Breadth-first order covering every vertex, including disconnected ones."""
    return [vertex for component in bfs_components(graph) for vertex in component]


def dfs_from(
    graph: Graph,
    visited: list[bool],
    vertex: int,
    on_visit: VisitCallback | None = None,
) -> list[int]:
    """Depth-first pre-order from ``vertex``.

    Uses an explicit stack of ``(vertex, next neighbor index)`` frames, which
    gives the same order as the recursive formulation without depending on
    the interpreter's recursion limit.

    Args:
        graph: The graph to traverse.
        visited: Visited flags shared by the current sweep. Updated in place.
        vertex: Starting vertex.
        on_visit: Called with each vertex when it is first visited.

    Returns:
        Vertices in visitation order.

    """
    order: list[int] = []

    def visit(v: int) -> None:
        visited[v] = True
        order.append(v)
        if on_visit is not None:
            on_visit(v)

    visit(vertex)
    stack = [(vertex, 0)]
    while stack:
        current, index = stack[-1]
        neighbors = graph.neighbors(current)
        # Skip neighbors visited since this frame was last resumed
        while index < len(neighbors) and visited[neighbors[index]]:
            index += 1
        if index == len(neighbors):
            stack.pop()
            continue
        stack[-1] = (current, index + 1)
        child = neighbors[index]
        visit(child)
        stack.append((child, 0))

    return order


def dfs(graph: Graph, on_visit: VisitCallback | None = None) -> list[int]:
    """Depth-first order covering every vertex, including disconnected ones.

    Args:
        graph: The graph to traverse.
        on_visit: Called with each vertex when it is first visited.

    Returns:
        Vertices in visitation order.

    """
    visited = new_visited(graph)
    order: list[int] = []
    for vertex in graph.vertices():
        if not visited[vertex]:
            logger.debug("Starting DFS at %d", vertex)
            order.extend(dfs_from(graph, visited, vertex, on_visit))
    return order
