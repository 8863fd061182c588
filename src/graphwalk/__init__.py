"""Graph traversal and topological ordering algorithms."""

__all__ = [
    "CycleError",
    "ErrorKind",
    "Graph",
    "GraphInputError",
    "InvalidVertexIndexError",
    "MalformedInputError",
    "bfs",
    "bfs_components",
    "bfs_sweep",
    "dfs",
    "dfs_from",
    "dfs_topological_sort",
    "is_topological_order",
    "iter_tokens",
    "kahn_topological_sort",
    "new_visited",
    "read_edges",
    "read_graph",
]

from ._errors import CycleError, ErrorKind, GraphInputError, InvalidVertexIndexError, MalformedInputError
from ._graph import (
    Graph,
    bfs,
    bfs_components,
    bfs_sweep,
    dfs,
    dfs_from,
    dfs_topological_sort,
    is_topological_order,
    kahn_topological_sort,
    new_visited,
)
from ._io import iter_tokens, read_edges, read_graph
