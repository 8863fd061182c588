"""Graph module providing the graph representation and its algorithms.

This module contains:
- Graph: An immutable graph with adjacency-list and adjacency-matrix forms
- bfs / dfs: Traversals, single-source and full-graph sweeps
- dfs_topological_sort / kahn_topological_sort: Orderings for directed acyclic graphs
"""

from ._graph import Graph
from ._topological import dfs_topological_sort, is_topological_order, kahn_topological_sort
from ._traversal import bfs, bfs_components, bfs_sweep, dfs, dfs_from, new_visited

__all__ = [
    "Graph",
    "bfs",
    "bfs_components",
    "bfs_sweep",
    "dfs",
    "dfs_from",
    "dfs_topological_sort",
    "is_topological_order",
    "kahn_topological_sort",
    "new_visited",
]
