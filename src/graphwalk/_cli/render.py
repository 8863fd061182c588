"""Rich rendering utilities for graph representations and vertex orders."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from graphwalk._graph import Graph


def format_order(order: Sequence[int]) -> str:
    """Format a vertex order as space-separated 0-based indices."""
    return " ".join(str(vertex) for vertex in order)


def render_adjacency_list(graph: Graph, console: Console) -> None:
    """Render the adjacency list as a Rich table.

    Args:
        graph: Graph to render.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan", title="Adjacency list")
    table.add_column("Vertex", justify="right", style="bold")
    table.add_column("Neighbors")
    table.add_column("Degree", justify="right")

    for vertex in graph.vertices():
        neighbors = graph.neighbors(vertex)
        table.add_row(
            str(vertex),
            format_order(neighbors) if neighbors else "[dim]none[/dim]",
            str(len(neighbors)),
        )

    console.print(table)


def render_adjacency_matrix(graph: Graph, console: Console) -> None:
    """Render the adjacency matrix as a Rich table of 0/1 cells.

    Args:
        graph: Graph to render.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan", title="Adjacency matrix", box=None)
    table.add_column("", justify="right", style="bold cyan")
    for vertex in graph.vertices():
        table.add_column(str(vertex), justify="right")

    for source in graph.vertices():
        cells = ["[green]1[/green]" if graph.has_edge(source, dest) else "[dim]0[/dim]" for dest in graph.vertices()]
        table.add_row(str(source), *cells)

    console.print(table)
