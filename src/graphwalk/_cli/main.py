import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from graphwalk._errors import CycleError, GraphInputError, InvalidVertexIndexError
from graphwalk._graph import (
    Graph,
    bfs,
    dfs,
    dfs_topological_sort,
    kahn_topological_sort,
    new_visited,
)
from graphwalk._io import read_graph

from .config import ConfigError, GraphwalkConfig, get_config
from .render import format_order, render_adjacency_list, render_adjacency_matrix

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console(highlight=False, soft_wrap=True)

EXIT_CYCLE = 1
EXIT_BAD_INPUT = 2

InputOption = Annotated[
    Path | None,
    typer.Option("-i", "--input", help="Read edges from this file instead of stdin"),
]
VerticesOption = Annotated[
    int | None,
    typer.Option("-n", "--vertices", min=0, help="Number of vertices (default from config: 10)"),
]
EdgesOption = Annotated[
    int | None,
    typer.Option("-e", "--edges", min=0, help="Number of edges to read (default from config: 5)"),
]
DirectedOption = Annotated[
    bool | None,
    typer.Option("--directed/--undirected", help="Insert edges one way only"),
]
BatchesOption = Annotated[
    bool | None,
    typer.Option(
        "--separate-batches/--single-batch",
        help="Read one edge batch for the adjacency matrix and a second one for the adjacency list",
    ),
]


class TopoMethod(StrEnum):
    """Topological sort algorithm."""

    KAHN = "kahn"
    DFS = "dfs"


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Graphwalk CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        force=True,
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _fail(message: str, code: int) -> typer.Exit:
    err_console.print(f"[red]✗ {escape(message)}[/red]")
    return typer.Exit(code=code)


def _load_config() -> GraphwalkConfig:
    try:
        config = get_config()
    except ConfigError as e:
        raise _fail(str(e), EXIT_BAD_INPUT) from e
    if config.project_root is not None:
        logger.debug(f"Loaded configuration from {config.project_root / 'pyproject.toml'}")
    return config


def _load_graph(  # noqa: PLR0913
    config: GraphwalkConfig,
    input_path: Path | None,
    vertices: int | None,
    edges: int | None,
    directed: bool | None,
    separate_batches: bool | None,
) -> Graph:
    """Read a graph from ``input_path`` or stdin, with CLI options overriding config."""
    vertex_count = config.vertex_count if vertices is None else vertices
    edge_count = config.edge_count if edges is None else edges
    is_directed = config.directed if directed is None else directed
    two_batches = config.separate_batches if separate_batches is None else separate_batches

    logger.debug(
        f"Reading {edge_count} edge(s) per batch for {vertex_count} vertices "
        f"({'directed' if is_directed else 'undirected'}, {'two batches' if two_batches else 'one batch'})",
    )
    try:
        if input_path is None:
            return read_graph(
                sys.stdin,
                vertex_count,
                edge_count,
                directed=is_directed,
                separate_batches=two_batches,
            )
        with input_path.open(encoding="utf-8") as f:
            return read_graph(f, vertex_count, edge_count, directed=is_directed, separate_batches=two_batches)
    except GraphInputError as e:
        raise _fail(f"{e.kind}: {e}", EXIT_BAD_INPUT) from e
    except OSError as e:
        raise _fail(f"Cannot read {input_path}: {e.strerror}", EXIT_BAD_INPUT) from e


@app.command(name="bfs")
def bfs_command(  # noqa: PLR0913
    *,
    source: Annotated[int, typer.Option("-s", "--source", help="1-based vertex to start from")] = 1,
    input: InputOption = None,  # noqa: A002
    vertices: VerticesOption = None,
    edges: EdgesOption = None,
    directed: DirectedOption = None,
    separate_batches: BatchesOption = None,
) -> None:
    """Breadth-first order from a source, then from each vertex it did not reach."""
    config = _load_config()
    graph = _load_graph(config, input, vertices, edges, directed, separate_batches)

    if not 1 <= source <= graph.vertex_count:
        error = InvalidVertexIndexError(source, graph.vertex_count, one_based=True)
        raise _fail(f"{error.kind}: {error}", EXIT_BAD_INPUT)

    visited = new_visited(graph)
    order = bfs(graph, visited, source - 1)
    for vertex in graph.vertices():
        if not visited[vertex]:
            logger.debug(f"Vertex {vertex} not reached, starting another BFS")
            order.extend(bfs(graph, visited, vertex))

    out_console.print(format_order(order))


@app.command(name="dfs")
def dfs_command(
    *,
    input: InputOption = None,  # noqa: A002
    vertices: VerticesOption = None,
    edges: EdgesOption = None,
    directed: DirectedOption = None,
    separate_batches: BatchesOption = None,
) -> None:
    """Depth-first order over the whole graph, printed as vertices are visited."""
    config = _load_config()
    graph = _load_graph(config, input, vertices, edges, directed, separate_batches)

    dfs(graph, on_visit=lambda vertex: out_console.print(vertex, end=" "))
    out_console.print()


@app.command()
def topo(  # noqa: PLR0913
    *,
    method: Annotated[TopoMethod, typer.Option("-m", "--method", help="Sorting algorithm")] = TopoMethod.KAHN,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail on cycles (the dfs method does not check otherwise)"),
    ] = False,
    input: InputOption = None,  # noqa: A002
    vertices: VerticesOption = None,
    edges: EdgesOption = None,
    directed: DirectedOption = None,
    separate_batches: BatchesOption = None,
) -> None:
    """Topological order of a directed graph."""
    config = _load_config()
    graph = _load_graph(config, input, vertices, edges, directed, separate_batches)

    if not graph.directed:
        logger.warning("Topological order is only meaningful for directed graphs, pass --directed")

    if method is TopoMethod.DFS:
        try:
            order = dfs_topological_sort(graph, detect_cycles=strict)
        except CycleError as e:
            raise _fail(f"Graph has a cycle: {e}", EXIT_CYCLE) from e
        out_console.print(format_order(order))
        return

    order = kahn_topological_sort(graph)
    out_console.print(format_order(order))
    if len(order) != graph.vertex_count:
        raise _fail(
            f"Graph has a cycle: only {len(order)} of {graph.vertex_count} vertices could be ordered",
            EXIT_CYCLE,
        )


@app.command()
def show(
    *,
    input: InputOption = None,  # noqa: A002
    vertices: VerticesOption = None,
    edges: EdgesOption = None,
    directed: DirectedOption = None,
    separate_batches: BatchesOption = None,
) -> None:
    """Show the adjacency list and adjacency matrix of the graph."""
    config = _load_config()
    graph = _load_graph(config, input, vertices, edges, directed, separate_batches)

    render_adjacency_list(graph, out_console)
    out_console.print()
    render_adjacency_matrix(graph, out_console)


if __name__ == "__main__":
    app()
