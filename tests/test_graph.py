"""Tests for Graph construction and queries."""

import dataclasses

import pytest

from graphwalk import ErrorKind, Graph, InvalidVertexIndexError


class TestGraphConstruction:
    """Tests for Graph.from_edges."""

    def test_empty_graph(self) -> None:
        graph = Graph.from_edges(0, [])
        assert len(graph) == 0
        assert graph.adjacency == ()
        assert graph.matrix == ()

    def test_isolated_vertices(self) -> None:
        graph = Graph.from_edges(3, [])
        assert graph.adjacency == ((), (), ())
        assert not any(any(row) for row in graph.matrix)

    def test_undirected_edges_are_symmetric(self) -> None:
        graph = Graph.from_edges(3, [(0, 1), (1, 2)])
        assert graph.neighbors(0) == (1,)
        assert graph.neighbors(1) == (0, 2)
        assert graph.neighbors(2) == (1,)
        for src, dst in [(0, 1), (1, 0), (1, 2), (2, 1)]:
            assert graph.has_edge(src, dst)
        assert not graph.has_edge(0, 2)

    def test_directed_edges_one_way(self) -> None:
        graph = Graph.from_edges(3, [(0, 1), (1, 2)], directed=True)
        assert graph.neighbors(0) == (1,)
        assert graph.neighbors(1) == (2,)
        assert graph.neighbors(2) == ()
        assert graph.has_edge(0, 1)
        assert not graph.has_edge(1, 0)

    def test_neighbor_order_follows_insertion_order(self) -> None:
        graph = Graph.from_edges(4, [(0, 3), (0, 1), (0, 2)])
        assert graph.neighbors(0) == (3, 1, 2)

    def test_duplicate_edges_are_kept(self) -> None:
        graph = Graph.from_edges(2, [(0, 1), (0, 1)])
        assert graph.neighbors(0) == (1, 1)
        assert graph.has_edge(0, 1)

    def test_accepts_generator(self) -> None:
        graph = Graph.from_edges(3, ((i, i + 1) for i in range(2)))
        assert graph.neighbors(1) == (0, 2)
        assert graph.has_edge(1, 2)

    def test_out_of_range_vertex(self) -> None:
        with pytest.raises(InvalidVertexIndexError) as exc_info:
            Graph.from_edges(3, [(0, 3)])
        assert exc_info.value.vertex == 3
        assert exc_info.value.vertex_count == 3
        assert exc_info.value.kind is ErrorKind.INVALID_VERTEX_INDEX

    def test_negative_vertex(self) -> None:
        with pytest.raises(InvalidVertexIndexError, match="out of range"):
            Graph.from_edges(3, [(-1, 0)])

    def test_negative_vertex_count(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Graph.from_edges(-1, [])

    def test_is_immutable(self) -> None:
        graph = Graph.from_edges(2, [(0, 1)])
        with pytest.raises(dataclasses.FrozenInstanceError):
            graph.vertex_count = 3  # type: ignore[misc]


class TestGraphEdgeBatches:
    """Tests for building the two representations from separate batches."""

    def test_same_batches_agree(self) -> None:
        edges = [(0, 1), (1, 2)]
        assert Graph.from_edge_batches(3, edges, edges) == Graph.from_edges(3, edges)

    def test_different_batches_diverge(self) -> None:
        graph = Graph.from_edge_batches(3, [(0, 1)], [(1, 2)])
        assert graph.has_edge(0, 1)
        assert not graph.has_edge(1, 2)
        assert graph.neighbors(0) == ()
        assert graph.neighbors(1) == (2,)

    def test_validates_both_batches(self) -> None:
        with pytest.raises(InvalidVertexIndexError):
            Graph.from_edge_batches(2, [(0, 1)], [(0, 5)])


class TestGraphQueries:
    """Tests for Graph query methods."""

    def test_vertices(self) -> None:
        assert list(Graph.from_edges(4, []).vertices()) == [0, 1, 2, 3]

    def test_edges_undirected_yield_both_directions(self) -> None:
        graph = Graph.from_edges(2, [(0, 1)])
        assert list(graph.edges()) == [(0, 1), (1, 0)]

    def test_edges_directed(self) -> None:
        graph = Graph.from_edges(3, [(2, 0), (0, 1)], directed=True)
        assert list(graph.edges()) == [(0, 1), (2, 0)]

    def test_in_degrees(self) -> None:
        graph = Graph.from_edges(4, [(0, 1), (0, 2), (1, 3), (2, 3)], directed=True)
        assert graph.in_degrees() == [0, 1, 1, 2]

    def test_in_degrees_undirected_equal_degree(self) -> None:
        graph = Graph.from_edges(3, [(0, 1), (1, 2)])
        assert graph.in_degrees() == [1, 2, 1]

    def test_contains(self) -> None:
        graph = Graph.from_edges(2, [])
        assert 0 in graph
        assert 1 in graph
        assert 2 not in graph
        assert -1 not in graph
        assert "0" not in graph
