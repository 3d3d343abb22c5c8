"""
Unit tests for loading and copying the maze graph.
"""

import networkx as nx
import pytest

from graph_utils import (
    DEFAULT_GRAPH_FILE,
    EDGE_COUNT,
    GraphError,
    GraphLoadError,
    MalformedGraphRecord,
    copy_graph,
    graph_infinity,
    load_graph,
    parse_records,
    remove_vertex,
)
from nodes import Node


class TestLoadGraph:
    """Tests for reading the graph definition file."""

    def test_canonical_maze(self, maze):
        assert maze.number_of_nodes() == 7
        assert maze.number_of_edges() == EDGE_COUNT
        assert maze[Node.EXIT][Node.NEST]["weight"] == 2
        assert maze[Node.MEDICINE][Node.WHEEL]["weight"] == 4

    def test_base_graph_is_frozen(self, maze):
        assert nx.is_frozen(maze)
        with pytest.raises(nx.NetworkXError):
            maze.add_edge(Node.EXIT, Node.MEDICINE, weight=1)

    def test_missing_file(self, tmp_path):
        path = tmp_path / "nope"
        with pytest.raises(GraphLoadError) as exc:
            load_graph(str(path))
        assert exc.value.path == str(path)
        assert isinstance(exc.value.__cause__, OSError)

    def test_load_error_is_distinct_from_malformed(self, tmp_path):
        with pytest.raises(GraphLoadError):
            load_graph(str(tmp_path / "nope"))
        assert not issubclass(GraphLoadError, MalformedGraphRecord)
        assert issubclass(GraphLoadError, GraphError)
        assert issubclass(MalformedGraphRecord, GraphError)

    def test_records_may_span_lines(self, write_graph):
        G = load_graph(write_graph("E N 5 N\nF 3"), edge_count=2)
        assert G[Node.EXIT][Node.NEST]["weight"] == 5
        assert G[Node.NEST][Node.FOOD]["weight"] == 3

    def test_all_nodes_present_without_edges(self, write_graph):
        G = load_graph(write_graph("E N 5"), edge_count=None)
        assert set(G.nodes()) == set(Node)
        assert G.number_of_edges() == 1

    def test_short_file(self, write_graph):
        with pytest.raises(MalformedGraphRecord) as exc:
            load_graph(write_graph("E N 5\nN F 3\n"))
        assert exc.value.record_number == 3
        assert "expected 18 records, found 2" in str(exc.value)

    def test_too_many_records(self, write_graph):
        with open(DEFAULT_GRAPH_FILE) as f:
            text = f.read() + "E M 9\n"
        with pytest.raises(MalformedGraphRecord) as exc:
            load_graph(write_graph(text))
        assert exc.value.record_number == EDGE_COUNT + 1

    def test_any_count_when_disabled(self, write_graph):
        G = load_graph(write_graph("E N 5\nN F 3\n"), edge_count=None)
        assert G.number_of_edges() == 2


class TestParseRecords:
    """Tests for record-level validation."""

    def test_parses_triples(self):
        assert parse_records("E N 5\nN F 3") == [(Node.EXIT, Node.NEST, 5), (Node.NEST, Node.FOOD, 3)]

    def test_empty_text(self):
        assert parse_records("   \n") == []

    def test_unknown_label(self):
        with pytest.raises(MalformedGraphRecord) as exc:
            parse_records("E N 5\nE Z 3")
        assert exc.value.record_number == 2

    def test_non_integer_weight(self):
        with pytest.raises(MalformedGraphRecord, match="not an integer"):
            parse_records("E N five")

    def test_negative_weight(self):
        with pytest.raises(MalformedGraphRecord, match="negative"):
            parse_records("E N -1")

    def test_truncated_record(self):
        with pytest.raises(MalformedGraphRecord, match="mid-record") as exc:
            parse_records("E N 5 N F")
        assert exc.value.record_number == 2


class TestWorkingGraph:
    """Tests for the per-search working copy."""

    def test_copy_is_mutable_and_independent(self, maze):
        working = copy_graph(maze)
        assert not nx.is_frozen(working)
        remove_vertex(working, Node.FOOD)
        assert working.in_degree(Node.FOOD) == 0
        assert maze.in_degree(Node.FOOD) == 3

    def test_remove_vertex_keeps_outgoing_edges(self, maze):
        working = copy_graph(maze)
        remove_vertex(working, Node.FOOD)
        assert set(working.successors(Node.FOOD)) == {Node.NEST, Node.A, Node.B}
        assert working.number_of_edges() == EDGE_COUNT - 3

    def test_copy_keeps_weights(self, maze):
        working = copy_graph(maze)
        assert working[Node.WHEEL][Node.MEDICINE]["weight"] == 4

    def test_infinity_exceeds_every_path(self, maze):
        assert graph_infinity(maze) == 39
        lengths = dict(nx.all_pairs_dijkstra_path_length(maze))
        assert all(d < graph_infinity(maze) for row in lengths.values() for d in row.values())
