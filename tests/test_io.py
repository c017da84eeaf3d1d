"""
Tests for reading graph descriptions.
"""

import pytest

from force_layout import Edge, parse_description, parse_graph, read_graph
from force_layout.validation import GraphFormatError, InvalidTopologyError


class TestParseDescription:
    """Tests for the line-based text format."""

    def test_triangle(self):
        """Node count line followed by edge lines."""
        count, edges = parse_description("3\n0 1\n1 2\n2 0")

        assert count == 3
        assert edges == [Edge(0, 1), Edge(1, 2), Edge(2, 0)]

    def test_blank_lines_and_whitespace(self):
        """Blank lines and extra whitespace are ignored."""
        count, edges = parse_description("\n  4 \n\n0\t1\n  2   3  \n\n")

        assert count == 4
        assert edges == [Edge(0, 1), Edge(2, 3)]

    def test_lines_iterable(self):
        """An iterable of lines is accepted."""
        count, edges = parse_description(["2\n", "0 1\n"])

        assert count == 2
        assert edges == [Edge(0, 1)]

    def test_nodes_without_edges(self):
        """A lone node count gives no edges."""
        assert parse_description("5\n") == (5, [])

    def test_empty_document(self):
        """An empty document is rejected."""
        with pytest.raises(GraphFormatError, match="empty"):
            parse_description("\n\n")

    def test_bad_node_count(self):
        """The node count must be an integer."""
        with pytest.raises(GraphFormatError, match="line 1"):
            parse_description("three\n0 1")

    def test_node_count_with_extra_tokens(self):
        """The first line holds only the node count."""
        with pytest.raises(GraphFormatError, match="single node count"):
            parse_description("3 4\n0 1")

    def test_negative_node_count(self):
        """Negative node counts are rejected."""
        with pytest.raises(GraphFormatError, match=">= 0"):
            parse_description("-2")

    def test_bad_edge_token(self):
        """Edge tokens must be integers; the line number is reported."""
        with pytest.raises(GraphFormatError, match="line 3: 'x' is not an integer"):
            parse_description("3\n0 1\n1 x")

    def test_edge_wrong_arity(self):
        """Edge lines hold exactly two indices."""
        with pytest.raises(GraphFormatError, match="line 2"):
            parse_description("3\n0 1 2")
        with pytest.raises(GraphFormatError, match="line 2"):
            parse_description("3\n0")


class TestParseGraph:
    """Tests for building graphs from descriptions."""

    def test_triangle_seeded_on_circle(self):
        """Triangle nodes start at 0, 120 and 240 degrees."""
        graph = parse_graph("3\n0 1\n1 2\n2 0")

        assert graph.position(0) == pytest.approx((1.0, 0.0), abs=1e-9)
        assert graph.position(1) == pytest.approx((-0.5, 0.866), abs=1e-3)
        assert graph.position(2) == pytest.approx((-0.5, -0.866), abs=1e-3)
        assert graph.edge_count == 3

    def test_empty_graph(self):
        """A node count of zero gives an empty graph."""
        graph = parse_graph("0")

        assert graph.node_count == 0

    def test_out_of_range_edge(self):
        """Edges to missing nodes fail before any simulation."""
        with pytest.raises(InvalidTopologyError):
            parse_graph("2\n0 2")

    def test_read_graph(self, tmp_path):
        """read_graph loads a file."""
        path = tmp_path / "square.txt"
        path.write_text("4\n0 1\n1 2\n2 3\n3 0\n")

        graph = read_graph(path)

        assert graph.node_count == 4
        assert graph.edges[-1] == Edge(3, 0)

    def test_read_missing_file(self, tmp_path):
        """A missing file raises OSError."""
        with pytest.raises(OSError):
            read_graph(tmp_path / "missing.txt")

    def test_read_binary_file(self, tmp_path):
        """Bytes that are not UTF-8 raise GraphFormatError naming the file."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"3\n0 1\n\xff\xfe 2\n")

        with pytest.raises(GraphFormatError, match="not a UTF-8 text file"):
            read_graph(path)
