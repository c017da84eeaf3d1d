"""
Tests for the Graph model.
"""

import math

import numpy as np
import pytest

from force_layout import Edge, Graph
from force_layout.validation import (
    DegenerateGeometryError,
    InvalidTopologyError,
    ValidationError,
)

# =============================================================================
# Test Fixtures
# =============================================================================


def create_triangle():
    """Create a triangle graph seeded on the unit circle."""
    return Graph.from_node_count(3, [(0, 1), (1, 2), (2, 0)])


# =============================================================================
# Construction
# =============================================================================


class TestGraphConstruction:
    """Tests for building graphs."""

    def test_from_node_count(self):
        """Nodes are created with contiguous indices."""
        graph = create_triangle()

        assert graph.node_count == 3
        assert graph.edge_count == 3
        assert [n.index for n in graph.nodes] == [0, 1, 2]

    def test_edges_normalized(self):
        """Tuples, dicts and Edge objects all become Edge."""
        graph = Graph.from_node_count(3, [(0, 1), {"start": 1, "end": 2}, Edge(2, 0)])

        assert graph.edges == (Edge(0, 1), Edge(1, 2), Edge(2, 0))
        assert all(isinstance(e, Edge) for e in graph.edges)

    def test_explicit_positions(self):
        """Positions given explicitly are kept."""
        graph = Graph([(0.0, 0.0), (2.5, -1.0)], [(0, 1)])

        assert graph.position(0) == (0.0, 0.0)
        assert graph.position(1) == (2.5, -1.0)

    def test_empty_graph(self):
        """Zero nodes gives an empty graph without error."""
        graph = Graph.from_node_count(0)

        assert graph.node_count == 0
        assert graph.nodes == []
        assert graph.edges == ()
        assert len(graph) == 0

    def test_self_loop_allowed(self):
        """Self loops are valid topology."""
        graph = Graph.from_node_count(2, [(1, 1)])

        assert graph.edges[0].is_self_loop

    def test_out_of_range_edge_fails_fast(self):
        """An edge to a missing node fails at construction."""
        with pytest.raises(InvalidTopologyError, match="end index 3 out of bounds"):
            Graph.from_node_count(3, [(0, 1), (1, 3)])

    def test_negative_edge_index_fails(self):
        """Negative indices are rejected."""
        with pytest.raises(InvalidTopologyError, match="start index -1"):
            Graph.from_node_count(3, [(-1, 0)])

    def test_edge_on_empty_graph_fails(self):
        """No edge can reference a node of an empty graph."""
        with pytest.raises(InvalidTopologyError):
            Graph.from_node_count(0, [(0, 0)])

    def test_negative_node_count_fails(self):
        """A negative node count is rejected."""
        with pytest.raises(ValidationError, match="node count must be >= 0"):
            Graph.from_node_count(-1)

    def test_non_finite_position_fails(self):
        """NaN or infinite positions are rejected before simulation."""
        with pytest.raises(DegenerateGeometryError, match="Node 1"):
            Graph([(0.0, 0.0), (math.nan, 1.0)])
        with pytest.raises(DegenerateGeometryError):
            Graph([(math.inf, 0.0)])


# =============================================================================
# Positions
# =============================================================================


class TestGraphPositions:
    """Tests for reading and writing positions."""

    def test_set_position(self):
        """set_position replaces coordinates."""
        graph = create_triangle()
        graph.set_position(1, 3.0, 4.0)

        assert graph.position(1) == (3.0, 4.0)
        assert graph.nodes[1].x == 3.0

    def test_move(self):
        """move translates a node."""
        graph = Graph([(1.0, 1.0)])
        graph.move(0, 0.5, -2.0)

        assert graph.position(0) == (1.5, -1.0)

    def test_out_of_range_access(self):
        """Accessing a missing node raises."""
        graph = create_triangle()

        with pytest.raises(InvalidTopologyError):
            graph.position(3)
        with pytest.raises(InvalidTopologyError):
            graph.set_position(-1, 0.0, 0.0)

    def test_positions_array_is_copy(self):
        """positions() returns an independent array."""
        graph = Graph([(1.0, 2.0), (3.0, 4.0)])
        arr = graph.positions()

        assert arr.shape == (2, 2)
        np.testing.assert_array_equal(arr, [[1.0, 2.0], [3.0, 4.0]])

        arr[0, 0] = 99.0
        assert graph.position(0) == (1.0, 2.0)

    def test_positions_empty(self):
        """positions() of an empty graph has shape (0, 2)."""
        assert Graph().positions().shape == (0, 2)

    def test_bounds(self):
        """bounds() covers all nodes."""
        graph = Graph([(1.0, -2.0), (-3.0, 4.0), (0.0, 0.0)])

        assert graph.bounds() == (-3.0, -2.0, 1.0, 4.0)

    def test_bounds_empty(self):
        """bounds() of an empty graph is None."""
        assert Graph().bounds() is None


# =============================================================================
# Topology
# =============================================================================


class TestGraphTopology:
    """Tests for topology queries and immutability."""

    def test_edges_immutable(self):
        """The edge container cannot be extended."""
        graph = create_triangle()

        assert isinstance(graph.edges, tuple)
        with pytest.raises(AttributeError):
            graph.edges.append(Edge(0, 1))  # type: ignore[attr-defined]

    def test_degree(self):
        """degree counts endpoints; self loops count twice."""
        graph = Graph.from_node_count(3, [(0, 1), (0, 2), (2, 2)])

        assert graph.degree(0) == 2
        assert graph.degree(1) == 1
        assert graph.degree(2) == 3

    def test_snapshot_independent(self):
        """A snapshot does not follow later position changes."""
        graph = create_triangle()
        snap = graph.snapshot()
        graph.move(0, 1.0, 1.0)

        assert snap.position(0) == pytest.approx((1.0, 0.0))
        assert snap.edges == graph.edges
        assert snap.node_count == 3

    def test_iteration(self):
        """Iterating a graph yields its nodes in order."""
        graph = create_triangle()

        assert [n.index for n in graph] == [0, 1, 2]
