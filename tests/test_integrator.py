"""
Tests for the Integrator (one simulation step).
"""

import math

import numpy as np
import pytest

from force_layout import ForceConfig, Graph, Integrator, parse_graph
from force_layout.validation import DegenerateGeometryError

# =============================================================================
# Test Fixtures
# =============================================================================


class RecordingRenderer:
    """Renderer remembering every call."""

    def __init__(self):
        self.calls = []

    def init(self, graph):
        self.calls.append(("init", graph.positions()))

    def draw(self, graph):
        self.calls.append(("draw", graph.positions()))


def create_triangle():
    return parse_graph("3\n0 1\n1 2\n2 0")


# =============================================================================
# Integrator Tests
# =============================================================================


class TestIntegratorStep:
    """Tests for a single step."""

    def test_triangle_every_node_moves(self):
        """Every triangle node gets a non-zero displacement."""
        graph = create_triangle()
        disp = Integrator(graph).step()

        for i in range(3):
            assert math.hypot(*disp[i]) > 1e-6

    def test_triangle_displacement_value(self):
        """Attraction outweighs repulsion on the unit triangle."""
        graph = create_triangle()
        disp = Integrator(graph).step()

        # repulsion 0.005 outward, attraction 0.015 * sqrt(3) inward
        expected = 0.005 - 0.015 * math.sqrt(3)
        assert disp[0] == pytest.approx((expected, 0.0), abs=1e-12)
        assert graph.position(0) == pytest.approx((1.0 + expected, 0.0), abs=1e-12)

    def test_positions_updated_by_displacement(self):
        """New position equals old position plus displacement."""
        graph = Graph.from_node_count(5, [(0, 2), (1, 3), (4, 4)])
        before = graph.positions()
        disp = Integrator(graph).step()

        np.testing.assert_allclose(graph.positions(), before + disp)

    def test_zero_edge_graph_moves_outward(self):
        """Without edges every node moves away from the circle center."""
        graph = Graph.from_node_count(6)
        before = graph.positions()
        Integrator(graph).step()
        after = graph.positions()

        for i in range(6):
            assert np.linalg.norm(after[i]) > np.linalg.norm(before[i])

    def test_empty_graph(self):
        """An empty graph step does no work and raises nothing."""
        renderer = RecordingRenderer()
        integrator = Integrator(Graph.from_node_count(0), renderer=renderer)
        disp = integrator.step()

        assert disp.shape == (0, 2)
        assert integrator.steps == 1
        assert [c[0] for c in renderer.calls] == ["draw"]

    def test_buffer_reset_each_step(self):
        """Displacement does not carry over between steps."""
        graph = Graph([(0.0, 0.0), (1.0, 0.0)])
        integrator = Integrator(graph)
        first = integrator.step()
        second = integrator.step()

        # the pair is farther apart, so the second push is weaker
        assert abs(second[0, 0]) < abs(first[0, 0])
        np.testing.assert_array_equal(integrator.displacement, second)

    def test_renderer_notified_after_update(self):
        """draw() sees the updated positions."""
        renderer = RecordingRenderer()
        graph = create_triangle()
        Integrator(graph, renderer=renderer).step()

        name, seen = renderer.calls[0]
        assert name == "draw"
        np.testing.assert_array_equal(seen, graph.positions())

    def test_run_steps(self):
        """run_steps performs the requested number of steps."""
        integrator = Integrator(create_triangle())

        assert integrator.run_steps(4) == 4
        assert integrator.steps == 4
        assert integrator.run_steps(-2) == 0

    def test_config_scales_forces(self):
        """Doubling k_repel doubles the repulsion-only displacement."""
        base = Integrator(Graph.from_node_count(4)).step()
        doubled = Integrator(Graph.from_node_count(4), ForceConfig(k_repel=0.01)).step()

        np.testing.assert_allclose(doubled, 2 * base)

    def test_independent_configs(self):
        """Two integrators with different tuning do not interfere."""
        a, b = create_triangle(), create_triangle()
        Integrator(a, ForceConfig(k_attract=0.0)).step()
        Integrator(b).step()

        assert a.position(0)[0] > 1.0
        assert b.position(0)[0] < 1.0

    def test_coincident_raise_policy(self):
        """The raise policy surfaces coincident nodes during a step."""
        graph = Graph([(0.0, 0.0), (0.0, 0.0)])
        integrator = Integrator(graph, ForceConfig(coincident_policy="raise"))

        with pytest.raises(DegenerateGeometryError):
            integrator.step()

    def test_divergence_warns(self):
        """Positions blowing up to infinity issue a RuntimeWarning."""
        integrator = Integrator(create_triangle(), ForceConfig(k_attract=1e200))

        with pytest.warns(RuntimeWarning, match="non-finite"):
            integrator.run_steps(5)
