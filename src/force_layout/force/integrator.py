"""
One simulation step.

The Integrator zeroes a displacement buffer, accumulates repulsion and
attraction into it, adds the result to every node position (explicit Euler,
no velocity, no damping) and hands the graph to the renderer.

There is no step-size control. Large graphs or extreme ratios between
``k_repel`` and ``k_attract`` can oscillate or diverge; when positions stop
being finite a RuntimeWarning is issued and the positions are left as
computed.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Optional

import numpy as np

from ..config import ForceConfig
from ..render import NullRenderer, Renderer
from .attraction import apply_attraction
from .repulsion import apply_repulsion

if TYPE_CHECKING:
    from ..graph import Graph


class Integrator:
    """
    Applies one force step at a time to a Graph.

    Example:
        graph = Graph.from_node_count(3, [(0, 1), (1, 2), (2, 0)])
        integrator = Integrator(graph, ForceConfig(k_repel=0.01))
        integrator.run_steps(100)
    """

    def __init__(
        self,
        graph: Graph,
        config: Optional[ForceConfig] = None,
        renderer: Optional[Renderer] = None,
    ) -> None:
        """
        Args:
            graph: Graph updated in place by every step
            config: Force constants. Defaults to ForceConfig().
            renderer: Notified after every step. Defaults to NullRenderer().
        """
        self._graph = graph
        self._config = config if config is not None else ForceConfig()
        self._renderer: Renderer = renderer if renderer is not None else NullRenderer()
        self._disp = np.zeros((graph.node_count, 2), dtype=np.float64)
        self._steps = 0
        self._warned_non_finite = False

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def config(self) -> ForceConfig:
        return self._config

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    @property
    def steps(self) -> int:
        """Number of steps applied so far."""
        return self._steps

    @property
    def displacement(self) -> np.ndarray:
        """Copy of the displacement buffer of the last step."""
        return self._disp.copy()

    def step(self) -> np.ndarray:
        """
        Perform one simulation step.

        Returns:
            ``(n, 2)`` copy of the displacement applied to each node

        Raises:
            DegenerateGeometryError: Coincident nodes under the ``raise`` policy.
        """
        graph = self._graph
        positions = graph.positions()

        self._disp.fill(0)
        apply_repulsion(positions, self._disp, self._config)
        apply_attraction(positions, graph.edges, self._disp, self._config)

        for i, node in enumerate(graph.nodes):
            node.x += float(self._disp[i, 0])
            node.y += float(self._disp[i, 1])

        self._steps += 1
        self._check_finite()
        self._renderer.draw(graph)
        return self._disp.copy()

    def run_steps(self, count: int) -> int:
        """Perform ``count`` steps; returns the number performed."""
        for _ in range(max(0, int(count))):
            self.step()
        return max(0, int(count))

    def _check_finite(self) -> None:
        if self._warned_non_finite:
            return
        if all(np.isfinite((n.x, n.y)).all() for n in self._graph.nodes):
            return
        self._warned_non_finite = True
        warnings.warn(
            f"Node positions became non-finite after step {self._steps}; "
            "force constants are too large for this graph.",
            RuntimeWarning,
            stacklevel=3,
        )


__all__ = ["Integrator"]
