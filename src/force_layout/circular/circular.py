"""
Circular initial placement.

Places nodes evenly distributed on a circle. This is the seed every force
simulation starts from.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Callable, Optional

from ..base import StaticLayout
from ..types import Event
from ..validation import validate_node_count

if TYPE_CHECKING:
    from ..graph import Graph


def circular_positions(
    node_count: int,
    radius: float = 1.0,
    center: tuple[float, float] = (0.0, 0.0),
    start_angle: float = 0.0,
) -> list[tuple[float, float]]:
    """
    Compute evenly spaced positions on a circle.

    Node ``i`` of ``n`` is placed at angle ``start_angle + 2*pi*i/n``. With the
    defaults this is the unit circle starting on the +x axis.

    Args:
        node_count: Number of positions (0 gives an empty list)
        radius: Circle radius
        center: Circle center as (x, y)
        start_angle: Angle of node 0 in radians

    Returns:
        List of (x, y) tuples

    Raises:
        ValidationError: If node_count is negative or not an integer
    """
    n = validate_node_count(node_count)
    if n == 0:
        return []

    cx, cy = center
    positions = []
    for i in range(n):
        angle = start_angle + 2 * math.pi * i / n
        positions.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return positions


def initialize_circular(
    graph: Graph,
    radius: float = 1.0,
    center: tuple[float, float] = (0.0, 0.0),
    start_angle: float = 0.0,
) -> Graph:
    """Re-seed every node of ``graph`` on a circle, in place."""
    for i, (x, y) in enumerate(
        circular_positions(graph.node_count, radius, center, start_angle)
    ):
        graph.set_position(i, x, y)
    return graph


class CircularLayout(StaticLayout):
    """
    Circular layout - positions the nodes of a graph on a circle.

    Example:
        graph = Graph.from_node_count(5, [(0, 1), (1, 2)])
        CircularLayout(graph, radius=2.0).run()
    """

    def __init__(
        self,
        graph: Graph,
        *,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
        radius: float = 1.0,
        center: tuple[float, float] = (0.0, 0.0),
        start_angle: float = 0.0,
    ) -> None:
        super().__init__(graph, on_start=on_start, on_end=on_end)
        self._radius = float(radius)
        self._center = (float(center[0]), float(center[1]))
        self._start_angle = float(start_angle)

    @property
    def radius(self) -> float:
        """Get circle radius."""
        return self._radius

    @property
    def center(self) -> tuple[float, float]:
        """Get circle center."""
        return self._center

    @property
    def start_angle(self) -> float:
        """Get angle of node 0 in radians."""
        return self._start_angle

    def _compute(self, **kwargs: Any) -> None:
        initialize_circular(self._graph, self._radius, self._center, self._start_angle)


__all__ = ["circular_positions", "initialize_circular", "CircularLayout"]
