"""
Graph model for the force simulation.

A Graph holds an ordered list of nodes with mutable positions and an immutable
tuple of edges. Edges are validated when the graph is built, so an edge that
references a missing node fails before any simulation step runs.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

import numpy as np

from .circular import circular_positions
from .types import Edge, EdgeLike, Node
from .validation import (
    InvalidTopologyError,
    validate_edge_indices,
    validate_node_count,
    validate_positions,
)


class Graph:
    """
    Nodes with mutable 2D positions plus a fixed edge list.

    Node identity is the index in ``nodes``. Topology (node count and edges)
    cannot change after construction; only positions are mutable.

    Example:
        graph = Graph.from_node_count(3, [(0, 1), (1, 2), (2, 0)])
        graph.move(0, 0.1, 0.0)
        print(graph.position(0))
    """

    def __init__(
        self,
        positions: Sequence[Sequence[float]] = (),
        edges: Iterable[EdgeLike] = (),
    ) -> None:
        """
        Build a graph from explicit positions.

        Args:
            positions: One (x, y) per node
            edges: Edge objects, (start, end) pairs or dicts with start/end

        Raises:
            DegenerateGeometryError: If a position is not a finite 2D point.
            InvalidTopologyError: If an edge references a missing node.
        """
        positions = list(positions)
        validate_positions(positions)
        self._nodes: list[Node] = [
            Node(x, y, index=i) for i, (x, y) in enumerate(positions)
        ]

        edge_list = list(edges)
        validate_edge_indices(edge_list, len(self._nodes), strict=True)
        self._edges: tuple[Edge, ...] = tuple(_to_edge(e) for e in edge_list)

    @classmethod
    def from_node_count(cls, node_count: int, edges: Iterable[EdgeLike] = ()) -> Graph:
        """
        Build a graph whose nodes are seeded evenly on the unit circle.

        Args:
            node_count: Number of nodes (0 gives an empty graph)
            edges: Edges between node indices

        Returns:
            New Graph
        """
        return cls(circular_positions(validate_node_count(node_count)), edges)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def nodes(self) -> list[Node]:
        """Get the list of nodes (positions may be mutated in place)."""
        return self._nodes

    @property
    def edges(self) -> tuple[Edge, ...]:
        """Get the edges."""
        return self._edges

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    # -------------------------------------------------------------------------
    # Positions
    # -------------------------------------------------------------------------

    def position(self, index: int) -> tuple[float, float]:
        """Get (x, y) of node ``index``."""
        node = self._node(index)
        return node.x, node.y

    def set_position(self, index: int, x: float, y: float) -> None:
        """Set the position of node ``index``."""
        node = self._node(index)
        node.x = float(x)
        node.y = float(y)

    def move(self, index: int, dx: float, dy: float) -> None:
        """Translate node ``index`` by (dx, dy)."""
        node = self._node(index)
        node.x += float(dx)
        node.y += float(dy)

    def positions(self) -> np.ndarray:
        """Return a ``(node_count, 2)`` array copy of all positions."""
        out = np.zeros((len(self._nodes), 2), dtype=np.float64)
        for i, node in enumerate(self._nodes):
            out[i, 0] = node.x
            out[i, 1] = node.y
        return out

    def bounds(self) -> Optional[tuple[float, float, float, float]]:
        """
        Return the node extent as (min_x, min_y, max_x, max_y).

        Returns:
            Bounding box, or None for an empty graph
        """
        if not self._nodes:
            return None
        xs = [n.x for n in self._nodes]
        ys = [n.y for n in self._nodes]
        return min(xs), min(ys), max(xs), max(ys)

    # -------------------------------------------------------------------------
    # Topology queries
    # -------------------------------------------------------------------------

    def degree(self, index: int) -> int:
        """Number of edge endpoints at node ``index`` (self loops count twice)."""
        self._node(index)
        return sum((e.start == index) + (e.end == index) for e in self._edges)

    def snapshot(self) -> Graph:
        """Return an independent copy of this graph."""
        clone = Graph.__new__(Graph)
        clone._nodes = [node.copy() for node in self._nodes]
        clone._edges = self._edges
        return clone

    def _node(self, index: int) -> Node:
        if index < 0 or index >= len(self._nodes):
            raise InvalidTopologyError(
                f"node index {index} out of bounds [0, {len(self._nodes)})"
            )
        return self._nodes[index]

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)})"


def _to_edge(edge: EdgeLike) -> Edge:
    if isinstance(edge, Edge):
        return edge
    if isinstance(edge, dict):
        return Edge(int(edge["start"]), int(edge["end"]))
    if hasattr(edge, "start") and hasattr(edge, "end"):
        return Edge(int(edge.start), int(edge.end))
    start, end = edge
    return Edge(int(start), int(end))


__all__ = ["Graph"]
