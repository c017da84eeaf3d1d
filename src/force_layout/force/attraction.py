"""
Edge attraction.

Each edge pulls its endpoints together with magnitude ``k_attract * d^2``,
so widely separated neighbors are pulled in strongly. Self loops are skipped.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ..config import ForceConfig
from ..types import Edge


def edge_attraction(
    p_u: tuple[float, float],
    p_v: tuple[float, float],
    config: ForceConfig,
) -> tuple[float, float]:
    """
    Attraction along an edge from u to v.

    Returns:
        The displacement applied to u (toward v); v receives its negation.
    """
    dx = p_v[0] - p_u[0]
    dy = p_v[1] - p_u[1]
    force = config.k_attract * (dx * dx + dy * dy)
    # atan2(0, 0) is 0 and force is 0, so coincident endpoints add nothing
    theta = math.atan2(dy, dx)
    return force * math.cos(theta), force * math.sin(theta)


def apply_attraction(
    positions: np.ndarray,
    edges: Sequence[Edge],
    disp: np.ndarray,
    config: ForceConfig,
) -> None:
    """
    Accumulate attraction for all edges into ``disp``.

    Args:
        positions: ``(n, 2)`` node positions
        edges: Edges of the graph
        disp: ``(n, 2)`` displacement buffer, updated in place
        config: Force constants
    """
    if not edges:
        return

    pairs = np.asarray(edges, dtype=np.intp).reshape(-1, 2)
    pairs = pairs[pairs[:, 0] != pairs[:, 1]]
    if len(pairs) == 0:
        return

    starts, ends = pairs[:, 0], pairs[:, 1]
    dx = positions[ends, 0] - positions[starts, 0]
    dy = positions[ends, 1] - positions[starts, 1]

    force = config.k_attract * (dx * dx + dy * dy)
    theta = np.arctan2(dy, dx)
    fx = force * np.cos(theta)
    fy = force * np.sin(theta)

    np.add.at(disp[:, 0], starts, fx)
    np.add.at(disp[:, 1], starts, fy)
    np.add.at(disp[:, 0], ends, -fx)
    np.add.at(disp[:, 1], ends, -fy)


__all__ = ["edge_attraction", "apply_attraction"]
