"""
Pairwise repulsion.

Every unordered pair of distinct nodes pushes apart with magnitude
``k_repel / d``. The contribution is applied with opposite signs to the two
endpoints, so the total repulsion over the graph sums to zero.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from ..config import ForceConfig
from ..types import CoincidentPolicy
from ..validation import DegenerateGeometryError


def pair_repulsion(
    p_i: tuple[float, float],
    p_j: tuple[float, float],
    config: ForceConfig,
) -> Optional[tuple[float, float]]:
    """
    Repulsion between two nodes.

    Args:
        p_i: Position of node i
        p_j: Position of node j
        config: Force constants and coincident policy

    Returns:
        The displacement applied to node j; node i receives its negation.
        None when the pair is skipped (coincident nodes, ``skip`` policy).

    Raises:
        DegenerateGeometryError: Coincident nodes under the ``raise`` policy.
    """
    dx = p_j[0] - p_i[0]
    dy = p_j[1] - p_i[1]
    dist = math.hypot(dx, dy)

    if dist == 0:
        if config.coincident_policy is CoincidentPolicy.skip:
            return None
        if config.coincident_policy is CoincidentPolicy.raise_:
            raise DegenerateGeometryError(f"coincident nodes at ({p_i[0]}, {p_i[1]})")

    if config.coincident_policy is CoincidentPolicy.clamp:
        dist = max(dist, config.min_distance)

    force = config.k_repel / dist
    theta = math.atan2(dy, dx)
    return force * math.cos(theta), force * math.sin(theta)


def apply_repulsion(
    positions: np.ndarray,
    disp: np.ndarray,
    config: ForceConfig,
) -> None:
    """
    Accumulate repulsion for all node pairs into ``disp``.

    Args:
        positions: ``(n, 2)`` node positions
        disp: ``(n, 2)`` displacement buffer, updated in place
        config: Force constants and coincident policy

    Raises:
        DegenerateGeometryError: Coincident nodes under the ``raise`` policy.
    """
    n = len(positions)
    if n < 2:
        return

    i_idx, j_idx = np.triu_indices(n, k=1)
    dx = positions[j_idx, 0] - positions[i_idx, 0]
    dy = positions[j_idx, 1] - positions[i_idx, 1]
    dist = np.hypot(dx, dy)

    coincident = dist == 0
    if coincident.any():
        if config.coincident_policy is CoincidentPolicy.raise_:
            first = int(np.flatnonzero(coincident)[0])
            raise DegenerateGeometryError(
                f"nodes {int(i_idx[first])} and {int(j_idx[first])} are coincident"
            )
        if config.coincident_policy is CoincidentPolicy.skip:
            keep = ~coincident
            i_idx, j_idx = i_idx[keep], j_idx[keep]
            dx, dy, dist = dx[keep], dy[keep], dist[keep]

    if config.coincident_policy is CoincidentPolicy.clamp:
        dist = np.maximum(dist, config.min_distance)

    force = config.k_repel / dist
    theta = np.arctan2(dy, dx)
    fx = force * np.cos(theta)
    fy = force * np.sin(theta)

    np.add.at(disp[:, 0], i_idx, -fx)
    np.add.at(disp[:, 1], i_idx, -fy)
    np.add.at(disp[:, 0], j_idx, fx)
    np.add.at(disp[:, 1], j_idx, fy)


__all__ = ["pair_repulsion", "apply_repulsion"]
