"""
Input validation utilities for the force simulation.

Provides centralized validation functions for node counts, edges, positions,
force constants and time budgets. Raises descriptive exceptions on invalid
input so that a bad graph never reaches the simulation loop.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Optional, Sequence


class ValidationError(ValueError):
    """Base exception for simulation validation errors."""

    pass


class InvalidTopologyError(ValidationError):
    """Raised when an edge references a node that does not exist."""

    pass


class DegenerateGeometryError(ValidationError):
    """Raised when node positions make a force undefined."""

    pass


class GraphFormatError(ValidationError):
    """Raised when a graph description cannot be parsed."""

    pass


class InvalidConfigError(ValidationError):
    """Raised when a simulation parameter is out of range."""

    pass


def validate_node_count(node_count: Any) -> int:
    """
    Validate a node count.

    Args:
        node_count: Number of nodes

    Returns:
        The count as an int

    Raises:
        ValidationError: If the count is not a non-negative integer
    """
    if isinstance(node_count, bool) or not isinstance(node_count, numbers.Integral):
        raise ValidationError(f"node count must be an integer, got {node_count!r}")
    if node_count < 0:
        raise ValidationError(f"node count must be >= 0, got {node_count}")
    return int(node_count)


def validate_edge_indices(
    edges: Sequence[Any],
    node_count: int,
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Validate that all edge start/end indices are within bounds.

    Args:
        edges: Sequence of Edge objects or (start, end) pairs
        node_count: Number of nodes in the graph
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (edge_index, issue_description) tuples

    Raises:
        InvalidTopologyError: If strict=True and invalid edges found
    """
    issues: list[tuple[int, str]] = []

    for i, edge in enumerate(edges):
        start, end = _get_endpoints(edge)

        if start is None:
            issues.append((i, f"Edge {i}: start is not an integer index"))
        elif start < 0 or start >= node_count:
            issues.append((i, f"Edge {i}: start index {start} out of bounds [0, {node_count})"))

        if end is None:
            issues.append((i, f"Edge {i}: end is not an integer index"))
        elif end < 0 or end >= node_count:
            issues.append((i, f"Edge {i}: end index {end} out of bounds [0, {node_count})"))

    if strict and issues:
        msg = "Invalid edge indices:\n" + "\n".join(issue[1] for issue in issues)
        raise InvalidTopologyError(msg)

    return issues


def validate_positions(positions: Sequence[Sequence[float]]) -> None:
    """
    Validate that every position is a finite 2D point.

    Raises:
        DegenerateGeometryError: If any coordinate is NaN or infinite
    """
    for i, pos in enumerate(positions):
        if len(pos) != 2:
            raise DegenerateGeometryError(f"Node {i}: position must have 2 coordinates")
        if not (math.isfinite(pos[0]) and math.isfinite(pos[1])):
            raise DegenerateGeometryError(f"Node {i}: position ({pos[0]}, {pos[1]}) is not finite")


def validate_force_constant(name: str, value: float) -> float:
    """
    Validate a force constant is a finite number.

    Raises:
        InvalidConfigError: If value is NaN or infinite
    """
    value = float(value)
    if not math.isfinite(value):
        raise InvalidConfigError(f"{name} must be finite, got {value}")
    return value


def validate_min_distance(value: float) -> float:
    """
    Validate the minimum distance used for coincident nodes.

    Raises:
        InvalidConfigError: If value is not a positive finite number
    """
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidConfigError(f"min_distance must be positive, got {value}")
    return value


def validate_duration(duration: float) -> float:
    """
    Validate a time budget in seconds.

    Negative budgets are allowed (they run zero steps).

    Raises:
        InvalidConfigError: If duration is NaN or infinite
    """
    try:
        duration = float(duration)
    except (TypeError, ValueError) as exc:
        raise InvalidConfigError(f"duration must be a number, got {duration!r}") from exc
    if not math.isfinite(duration):
        raise InvalidConfigError(f"duration must be finite, got {duration}")
    return duration


def _get_endpoints(edge: Any) -> tuple[Optional[int], Optional[int]]:
    """Extract (start, end) from an Edge, pair or dict."""
    if isinstance(edge, dict):
        start, end = edge.get("start"), edge.get("end")
    elif hasattr(edge, "start") and hasattr(edge, "end"):
        start, end = edge.start, edge.end
    else:
        try:
            start, end = edge
        except (TypeError, ValueError):
            return None, None
    return _as_index(start), _as_index(end)


def _as_index(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        return None
    return int(value)


__all__ = [
    "ValidationError",
    "InvalidTopologyError",
    "DegenerateGeometryError",
    "GraphFormatError",
    "InvalidConfigError",
    "validate_node_count",
    "validate_edge_indices",
    "validate_positions",
    "validate_force_constant",
    "validate_min_distance",
    "validate_duration",
]
