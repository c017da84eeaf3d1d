"""
Circular placement.

This module provides the initial placement used by the force simulation:
- circular_positions: Evenly spaced points on a circle
- initialize_circular: Re-seed an existing graph in place
- CircularLayout: Object form with start/end events
"""

from .circular import CircularLayout, circular_positions, initialize_circular

__all__ = [
    "CircularLayout",
    "circular_positions",
    "initialize_circular",
]
