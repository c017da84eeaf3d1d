"""
Force computations and integration.

This module provides the pieces of one simulation step:
- pair_repulsion / apply_repulsion: All node pairs push apart (k / d)
- edge_attraction / apply_attraction: Edges pull endpoints together (k * d^2)
- Integrator: Accumulates both and applies the displacement to the graph
"""

from .attraction import apply_attraction, edge_attraction
from .integrator import Integrator
from .repulsion import apply_repulsion, pair_repulsion

__all__ = [
    "Integrator",
    "pair_repulsion",
    "apply_repulsion",
    "edge_attraction",
    "apply_attraction",
]
