"""
force-layout: Force-directed graph layout in Python.

Nodes are seeded evenly on a circle, then every node pair repels
(k_repel / d), every edge attracts (k_attract * d^2), and the accumulated
displacement is applied step by step until a time budget is spent.

Modules:
- graph: Graph model (mutable positions, fixed topology)
- circular: Circular initial placement
- force: Repulsion, attraction and the Integrator
- scheduler: Time-bounded stepping
- io: Graph description reader
- render: Rendering surfaces (SVG, matplotlib)
"""

__version__ = "0.1.0"

from .base import (
    BaseLayout,
    IterativeLayout,
    StaticLayout,
)
from .circular import CircularLayout, circular_positions, initialize_circular
from .config import ForceConfig
from .force import (
    Integrator,
    apply_attraction,
    apply_repulsion,
    edge_attraction,
    pair_repulsion,
)
from .graph import Graph
from .io import parse_description, parse_graph, read_graph
from .render import NullRenderer, Renderer, SvgRenderer, to_svg
from .scheduler import SimulationScheduler
from .types import (
    CoincidentPolicy,
    Edge,
    Event,
    EventType,
    Node,
    SchedulerState,
    StepResult,
)
from .validation import (
    DegenerateGeometryError,
    GraphFormatError,
    InvalidConfigError,
    InvalidTopologyError,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Node",
    "Edge",
    "EventType",
    "Event",
    "SchedulerState",
    "StepResult",
    "CoincidentPolicy",
    # Base classes
    "BaseLayout",
    "IterativeLayout",
    "StaticLayout",
    # Model and configuration
    "Graph",
    "ForceConfig",
    # Placement
    "CircularLayout",
    "circular_positions",
    "initialize_circular",
    # Forces
    "pair_repulsion",
    "apply_repulsion",
    "edge_attraction",
    "apply_attraction",
    "Integrator",
    "SimulationScheduler",
    # Input
    "parse_description",
    "parse_graph",
    "read_graph",
    # Rendering
    "Renderer",
    "NullRenderer",
    "SvgRenderer",
    "to_svg",
    # Errors
    "ValidationError",
    "InvalidTopologyError",
    "DegenerateGeometryError",
    "GraphFormatError",
    "InvalidConfigError",
]
