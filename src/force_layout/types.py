"""
Common types for the force simulation.

This module provides the fundamental types shared by every component:
- Node: Graph vertex with a mutable position
- Edge: Immutable (start, end) pair of node indices
- EventType: Simulation lifecycle events
- Event: Event payload for callbacks
- SchedulerState: States of a time-bounded run
- StepResult: Outcome of a single scheduler advance
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any, Callable, NamedTuple, Optional, TypedDict

if TYPE_CHECKING:
    from .graph import Graph


class EventType(IntEnum):
    """
    Simulation lifecycle events.

    - start: The scheduler has started its run
    - tick: Fired once per simulation step (for animation)
    - end: The time budget is spent
    """

    start = 0
    tick = 1
    end = 2


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: EventType
    step: int
    elapsed: float
    graph: Graph
    listener: Optional[Callable[[], None]]


class SchedulerState(IntEnum):
    """States of a SimulationScheduler. ``finished`` is terminal."""

    not_started = 0
    running = 1
    finished = 2


class CoincidentPolicy(str, Enum):
    """
    How repulsion treats two nodes at the same position.

    - clamp: use ``min_distance`` and push along the +x axis
    - skip: the pair contributes no force
    - raise: raise DegenerateGeometryError
    """

    clamp = "clamp"
    skip = "skip"
    raise_ = "raise"


class Node:
    """
    Graph node with a mutable 2D position.

    Attributes:
        index: Position in the graph's node list
        x: X coordinate
        y: Y coordinate
    """

    __slots__ = ("index", "x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0, index: Optional[int] = None) -> None:
        self.index: Optional[int] = index
        self.x: float = float(x)
        self.y: float = float(y)

    def copy(self) -> Node:
        return Node(self.x, self.y, self.index)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return (self.index, self.x, self.y) == (other.index, other.x, other.y)

    def __repr__(self) -> str:
        return f"Node(index={self.index}, x={self.x:.4f}, y={self.y:.4f})"


class Edge(NamedTuple):
    """Edge from ``start`` to ``end`` (node indices)."""

    start: int
    end: int

    @property
    def is_self_loop(self) -> bool:
        return self.start == self.end

    def __repr__(self) -> str:
        return f"Edge({self.start} -> {self.end})"


@dataclass(frozen=True)
class StepResult:
    """
    Outcome of one SimulationScheduler.advance() call.

    Attributes:
        performed: Whether a simulation step actually ran
        step: Number of steps completed so far in this run
        elapsed: Seconds elapsed since the run started
        max_displacement: Largest per-node displacement length of this step
            (0.0 when no step ran)
        state: Scheduler state after the call
    """

    performed: bool
    step: int
    elapsed: float
    max_displacement: float
    state: SchedulerState

    @property
    def finished(self) -> bool:
        return self.state is SchedulerState.finished


EdgeLike = Any
"""Input type for edges: Edge, (start, end) tuples, or dicts with start/end."""


__all__ = [
    "EventType",
    "Event",
    "SchedulerState",
    "CoincidentPolicy",
    "Node",
    "Edge",
    "StepResult",
    "EdgeLike",
]
