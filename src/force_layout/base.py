"""
Base classes for simulations and placements.

This module provides abstract base classes that define the common interface
and shared functionality:

- BaseLayout: Abstract base with event system and graph access
- IterativeLayout: For stepped processes with a tick loop (the scheduler)
- StaticLayout: For single-pass placements (circular seeding)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from typing_extensions import Self

    from .graph import Graph

from .types import Event, EventType


class BaseLayout(ABC):
    """
    Abstract base class operating on one Graph.

    Provides shared infrastructure:
    - Event system (start/tick/end events)
    - Access to the graph being laid out
    """

    def __init__(
        self,
        graph: Graph,
        *,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
    ) -> None:
        """
        Initialize with the graph and optional event callbacks.

        Args:
            graph: Graph whose node positions will be updated in place
            on_start: Callback for start event
            on_tick: Callback for tick event (iterative processes)
            on_end: Callback for end event
        """
        self._graph = graph
        self._events: dict[EventType, Callable[[Optional[Event]], None]] = {}

        if on_start:
            self._events[EventType.start] = on_start
        if on_tick:
            self._events[EventType.tick] = on_tick
        if on_end:
            self._events[EventType.end] = on_end

    @property
    def graph(self) -> Graph:
        """Get the graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: Callable[[Optional[Event]], None]) -> Self:
        """
        Subscribe to an event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """
        Trigger an event, calling the registered callback.

        Args:
            event: Event payload with type and optional data
        """
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    @abstractmethod
    def run(self, **kwargs: Any) -> Any:
        """Run the process to completion."""
        pass


class IterativeLayout(BaseLayout):
    """
    Base class for stepped processes.

    Subclasses implement tick(); kick() calls it until it reports completion.
    """

    @abstractmethod
    def tick(self) -> bool:
        """
        Perform one iteration.

        Returns:
            True if done, False if more iterations are wanted.
        """
        pass

    def kick(self, max_ticks: Optional[int] = None) -> int:
        """
        Run tick() repeatedly until it reports completion.

        Args:
            max_ticks: Optional upper bound on tick() calls

        Returns:
            Number of tick() calls that did not report completion
        """
        count = 0
        while max_ticks is None or count < max_ticks:
            if self.tick():
                break
            count += 1
        return count


class StaticLayout(BaseLayout):
    """
    Base class for single-pass placements.

    These compute positions in one pass without iteration.
    """

    def run(self, **kwargs: Any) -> Self:
        """
        Fire start event, compute positions, fire end event.

        Args:
            **kwargs: Additional arguments passed to _compute()

        Returns:
            self (for chaining)
        """
        self.trigger({"type": EventType.start, "graph": self._graph})
        self._compute(**kwargs)
        self.trigger({"type": EventType.end, "graph": self._graph})
        return self

    @abstractmethod
    def _compute(self, **kwargs: Any) -> None:
        """Compute node positions."""
        pass


__all__ = [
    "BaseLayout",
    "IterativeLayout",
    "StaticLayout",
]
