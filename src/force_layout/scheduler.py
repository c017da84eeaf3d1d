"""
Time-bounded driver for the Integrator.

The scheduler moves through ``not_started -> running -> finished``. Each
advance() checks the elapsed wall-clock time against the budget and either
runs one Integrator step or finishes the run. run() is the busy loop
calling advance() until the budget is spent; hosts that need their own
pacing or cancellation call advance() themselves.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Callable, Optional

import numpy as np

from .base import IterativeLayout
from .types import Event, EventType, SchedulerState, StepResult
from .validation import validate_duration

if TYPE_CHECKING:
    from typing_extensions import Self

    from .force.integrator import Integrator

logger = logging.getLogger(__name__)


class SimulationScheduler(IterativeLayout):
    """
    Runs Integrator steps until ``duration`` seconds have elapsed.

    A step runs while the elapsed time is at most ``duration``. A zero
    budget allows at most one step, a negative budget none.

    Example:
        graph = Graph.from_node_count(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
        scheduler = SimulationScheduler(Integrator(graph), duration=2.0)
        steps = scheduler.run()

    Driving it by hand:
        while True:
            result = scheduler.advance()
            if not result.performed:
                break
    """

    def __init__(
        self,
        integrator: Integrator,
        duration: float,
        *,
        clock: Callable[[], float] = time.monotonic,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
    ) -> None:
        """
        Args:
            integrator: Integrator performing the steps
            duration: Time budget in seconds
            clock: Time source returning seconds (default time.monotonic)
            on_start: Callback for start event
            on_tick: Callback for tick event (once per step)
            on_end: Callback for end event

        Raises:
            InvalidConfigError: If duration is not a finite number
        """
        super().__init__(
            integrator.graph, on_start=on_start, on_tick=on_tick, on_end=on_end
        )
        self._integrator = integrator
        self._duration = validate_duration(duration)
        self._clock = clock
        self._state = SchedulerState.not_started
        self._start_time: Optional[float] = None
        self._elapsed = 0.0
        self._steps = 0

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def integrator(self) -> Integrator:
        return self._integrator

    @property
    def duration(self) -> float:
        """Time budget in seconds."""
        return self._duration

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def steps(self) -> int:
        """Steps performed in this run."""
        return self._steps

    @property
    def elapsed(self) -> float:
        """Seconds since start(); frozen once the run has finished."""
        if self._state is SchedulerState.running:
            return self._now()
        return self._elapsed

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def start(self) -> Self:
        """
        Begin the run: record the start time and initialize the renderer.

        Has no effect once the run has started.

        Returns:
            self (for chaining)
        """
        if self._state is not SchedulerState.not_started:
            return self

        self._start_time = self._clock()
        self._state = SchedulerState.running
        logger.info(
            "Simulation started: %d nodes, %d edges, budget %.3fs",
            self._graph.node_count,
            self._graph.edge_count,
            self._duration,
        )
        self._integrator.renderer.init(self._graph)
        self.trigger({"type": EventType.start, "step": 0, "elapsed": 0.0, "graph": self._graph})
        return self

    def advance(self) -> StepResult:
        """
        Run one step if the budget allows, otherwise finish the run.

        Starts the run on first use.

        Returns:
            StepResult describing what happened
        """
        if self._state is SchedulerState.not_started:
            self.start()
        if self._state is SchedulerState.finished:
            return self._result(False, 0.0)

        elapsed = self._now()
        if elapsed > self._duration or (self._duration <= 0 and self._steps > 0):
            self._finish(elapsed)
            return self._result(False, 0.0)

        disp = self._integrator.step()
        self._steps += 1
        max_disp = float(np.hypot(disp[:, 0], disp[:, 1]).max()) if len(disp) else 0.0

        elapsed = self._now()
        logger.debug("step %d at %.4fs, max displacement %.6g", self._steps, elapsed, max_disp)
        self.trigger(
            {"type": EventType.tick, "step": self._steps, "elapsed": elapsed, "graph": self._graph}
        )
        return StepResult(True, self._steps, elapsed, max_disp, self._state)

    def tick(self) -> bool:
        """Advance once; returns True when the run is finished."""
        return not self.advance().performed

    def run(self, **kwargs: object) -> int:
        """
        Step until the time budget is spent.

        Returns:
            Number of steps performed
        """
        self.start()
        self.kick()
        return self._steps

    def _finish(self, elapsed: float) -> None:
        self._elapsed = elapsed
        self._state = SchedulerState.finished
        logger.info("Simulation finished: %d steps in %.3fs", self._steps, elapsed)
        self.trigger(
            {"type": EventType.end, "step": self._steps, "elapsed": elapsed, "graph": self._graph}
        )

    def _now(self) -> float:
        assert self._start_time is not None
        return self._clock() - self._start_time

    def _result(self, performed: bool, max_disp: float) -> StepResult:
        return StepResult(performed, self._steps, self._elapsed, max_disp, self._state)


__all__ = ["SimulationScheduler"]
