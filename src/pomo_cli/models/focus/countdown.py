"""Pause-aware countdown state machine."""

import time
from datetime import timedelta
from enum import Enum
from typing import Protocol


class State(str, Enum):
    """Countdown state. Finished is terminal."""

    RUNNING = "Running"
    PAUSED = "Paused"
    FINISHED = "Finished"


class Clock(Protocol):
    """Source of instants, in seconds from an arbitrary origin."""

    def now(self) -> float: ...


class MonotonicClock:
    """Clock backed by time.monotonic()."""

    def now(self) -> float:
        return time.monotonic()


class Countdown:
    """
    Counts down a target duration, tracking running and paused time.

    Both accumulators are derived from a single elapsed sample on every
    tick, so ``running + paused`` always equals the time since start no
    matter how irregularly ``tick()`` is called.
    """

    def __init__(
        self,
        duration: timedelta,
        title: str = "",
        clock: Clock | None = None,
    ):
        self.clock = clock or MonotonicClock()
        self._state = State.RUNNING
        self._start = self.clock.now()
        self._target = duration
        self._running = timedelta(0)
        self._paused = timedelta(0)
        self._title = title

    @property
    def state(self) -> State:
        return self._state

    @property
    def title(self) -> str:
        return self._title

    @property
    def target(self) -> timedelta:
        return self._target

    @property
    def running(self) -> timedelta:
        """Time spent running, as of the last tick."""
        return self._running

    @property
    def paused(self) -> timedelta:
        """Time spent paused, as of the last tick."""
        return self._paused

    @property
    def is_paused(self) -> bool:
        return self._state is State.PAUSED

    @property
    def is_finished(self) -> bool:
        return self._state is State.FINISHED

    def elapsed(self) -> timedelta:
        """Wall time since the countdown was created."""
        return timedelta(seconds=self.clock.now() - self._start)

    def tick(self) -> State:
        """Recompute the accumulators from the clock and return the state."""
        if self._state is State.FINISHED:
            return self._state

        elapsed = self.elapsed()
        if self._state is State.RUNNING:
            self._running = elapsed - self._paused
        else:
            self._paused = elapsed - self._running

        if self._running >= self._target:
            self._state = State.FINISHED
        return self._state

    def toggle(self) -> None:
        """Swap Running and Paused. Does nothing once finished."""
        if self._state is State.RUNNING:
            self._state = State.PAUSED
        elif self._state is State.PAUSED:
            self._state = State.RUNNING

    def finish(self) -> None:
        """Force the countdown to Finished, keeping the last tick's totals."""
        self._state = State.FINISHED

    def remaining(self) -> timedelta | None:
        """Time left to run, or None once the target has been overrun."""
        left = self._target - self._running
        if left < timedelta(0):
            return None
        return left

    def __repr__(self) -> str:
        return (
            f"Countdown(state={self._state.value}, target={self._target}, "
            f"running={self._running}, paused={self._paused}, title={self._title!r})"
        )
