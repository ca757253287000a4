"""A stopwatch with millisecond, microsecond or second resolution."""

from __future__ import annotations

import enum
import time
from typing import Callable

__all__ = ["State", "Resolution", "StopWatch"]

_MASK = 0xFFFFFFFF


class State(enum.Enum):
    RESET = 0
    RUNNING = 1
    STOPPED = 2


class Resolution(enum.Enum):
    MILLIS = 0
    MICROS = 1
    SECONDS = 2


class StopWatch:
    """Measures elapsed time in ticks of the chosen resolution.

    ``clock`` returns the current time in seconds; ticks are kept as
    unsigned 32-bit counters and wrap like one.
    """

    def __init__(
        self,
        resolution: Resolution = Resolution.MILLIS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._resolution = Resolution(resolution)
        self._clock = clock
        self.reset()

    def _ticks(self) -> int:
        now = self._clock()
        if self._resolution is Resolution.MICROS:
            ticks = int(now * 1_000_000)
        elif self._resolution is Resolution.SECONDS:
            ticks = int(now * 1000) // 1000
        else:
            ticks = int(now * 1000)
        return ticks & _MASK

    def reset(self) -> None:
        self._state = State.RESET
        self._start = 0
        self._stop = 0

    def start(self) -> None:
        """Start or resume; a running stopwatch is left alone."""
        if self._state in (State.RESET, State.STOPPED):
            self._state = State.RUNNING
            t = self._ticks()
            self._start = (self._start + t - self._stop) & _MASK
            self._stop = t

    def stop(self) -> None:
        if self._state is State.RUNNING:
            self._stop = self._ticks()
            self._state = State.STOPPED

    def value(self) -> int:
        """Elapsed ticks."""
        if self._state is State.RUNNING:
            self._stop = self._ticks()
        return (self._stop - self._start) & _MASK

    def elapsed(self) -> int:
        return self.value()

    def is_running(self) -> bool:
        return self._state is State.RUNNING

    def state(self) -> State:
        return self._state

    def resolution(self) -> Resolution:
        return self._resolution