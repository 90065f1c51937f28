"""Millisecond delta source for the game loop."""

from typing import Callable

from invaders.entities.base import monotonic_ms


class TickClock:
    """Measures the time between ticks in whole milliseconds.

    reset() moves the baseline to now, so time spent paused or waiting is
    never handed to the simulation as one large delta.
    """

    def __init__(self, clock: Callable[[], int] = monotonic_ms):
        self._clock = clock
        self._last = clock()

    def tick(self) -> int:
        """Milliseconds since the previous tick() or reset(); never negative."""
        now = self._clock()
        delta = max(0, now - self._last)
        self._last = now
        return delta

    def reset(self) -> None:
        self._last = self._clock()
