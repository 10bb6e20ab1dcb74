"""Clock for a frame-driven loop with a variable time step."""

from typing import Callable

from gridwalk.types import TickContext


class Clock:
    """Counts frames and accumulates elapsed seconds.

    Unlike a fixed-timestep clock, every frame carries its own ``dt``
    supplied by whoever drives the loop (normally the render shell).
    """

    def __init__(self) -> None:
        self._tick_number = 0
        self._dt = 0.0
        self._elapsed = 0.0

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self, dt: float) -> int:
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        self._tick_number += 1
        self._dt = dt
        self._elapsed += dt
        return self._tick_number

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._elapsed,
            request_stop=stop_fn,
        )
