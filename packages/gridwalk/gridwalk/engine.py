"""Engine - ordered systems, per-frame stepping, and lifecycle hooks."""

from typing import Callable

from gridwalk.clock import Clock
from gridwalk.types import System, TickContext
from gridwalk.world import World

Hook = Callable[[World, TickContext], None]


class Engine:
    """Runs registered systems once per frame, in registration order.

    The engine does no pacing of its own. The caller decides how long a
    frame lasted and passes that as ``dt``.
    """

    def __init__(self) -> None:
        self._clock = Clock()
        self._world = World()
        self._systems: list[System] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested: bool = False

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self, dt: float) -> None:
        self._clock.advance(dt)
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self._world, ctx)
            if self._stop_requested:
                break

    def _fire(self, hooks: list[Hook]) -> None:
        ctx = self._clock.context(self._request_stop)
        for hook in hooks:
            hook(self._world, ctx)

    def start(self) -> None:
        self._stop_requested = False
        self._fire(self._start_hooks)

    def stop(self) -> None:
        self._fire(self._stop_hooks)

    def step(self, dt: float) -> None:
        self._stop_requested = False
        self._tick(dt)

    def run(self, n: int, dt: float) -> None:
        """Run ``n`` frames of ``dt`` seconds each, with start/stop hooks."""
        self.start()
        for _ in range(n):
            self._tick(dt)
            if self._stop_requested:
                break
        self.stop()
