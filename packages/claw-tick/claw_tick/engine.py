"""Engine - fixed-timestep loop, timer scheduling, and per-tick systems."""

import os
import random
from typing import Callable

from claw_tick.clock import Clock
from claw_tick.timers import Timer, TimerHandle, advance_timer
from claw_tick.types import System, TimerCallback


class Engine:
    def __init__(self, tps: int = 20, seed: int | None = None) -> None:
        self._clock = Clock(tps)
        self._systems: list[System] = []
        self._timers: list[Timer] = []

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    @property
    def pending(self) -> int:
        return sum(1 for timer in self._timers if not timer.cancelled)

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def ticks_for(self, ms: float) -> int:
        """Convert a millisecond duration to a whole number of ticks (at least 1)."""
        if ms < 0:
            raise ValueError(f"duration must be non-negative, got {ms}")
        return max(1, round(ms / self._clock.step_ms))

    def call_later(
        self, delay_ms: float, callback: TimerCallback, name: str = "timer"
    ) -> TimerHandle:
        timer = Timer(name=name, remaining=self.ticks_for(delay_ms), callback=callback)
        self._timers.append(timer)
        return TimerHandle(timer)

    def call_every(
        self, interval_ms: float, callback: TimerCallback, name: str = "periodic"
    ) -> TimerHandle:
        ticks = self.ticks_for(interval_ms)
        timer = Timer(name=name, remaining=ticks, callback=callback, interval=ticks)
        self._timers.append(timer)
        return TimerHandle(timer)

    def cancel_all(self) -> None:
        for timer in self._timers:
            timer.cancelled = True
        self._timers.clear()

    def _tick(self) -> None:
        self._clock.advance()
        # Timers scheduled while firing start counting on the next tick.
        for timer in list(self._timers):
            if timer.cancelled:
                continue
            if advance_timer(timer):
                timer.callback()
        self._timers = [timer for timer in self._timers if not timer.cancelled]

        ctx = self._clock.context(self._rng)
        for system in self._systems:
            system(ctx)

    def step(self) -> None:
        self._tick()

    def run(self, n: int) -> None:
        for _ in range(n):
            self._tick()

    def run_until(self, predicate: Callable[[], bool], limit: int = 10_000) -> int:
        """Step until ``predicate()`` holds. Returns the number of ticks taken."""
        for taken in range(limit + 1):
            if predicate():
                return taken
            if taken < limit:
                self._tick()
        raise TimeoutError(f"condition not reached within {limit} ticks")
