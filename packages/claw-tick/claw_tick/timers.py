"""One-shot and repeating timers driven by engine ticks."""
from __future__ import annotations

from dataclasses import dataclass

from claw_tick.types import TimerCallback


@dataclass
class Timer:
    """Countdown measured in ticks.

    A one-shot timer (``interval is None``) fires when ``remaining`` reaches 0
    and is then retired. A repeating timer fires every ``interval`` ticks
    until cancelled.
    """

    name: str
    remaining: int
    callback: TimerCallback
    interval: int | None = None
    cancelled: bool = False

    @property
    def repeating(self) -> bool:
        return self.interval is not None


class TimerHandle:
    """Owned cancellation handle returned by the engine's scheduling calls."""

    __slots__ = ("_timer",)

    def __init__(self, timer: Timer) -> None:
        self._timer = timer

    @property
    def name(self) -> str:
        return self._timer.name

    @property
    def active(self) -> bool:
        return not self._timer.cancelled

    def cancel(self) -> None:
        self._timer.cancelled = True

    def __repr__(self) -> str:
        state = "active" if self.active else "cancelled"
        return f"TimerHandle({self._timer.name!r}, {state})"


def advance_timer(timer: Timer) -> bool:
    """Count one tick down on ``timer``. Returns True if it is due to fire.

    One-shot timers are marked cancelled when due so they never fire twice.
    """
    if timer.interval is None:
        timer.remaining -= 1
        if timer.remaining <= 0:
            timer.cancelled = True
            return True
        return False

    timer.remaining -= 1
    if timer.remaining <= 0:
        timer.remaining = timer.interval
        return True
    return False
