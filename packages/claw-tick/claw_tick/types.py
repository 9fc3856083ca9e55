"""Shared types for the claw tick engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    random: _random.Random


System = Callable[[TickContext], None]

TimerCallback = Callable[[], None]
