"""claw_tick - Fixed-timestep tick engine with timers and a signal bus."""

from claw_tick.clock import Clock
from claw_tick.engine import Engine
from claw_tick.signals import SignalBus, make_signal_system
from claw_tick.timers import Timer, TimerHandle
from claw_tick.types import System, TickContext

__all__ = [
    "Engine",
    "Clock",
    "TickContext",
    "System",
    "Timer",
    "TimerHandle",
    "SignalBus",
    "make_signal_system",
]
