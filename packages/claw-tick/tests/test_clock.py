"""Tests for clock advancement and TickContext generation."""

import random

import pytest
from claw_tick.clock import Clock
from claw_tick.types import TickContext

_test_rng = random.Random(0)


def test_clock_initialization():
    """Clock initializes with correct TPS, dt and step length."""
    clock = Clock(tps=20)
    assert clock.tps == 20
    assert clock.tick_number == 0
    assert abs(clock.dt - 0.05) < 1e-9
    assert clock.step_ms == 50.0


def test_clock_rejects_non_positive_tps():
    with pytest.raises(ValueError):
        Clock(tps=0)
    with pytest.raises(ValueError):
        Clock(tps=-5)


def test_advance_returns_new_tick_number():
    clock = Clock(tps=20)
    assert clock.advance() == 1
    assert clock.advance() == 2
    assert clock.tick_number == 2


def test_context_reflects_clock_state():
    """Context carries tick number, dt and elapsed seconds."""
    clock = Clock(tps=10)
    clock.advance()
    clock.advance()
    clock.advance()
    ctx = clock.context(_test_rng)
    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 3
    assert abs(ctx.dt - 0.1) < 1e-9
    assert abs(ctx.elapsed - 0.3) < 1e-9
    assert ctx.random is _test_rng


def test_context_is_frozen():
    ctx = Clock(tps=20).context(_test_rng)
    with pytest.raises(AttributeError):
        ctx.tick_number = 5  # type: ignore[misc]


def test_reset():
    clock = Clock(tps=20)
    clock.advance()
    clock.reset()
    assert clock.tick_number == 0
    clock.reset(40)
    assert clock.tick_number == 40
