"""Shared fixtures for claw_machine tests."""
from __future__ import annotations

import pytest
from claw_machine import GameConfig, GameSession, GrabPhase, MachineGeometry
from claw_machine.kinematics import KinematicBody
from claw_machine.toys import Toy, ToyType
from claw_tick import Engine, SignalBus

# Compact machine: max arm length 100, arm rests at 20, joint homes to y=104.
SMALL_GEOMETRY = MachineGeometry(
    width=400,
    height=600,
    top_height=120,
    bottom_height=180,
    bottom_offset=116,
    rail_size=(40, 120),
    joint_size=(40, 20),
    arm_size=(40, 20),
)


@pytest.fixture
def engine() -> Engine:
    return Engine(tps=20, seed=42)


@pytest.fixture
def bus() -> SignalBus:
    return SignalBus()


@pytest.fixture
def config() -> GameConfig:
    return GameConfig(geometry=SMALL_GEOMETRY)


@pytest.fixture
def session(config: GameConfig) -> GameSession:
    """A started session that has finished homing."""
    s = GameSession(config, seed=42)
    s.start()
    s.engine.run_until(lambda: s.phase is GrabPhase.IDLE, limit=200)
    return s


@pytest.fixture
def make_toy(engine: Engine, bus: SignalBus):
    def _make(index: int, x: float, y: float, w: float = 40, h: float = 54) -> Toy:
        body = KinematicBody(f"toy-{index}", engine, bus, x=x, y=y, w=w, h=h)
        return Toy(index=index, kind=ToyType("bear", w, h), body=body)

    return _make


@pytest.fixture
def record():
    """Collect the payload of every delivered signal with a given name."""

    def _record(bus: SignalBus, signal_name: str) -> list[dict]:
        seen: list[dict] = []
        bus.subscribe(signal_name, lambda name, data: seen.append(data))
        return seen

    return _record


@pytest.fixture
def clear_field():
    """Move every toy far outside the claw's reach."""

    def _clear(session: GameSession) -> None:
        for toy in session.toys:
            toy.body.x = -1000
            toy.body.y = -1000

    return _clear
