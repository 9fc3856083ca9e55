"""Kinematic bodies: stepwise axis interpolation with linked-body propagation.

A body moves one axis at a time toward a target, at most ``max_step`` units
per tick, on a repeating engine timer. Every tick applies the same signed
delta to the body's links and its attached body. Calling ``move`` while a
movement is active is a toggle: the running movement is cancelled and its
completion continuation fires instead of a new movement starting.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from claw_machine.exceptions import InvalidAxisError

if TYPE_CHECKING:
    from claw_tick import Engine, SignalBus, TimerHandle

logger = logging.getLogger(__name__)

AXES = ("x", "y", "w", "h")

# Extension of the arm shows up as vertical travel on anything it carries.
EXTENSION_AXIS = "h"

Continuation = Callable[[], None]


def linked_axis(axis: str) -> str:
    return "y" if axis == EXTENSION_AXIS else axis


@dataclass(frozen=True)
class Pose:
    """Snapshot of a body's visual placement. ``pivot`` of None means centre."""

    name: str
    x: float
    y: float
    z: int
    w: float
    h: float
    angle: float
    pivot: tuple[float, float] | None


@dataclass
class Movement:
    axis: str
    target: float
    on_complete: Continuation | None
    handle: TimerHandle


class KinematicBody:
    def __init__(
        self,
        name: str,
        engine: Engine,
        bus: SignalBus,
        *,
        x: float = 0,
        y: float = 0,
        z: int = 0,
        w: float = 0,
        h: float = 0,
        reach: float | None = None,
        max_step: float = 10,
        move_interval_ms: float = 100,
    ) -> None:
        self.name = name
        self.x = x
        self.y = y
        self.z = z
        self.w = w
        self.h = h
        self.angle: float = 0
        self.pivot: tuple[float, float] | None = None
        self.reach = reach
        self.max_step = max_step
        self.move_interval_ms = move_interval_ms
        self.rest: dict[str, float] = {axis: getattr(self, axis) for axis in AXES}
        self.links: list[KinematicBody] = []
        self.attached: KinematicBody | None = None
        self._engine = engine
        self._bus = bus
        self._movement: Movement | None = None

    def __repr__(self) -> str:
        return f"KinematicBody({self.name!r}, x={self.x}, y={self.y}, w={self.w}, h={self.h})"

    @property
    def moving(self) -> bool:
        return self._movement is not None

    @property
    def movement(self) -> Movement | None:
        return self._movement

    @property
    def shadow_scale(self) -> float | None:
        if not self.reach:
            return None
        return 0.5 + self.h / self.reach / 2

    def _check_axis(self, axis: str) -> None:
        if axis not in AXES:
            raise InvalidAxisError(self.name, axis)

    def set_rest(self, **values: float) -> None:
        for axis, value in values.items():
            self._check_axis(axis)
            self.rest[axis] = value

    def move(
        self,
        axis: str,
        target: float | None = None,
        interval_ms: float | None = None,
        on_complete: Continuation | None = None,
    ) -> None:
        self._check_axis(axis)
        if self._movement is not None:
            logger.debug("%s: move while moving, cancelling %s", self.name, self._movement.axis)
            self._finish()
            return
        self._start(axis, target, interval_ms, on_complete)

    def resume_move(
        self,
        axis: str,
        target: float | None = None,
        interval_ms: float | None = None,
        on_complete: Continuation | None = None,
    ) -> None:
        """Start a movement regardless of any stale one, without the toggle."""
        self._check_axis(axis)
        self.stop()
        self._start(axis, target, interval_ms, on_complete)

    def stop(self) -> None:
        """Cancel the active movement without running its continuation."""
        if self._movement is not None:
            self._movement.handle.cancel()
            self._movement = None

    def _start(
        self,
        axis: str,
        target: float | None,
        interval_ms: float | None,
        on_complete: Continuation | None,
    ) -> None:
        goal = self.rest[axis] if target is None else target
        handle = self._engine.call_every(
            interval_ms or self.move_interval_ms,
            self._tick,
            name=f"{self.name}.{axis}",
        )
        self._movement = Movement(axis=axis, target=goal, on_complete=on_complete, handle=handle)

    def _finish(self) -> None:
        movement = self._movement
        assert movement is not None
        movement.handle.cancel()
        self._movement = None
        if movement.on_complete is not None:
            movement.on_complete()

    def _tick(self) -> None:
        movement = self._movement
        if movement is None:
            return
        current = getattr(self, movement.axis)
        remaining = abs(current - movement.target)
        if remaining == 0:
            self._finish()
            return

        step = min(remaining, self.max_step)
        delta = step if movement.target > current else -step
        setattr(self, movement.axis, current + delta)
        self.publish()
        if movement.axis == EXTENSION_AXIS and self.reach:
            self._bus.publish("shadow", body=self.name, scale=self.shadow_scale)

        receiver_axis = linked_axis(movement.axis)
        for other in self.carried():
            setattr(other, receiver_axis, getattr(other, receiver_axis) + delta)
            other.publish()

    def carried(self) -> list[KinematicBody]:
        """Bodies that receive this body's per-tick delta."""
        bodies = list(self.links)
        if self.attached is not None:
            bodies.append(self.attached)
        return bodies

    def distance_to(self, other: KinematicBody) -> int:
        return round(math.hypot(self.x - other.x, self.y - other.y))

    def pose(self) -> Pose:
        return Pose(
            name=self.name,
            x=self.x,
            y=self.y,
            z=self.z,
            w=self.w,
            h=self.h,
            angle=self.angle,
            pivot=self.pivot,
        )

    def publish(self) -> None:
        self._bus.publish("pose", pose=self.pose())

    def reset(self) -> None:
        """Stop and return every axis to its rest value."""
        self.stop()
        for axis in AXES:
            setattr(self, axis, self.rest[axis])
        self.angle = 0
        self.pivot = None
        self.attached = None
        self.publish()
