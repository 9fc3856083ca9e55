"""Claw assembly: rail, joint, and arm bodies plus the gripper."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from claw_machine.kinematics import KinematicBody

if TYPE_CHECKING:
    from claw_machine.config import GameConfig
    from claw_machine.toys import Toy
    from claw_tick import Engine, SignalBus

logger = logging.getLogger(__name__)


class ClawAssembly:
    """Three coupled bodies.

    The rail carries the joint and the arm horizontally, the joint carries the
    arm vertically, and whichever toy is attached rides along with all three.
    """

    def __init__(self, config: GameConfig, engine: Engine, bus: SignalBus) -> None:
        geo = config.geometry
        self._config = config
        self._bus = bus
        common = {
            "max_step": config.max_step,
            "move_interval_ms": config.timing.move_interval_ms,
        }
        self.rail = KinematicBody("rail", engine, bus, z=2, w=geo.rail_size[0], h=geo.rail_size[1], **common)
        self.joint = KinematicBody("joint", engine, bus, z=4, w=geo.joint_size[0], h=geo.joint_size[1], **common)
        self.arm = KinematicBody(
            "arm",
            engine,
            bus,
            z=4,
            w=geo.arm_size[0],
            h=geo.arm_size[1],
            reach=geo.max_arm_length,
            **common,
        )
        self.rail.links = [self.joint, self.arm]
        self.joint.links = [self.arm]
        self._initial = {body.name: dict(body.rest) for body in self.bodies}
        self.open = False
        self.missed = False

    @property
    def bodies(self) -> tuple[KinematicBody, KinematicBody, KinematicBody]:
        return self.rail, self.joint, self.arm

    @property
    def attached(self) -> KinematicBody | None:
        return self.arm.attached

    def far_bound(self) -> float:
        geo = self._config.geometry
        return geo.width - self.joint.w - geo.buffer_x

    def attach(self, toy: Toy) -> None:
        if self.attached is not None:
            raise RuntimeError(f"claw already carries {self.attached.name}")
        for body in self.bodies:
            body.attached = toy.body
        logger.debug("attached %s", toy.body.name)

    def detach(self) -> KinematicBody | None:
        carried = self.attached
        for body in self.bodies:
            body.attached = None
        if carried is not None:
            logger.debug("detached %s", carried.name)
        return carried

    def set_gripper(self, *, opened: bool | None = None, missed: bool | None = None) -> None:
        if opened is not None:
            self.open = opened
        if missed is not None:
            self.missed = missed
        self._bus.publish("gripper", open=self.open, missed=self.missed)

    def publish(self) -> None:
        for body in self.bodies:
            body.publish()
        self._bus.publish("shadow", body=self.arm.name, scale=self.arm.shadow_scale)

    def reset(self) -> None:
        """Return every part to its construction pose and rest values."""
        self.detach()
        for body in self.bodies:
            body.set_rest(**self._initial[body.name])
            body.reset()
        self.set_gripper(opened=False, missed=False)
        self._bus.publish("shadow", body=self.arm.name, scale=self.arm.shadow_scale)

