"""Grab sequencer: the phase machine behind one extend/grab/retract cycle.

Each phase step is a method that starts a movement or a delay and names the
method that continues the cycle. Legs run strictly one after another::

    IDLE --press--> AIMING_HORIZONTAL --rail stops--> AIMING_VERTICAL
         --release--> DESCENDING --extended--> GRABBING --closed--> RETRACTING
         --retracted--> ASCENDING --rail and joint home--> DROPPING --> IDLE
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from claw_machine.phases import GrabPhase, check_transition
from claw_machine.targeting import acquire_target

if TYPE_CHECKING:
    from claw_machine.session import GameSession

logger = logging.getLogger(__name__)


class GrabSequencer:
    def __init__(self, session: GameSession) -> None:
        self._session = session
        self.phase = GrabPhase.HOMING
        self.completed_cycles = 0

    def _enter(self, phase: GrabPhase) -> None:
        check_transition(self.phase, phase)
        old, self.phase = self.phase, phase
        logger.debug("phase %s -> %s", old.value, phase.value)
        self._session.bus.publish("phase", old=old, new=phase)

    def reset(self) -> None:
        self.phase = GrabPhase.HOMING
        self.completed_cycles = 0

    # -- Startup homing --

    def home(self) -> None:
        s = self._session
        geo = s.config.geometry
        s.claw.joint.move(
            "y",
            target=geo.top_height - geo.buffer_y,
            interval_ms=s.config.timing.fast_move_interval_ms,
            on_complete=self._home_rail,
        )

    def _home_rail(self) -> None:
        s = self._session
        s.claw.rail.resume_move(
            "x",
            target=s.config.geometry.buffer_x,
            interval_ms=s.config.timing.fast_move_interval_ms,
            on_complete=self._homed,
        )

    def _homed(self) -> None:
        s = self._session
        geo = s.config.geometry
        claw = s.claw
        claw.joint.set_rest(x=geo.buffer_x, y=geo.top_height - geo.buffer_y)
        claw.rail.set_rest(x=geo.buffer_x)
        claw.arm.set_rest(x=claw.arm.x, y=claw.arm.y)
        s.playing = True
        s.horizontal.unlock()
        self._enter(GrabPhase.IDLE)

    # -- Player aiming --

    def on_horizontal_press(self) -> None:
        self._session.claw.set_gripper(missed=False)
        self._enter(GrabPhase.AIMING_HORIZONTAL)
        self._drive_rail()

    def on_horizontal_release(self) -> None:
        # A second drive while the rail moves stops it and runs the continuation.
        self._drive_rail()

    def _drive_rail(self) -> None:
        claw = self._session.claw
        claw.rail.move("x", target=claw.far_bound(), on_complete=self._switch_to_vertical)

    def _switch_to_vertical(self) -> None:
        s = self._session
        s.horizontal.lock()
        s.vertical.unlock()
        self._enter(GrabPhase.AIMING_VERTICAL)

    def on_vertical_press(self) -> None:
        s = self._session
        s.claw.joint.move("y", target=s.config.geometry.buffer_y)

    def on_vertical_release(self) -> None:
        s = self._session
        s.claw.joint.stop()
        s.vertical.lock()
        self._enter(GrabPhase.DESCENDING)
        s.engine.call_later(s.config.timing.grab_delay_ms, self._extend, name="descend")

    # -- Scripted grab --

    def _extend(self) -> None:
        s = self._session
        s.claw.set_gripper(opened=True)
        s.claw.arm.move(
            "h", target=s.config.geometry.max_arm_length, on_complete=self._extended
        )

    def _extended(self) -> None:
        s = self._session
        self._enter(GrabPhase.GRABBING)
        s.engine.call_later(s.config.timing.grab_delay_ms, self._grab, name="grab")

    def _grab(self) -> None:
        s = self._session
        s.claw.set_gripper(opened=False)
        toy = acquire_target(s.toys.candidates(), s.claw.joint, s.config)
        s.target = toy
        if toy is not None:
            s.claw.attach(toy)
            toy.rotate_towards_claw()
            toy.grabbed = True
            s.bus.publish("toy_state", **toy.state())
            logger.debug("grabbed toy %d (%s)", toy.index, toy.kind.name)
        else:
            s.claw.set_gripper(missed=True)
            logger.debug("missed")
        self._enter(GrabPhase.RETRACTING)
        s.claw.arm.resume_move("h", on_complete=self._retracted)

    def _retracted(self) -> None:
        self._enter(GrabPhase.ASCENDING)
        self._session.claw.rail.resume_move("x", on_complete=self._rail_home)

    def _rail_home(self) -> None:
        self._session.claw.joint.resume_move("y", on_complete=self._drop)

    def _drop(self) -> None:
        s = self._session
        self._enter(GrabPhase.DROPPING)
        s.claw.set_gripper(opened=True)
        toy = s.target
        if toy is not None:
            s.claw.detach()
            toy.grabbed = False
            toy.body.z = 3
            toy.body.move(
                "y",
                target=s.config.geometry.height - toy.body.h - s.config.drop_clearance,
                interval_ms=s.config.timing.fast_move_interval_ms,
            )
            s.bus.publish("toy_state", **toy.state())
        s.engine.call_later(s.config.timing.drop_delay_ms, self._finish, name="drop")

    def _finish(self) -> None:
        s = self._session
        s.claw.set_gripper(opened=False)
        toy, s.target = s.target, None
        if toy is not None:
            toy.ready = True
            s.bus.publish("toy_state", **toy.state())
            s.set_indicator(True)
        self.completed_cycles += 1
        s.horizontal.unlock()
        self._enter(GrabPhase.IDLE)
