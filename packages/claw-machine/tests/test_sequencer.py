"""Tests for the grab sequencer driven through the session's controls."""
from __future__ import annotations

import pytest
from claw_machine import CYCLE, GameSession, GrabPhase, PhaseTransitionError, claw_rotation

# With the compact machine: 10 (descend delay) + 18 (extend 80) + 10 (grab delay)
# + 18 (retract 80) + 8 (rail home 30) + 2 (joint already home) + 14 (drop delay).
CYCLE_TICKS = 80


def aim(session: GameSession, rail_ticks: int = 6, jog_ticks: int = 0) -> None:
    """Drive the rail for ``rail_ticks``, then jog the joint and let go."""
    assert session.press("horizontal")
    session.run(rail_ticks)
    assert session.release("horizontal")
    assert session.press("vertical")
    session.run(jog_ticks)
    assert session.release("vertical")


class TestHoming:
    def test_homing_duration_and_rest_pose(self, config):
        session = GameSession(config, seed=42)
        session.start()
        assert session.phase is GrabPhase.HOMING
        assert not session.press("horizontal")

        taken = session.engine.run_until(lambda: session.phase is GrabPhase.IDLE, limit=200)

        assert taken == 17
        claw = session.claw
        assert claw.joint.y == 104
        assert claw.rail.x == 36
        assert claw.joint.x == 36
        assert claw.joint.rest["y"] == 104
        assert claw.rail.rest["x"] == 36
        assert not session.horizontal.locked
        assert session.vertical.locked
        assert session.playing

    def test_start_twice_rejected(self, session):
        with pytest.raises(RuntimeError):
            session.start()

    def test_skipping_homing_is_a_contract_violation(self, config):
        session = GameSession(config, seed=42)
        session.start()
        with pytest.raises(PhaseTransitionError):
            session.sequencer.on_horizontal_press()


class TestAiming:
    """Player-driven horizontal travel and vertical jogging."""

    def test_release_stops_rail_and_hands_over_to_vertical(self, session, record):
        phases = record(session.bus, "phase")
        session.press("horizontal")
        session.run(6)
        session.release("horizontal")
        session.step()

        assert session.claw.rail.x == 66
        assert session.claw.joint.x == 66
        assert not session.claw.rail.moving
        assert session.phase is GrabPhase.AIMING_VERTICAL
        assert session.horizontal.locked
        assert not session.vertical.locked
        assert [p["new"] for p in phases] == [GrabPhase.AIMING_HORIZONTAL, GrabPhase.AIMING_VERTICAL]

        session.run(10)
        assert session.claw.rail.x == 66

    def test_rail_stops_at_far_bound_on_its_own(self, session):
        session.press("horizontal")
        session.engine.run_until(lambda: session.phase is GrabPhase.AIMING_VERTICAL, limit=200)
        assert session.claw.rail.x == session.claw.far_bound() == 324
        assert not session.release("horizontal")
        assert session.phase is GrabPhase.AIMING_VERTICAL

    def test_vertical_jog_stops_on_release(self, session):
        session.press("horizontal")
        session.run(2)
        session.release("horizontal")
        session.press("vertical")
        session.run(4)
        assert session.claw.joint.y == 84
        session.release("vertical")
        assert not session.claw.joint.moving
        assert session.vertical.locked
        assert session.phase is GrabPhase.DESCENDING
        session.run(4)
        assert session.claw.joint.y == 84


class TestGrabCycle:
    """Full extend/grab/retract/drop passes."""

    def test_miss_runs_one_pass_of_fixed_duration(self, session, record, clear_field):
        phases = record(session.bus, "phase")
        clear_field(session)
        aim(session)

        taken = session.engine.run_until(lambda: session.phase is GrabPhase.IDLE, limit=500)

        assert taken == CYCLE_TICKS
        assert [p["new"] for p in phases] == list(CYCLE)
        assert session.claw.missed
        assert session.target is None
        assert session.claw.attached is None
        assert session.collected == 0
        assert session.toys.ready() == []
        assert not session.horizontal.locked
        assert session.sequencer.completed_cycles == 1

    def test_pose_returns_to_rest_after_cycle(self, session, clear_field):
        clear_field(session)
        aim(session)
        session.engine.run_until(lambda: session.phase is GrabPhase.IDLE, limit=500)
        claw = session.claw
        assert (claw.rail.x, claw.joint.x, claw.joint.y, claw.arm.h) == (36, 36, 104, 20)
        assert not claw.open

    def test_hit_carries_rotates_and_drops_toy(self, session, record, clear_field):
        states = record(session.bus, "toy_state")
        indicator = record(session.bus, "indicator")
        clear_field(session)
        toy = session.toys.get(11)
        toy.body.x, toy.body.y = 80, 235
        expected_angle = claw_rotation(toy.center, (73, 227))

        aim(session)
        taken = session.engine.run_until(lambda: session.phase is GrabPhase.IDLE, limit=500)

        assert taken == CYCLE_TICKS
        assert toy.claw_point == (73, 227)
        assert toy.body.pivot == (-7, -8)
        assert toy.body.angle == expected_angle
        assert toy.ready
        assert not toy.grabbed
        assert not session.claw.missed
        assert session.claw.attached is None
        assert session.target is None
        assert session.indicator
        assert indicator == [{"active": True}]
        assert [s["grabbed"] for s in states][:1] == [True]

        session.run(60)
        assert toy.body.z == 3
        assert toy.x == 50
        assert toy.y == 600 - toy.body.h - 30
        assert session.collected == 0

    def test_retract_lifts_attached_toy(self, session, clear_field):
        clear_field(session)
        toy = session.toys.get(11)
        toy.body.x, toy.body.y = 80, 235
        aim(session)
        session.engine.run_until(lambda: session.phase is GrabPhase.ASCENDING, limit=500)
        assert toy.y == 155
        assert toy.x == 80
        session.engine.run_until(lambda: session.phase is GrabPhase.DROPPING, limit=500)
        assert toy.x == 50

    def test_tie_break_grabs_highest_index(self, session, clear_field):
        clear_field(session)
        low, high = session.toys.get(2), session.toys.get(9)
        low.body.x, low.body.y = 75, 229
        high.body.x, high.body.y = 110, 256
        aim(session)
        session.engine.run_until(lambda: session.phase is GrabPhase.IDLE, limit=500)
        assert high.ready
        assert not low.ready
        assert low.y == 229

    def test_waiting_toys_are_not_grabbed_again(self, session, clear_field):
        clear_field(session)
        toy = session.toys.get(11)
        toy.body.x, toy.body.y = 80, 235
        toy.ready = True
        aim(session)
        session.engine.run_until(lambda: session.phase is GrabPhase.IDLE, limit=500)
        assert session.claw.missed
        assert (toy.x, toy.y) == (80, 235)

    def test_next_press_clears_missed_flag(self, session, clear_field):
        clear_field(session)
        aim(session)
        session.engine.run_until(lambda: session.phase is GrabPhase.IDLE, limit=500)
        assert session.claw.missed
        session.press("horizontal")
        assert not session.claw.missed
        assert session.phase is GrabPhase.AIMING_HORIZONTAL
