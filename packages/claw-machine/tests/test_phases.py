"""Tests for the grab phase transition table."""
from __future__ import annotations

import pytest
from claw_machine import CYCLE, TRANSITIONS, GrabPhase, PhaseTransitionError
from claw_machine.phases import check_transition


def test_every_phase_has_a_successor():
    assert set(TRANSITIONS) == set(GrabPhase)
    for successors in TRANSITIONS.values():
        assert successors


def test_cycle_follows_table_back_to_idle():
    current = GrabPhase.IDLE
    for phase in CYCLE:
        check_transition(current, phase)
        current = phase
    assert current is GrabPhase.IDLE


def test_homing_only_leads_to_idle():
    check_transition(GrabPhase.HOMING, GrabPhase.IDLE)
    with pytest.raises(PhaseTransitionError):
        check_transition(GrabPhase.HOMING, GrabPhase.AIMING_HORIZONTAL)


@pytest.mark.parametrize(
    "current, requested",
    [
        (GrabPhase.IDLE, GrabPhase.DESCENDING),
        (GrabPhase.AIMING_HORIZONTAL, GrabPhase.IDLE),
        (GrabPhase.GRABBING, GrabPhase.DROPPING),
        (GrabPhase.DROPPING, GrabPhase.AIMING_HORIZONTAL),
    ],
)
def test_skipping_phases_is_rejected(current, requested):
    with pytest.raises(PhaseTransitionError) as excinfo:
        check_transition(current, requested)
    assert excinfo.value.current is current
    assert excinfo.value.requested is requested
    assert isinstance(excinfo.value, RuntimeError)
