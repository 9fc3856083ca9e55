"""Grab cycle phases and the transitions allowed between them."""
from __future__ import annotations

from enum import Enum

from claw_machine.exceptions import PhaseTransitionError


class GrabPhase(Enum):
    HOMING = "homing"
    IDLE = "idle"
    AIMING_HORIZONTAL = "aiming_horizontal"
    AIMING_VERTICAL = "aiming_vertical"
    DESCENDING = "descending"
    GRABBING = "grabbing"
    RETRACTING = "retracting"
    ASCENDING = "ascending"
    DROPPING = "dropping"


TRANSITIONS: dict[GrabPhase, tuple[GrabPhase, ...]] = {
    GrabPhase.HOMING: (GrabPhase.IDLE,),
    GrabPhase.IDLE: (GrabPhase.AIMING_HORIZONTAL,),
    GrabPhase.AIMING_HORIZONTAL: (GrabPhase.AIMING_VERTICAL,),
    GrabPhase.AIMING_VERTICAL: (GrabPhase.DESCENDING,),
    GrabPhase.DESCENDING: (GrabPhase.GRABBING,),
    GrabPhase.GRABBING: (GrabPhase.RETRACTING,),
    GrabPhase.RETRACTING: (GrabPhase.ASCENDING,),
    GrabPhase.ASCENDING: (GrabPhase.DROPPING,),
    GrabPhase.DROPPING: (GrabPhase.IDLE,),
}

# One full grab, from the first press back to idle.
CYCLE: tuple[GrabPhase, ...] = (
    GrabPhase.AIMING_HORIZONTAL,
    GrabPhase.AIMING_VERTICAL,
    GrabPhase.DESCENDING,
    GrabPhase.GRABBING,
    GrabPhase.RETRACTING,
    GrabPhase.ASCENDING,
    GrabPhase.DROPPING,
    GrabPhase.IDLE,
)


def check_transition(current: GrabPhase, requested: GrabPhase) -> None:
    if requested not in TRANSITIONS.get(current, ()):
        raise PhaseTransitionError(current, requested)
