"""claw_machine - Claw grabber kinematics and grab sequencing on the claw tick engine."""
from __future__ import annotations

from claw_machine.claw import ClawAssembly
from claw_machine.collection import CollectionTracker
from claw_machine.config import GameConfig, MachineGeometry, Timing
from claw_machine.controls import Control
from claw_machine.exceptions import (
    ClawMachineError,
    ConfigError,
    InvalidAxisError,
    PhaseTransitionError,
)
from claw_machine.geometry import Rect
from claw_machine.kinematics import KinematicBody, Pose
from claw_machine.phases import CYCLE, TRANSITIONS, GrabPhase
from claw_machine.sequencer import GrabSequencer
from claw_machine.session import GameSession
from claw_machine.targeting import acquire_target, capture_rect, find_target
from claw_machine.toys import CATALOG, Toy, ToyRegistry, ToyType, claw_rotation

__all__ = [
    "GameSession",
    "GameConfig",
    "MachineGeometry",
    "Timing",
    "KinematicBody",
    "Pose",
    "ClawAssembly",
    "Control",
    "GrabPhase",
    "GrabSequencer",
    "TRANSITIONS",
    "CYCLE",
    "CollectionTracker",
    "Rect",
    "Toy",
    "ToyType",
    "ToyRegistry",
    "CATALOG",
    "claw_rotation",
    "capture_rect",
    "find_target",
    "acquire_target",
    "ClawMachineError",
    "ConfigError",
    "InvalidAxisError",
    "PhaseTransitionError",
]
