"""Claw capture rectangle and toy selection."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from claw_machine.geometry import Rect

if TYPE_CHECKING:
    from claw_machine.config import GameConfig
    from claw_machine.kinematics import KinematicBody
    from claw_machine.toys import Toy

logger = logging.getLogger(__name__)


def capture_rect(joint: KinematicBody, config: GameConfig) -> Rect:
    """Where the claw closes when fully extended below ``joint``."""
    geo = config.geometry
    return Rect(
        x=joint.x + config.claw_offset,
        y=joint.y + geo.max_arm_length + geo.buffer_y + config.claw_offset,
        w=config.claw_width,
        h=config.claw_height,
    )


def find_target(toys: Iterable[Toy], claw: Rect) -> Toy | None:
    """Pick the toy whose origin lies strictly inside ``claw``.

    Only the toy's origin is tested, not its full footprint. When several
    toys qualify the one created last wins.
    """
    candidates = [toy for toy in toys if claw.contains_origin(toy.x, toy.y)]
    if not candidates:
        logger.debug("no toy under claw at (%s, %s)", claw.x, claw.y)
        return None
    target = max(candidates, key=lambda toy: toy.index)
    logger.debug(
        "claw at (%s, %s) over toys %s, picked %d",
        claw.x,
        claw.y,
        [toy.index for toy in candidates],
        target.index,
    )
    return target


def acquire_target(toys: Iterable[Toy], joint: KinematicBody, config: GameConfig) -> Toy | None:
    """Run targeting once and lock the winner onto the claw's capture point."""
    claw = capture_rect(joint, config)
    target = find_target(toys, claw)
    if target is not None:
        target.lock_on(claw)
    return target
