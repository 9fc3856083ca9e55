"""Toy catalog, grid spawning, and the rotation of a toy hanging from the claw."""
from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from claw_machine.geometry import Rect, grid_column, grid_row, normalize_angle, rad_to_deg
from claw_machine.kinematics import KinematicBody

if TYPE_CHECKING:
    from claw_machine.config import GameConfig
    from claw_tick import Engine, SignalBus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToyType:
    name: str
    w: float
    h: float

    def scaled(self, scale: float) -> ToyType:
        return ToyType(self.name, self.w * scale, self.h * scale)


# Unscaled sprite footprints.
CATALOG: tuple[ToyType, ...] = (
    ToyType("bear", 20, 27),
    ToyType("bunny", 20, 29),
    ToyType("golem", 20, 27),
    ToyType("cucumber", 16, 28),
    ToyType("penguin", 24, 22),
    ToyType("robot", 20, 30),
    ToyType("roses", 20, 30),
)


def shuffled_kinds(rng: random.Random, scale: float = 1) -> list[ToyType]:
    """Every catalog type twice, in random order."""
    kinds = [kind.scaled(scale) for kind in CATALOG * 2]
    rng.shuffle(kinds)
    return kinds


def spawn_position(
    index: int, kind: ToyType, config: GameConfig, rng: random.Random
) -> tuple[float, float]:
    geo = config.geometry
    corner = geo.corner_buffer
    column_w = (geo.width - corner * 3) / config.toys_per_row
    row_h = (geo.bottom_height - corner * 2) / config.toy_rows
    x = (
        corner
        + grid_column(index, config.toys_per_row) * column_w
        + kind.w / 2
        + rng.randint(-6, 6)
    )
    y = (
        geo.bottom_offset
        + corner
        + grid_row(index, config.toys_per_row) * row_h
        - kind.h / 2
        + rng.randint(-2, 2)
    )
    return x, y


def claw_rotation(center: tuple[float, float], claw_point: tuple[float, float]) -> int:
    """Signed display angle of a toy hanging from ``claw_point``.

    The bearing from the claw to the toy's centre is rotated by 90 degrees and
    normalized to ``[0, 360)``; angles under 180 are negated, the rest become
    ``360 - angle``.
    """
    cx, cy = center
    px, py = claw_point
    angle = rad_to_deg(math.atan2(cy - py, cx - px)) - 90
    normalized = round(normalize_angle(angle))
    if normalized < 180:
        return -normalized
    return 360 - normalized


@dataclass
class Toy:
    index: int
    kind: ToyType
    body: KinematicBody
    grabbed: bool = False
    ready: bool = False
    collected: bool = False
    claw_point: tuple[float, float] | None = None

    @property
    def x(self) -> float:
        return self.body.x

    @property
    def y(self) -> float:
        return self.body.y

    @property
    def center(self) -> tuple[float, float]:
        return self.body.x + self.body.w / 2, self.body.y + self.body.h / 2

    def lock_on(self, claw: Rect) -> None:
        """Pivot around the claw's capture point and remember it for rotation."""
        self.body.pivot = (claw.x - self.body.x, claw.y - self.body.y)
        self.claw_point = (claw.x, claw.y)
        self.body.publish()

    def rotate_towards_claw(self) -> float:
        if self.claw_point is None:
            raise ValueError(f"toy {self.index} has no claw point to rotate around")
        self.body.angle = claw_rotation(self.center, self.claw_point)
        self.body.publish()
        return self.body.angle

    def state(self) -> dict[str, object]:
        return {
            "index": self.index,
            "kind": self.kind.name,
            "grabbed": self.grabbed,
            "ready": self.ready,
            "collected": self.collected,
        }


class ToyRegistry:
    """All toys of the current game, in creation order."""

    def __init__(self) -> None:
        self._toys: dict[int, Toy] = {}

    def __iter__(self) -> Iterator[Toy]:
        return iter(self._toys.values())

    def __len__(self) -> int:
        return len(self._toys)

    def get(self, index: int) -> Toy:
        return self._toys[index]

    def spawn(self, config: GameConfig, engine: Engine, bus: SignalBus) -> list[Toy]:
        rng = engine.random
        kinds = shuffled_kinds(rng, config.scale)
        slots = config.toys_per_row * config.toy_rows
        spawned = []
        for index in range(slots):
            if index == config.skip_index:
                continue
            kind = kinds[index]
            x, y = spawn_position(index, kind, config, rng)
            body = KinematicBody(
                f"toy-{index}",
                engine,
                bus,
                x=x,
                y=y,
                z=0,
                w=kind.w,
                h=kind.h,
                max_step=config.max_step,
                move_interval_ms=config.timing.move_interval_ms,
            )
            toy = Toy(index=index, kind=kind, body=body)
            self._toys[index] = toy
            spawned.append(toy)
            bus.publish("toy_spawned", index=index, kind=kind.name, pose=body.pose())
        logger.debug("spawned %d toys: %s", len(spawned), [t.kind.name for t in spawned])
        return spawned

    def ready(self) -> list[Toy]:
        return [toy for toy in self._toys.values() if toy.ready]

    def candidates(self) -> list[Toy]:
        """Toys still in the play field."""
        return [
            toy for toy in self._toys.values() if not toy.collected and not toy.ready
        ]

    def clear(self) -> None:
        for toy in self._toys.values():
            toy.body.stop()
        self._toys.clear()
