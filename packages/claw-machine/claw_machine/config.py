"""Configuration dataclasses for timing, machine geometry, and the toy grid."""
from __future__ import annotations

import dataclasses
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from claw_machine.exceptions import ConfigError


@dataclass(frozen=True)
class Timing:
    """Animation timing in milliseconds.

    Attributes:
        move_interval_ms: Tick interval for player-driven and retreat moves.
        fast_move_interval_ms: Tick interval for scripted moves (homing, drop).
        grab_delay_ms: Pause before extending and again before closing the claw.
        drop_delay_ms: Pause between releasing a toy and unlocking controls.
        collect_display_ms: How long a collected toy is shown before the win check.
    """

    move_interval_ms: int = 100
    fast_move_interval_ms: int = 50
    grab_delay_ms: int = 500
    drop_delay_ms: int = 700
    collect_display_ms: int = 1000


@dataclass(frozen=True)
class MachineGeometry:
    """Machine bounds and claw part sizes, fixed for a session.

    ``bottom_offset`` is the distance from the top of the machine to the top
    of the bottom (toy) region. Part sizes are ``(w, h)``; the arm's height
    is its retracted length.
    """

    width: float = 480
    height: float = 640
    top_height: float = 160
    bottom_height: float = 200
    bottom_offset: float = 440
    corner_buffer: float = 16
    buffer_x: float = 36
    buffer_y: float = 16
    rail_size: tuple[float, float] = (56, 160)
    joint_size: tuple[float, float] = (56, 24)
    arm_size: tuple[float, float] = (56, 24)

    @property
    def max_arm_length(self) -> float:
        return self.bottom_offset - self.buffer_y


@dataclass(frozen=True)
class GameConfig:
    geometry: MachineGeometry = field(default_factory=MachineGeometry)
    timing: Timing = field(default_factory=Timing)
    scale: int = 2
    toys_per_row: int = 4
    toy_rows: int = 3
    skip_index: int = 8
    max_step: float = 10
    claw_offset: float = 7
    claw_width: float = 40
    claw_height: float = 32
    drop_clearance: float = 30
    squeeze_after: int = 6
    tps: int = 20

    def __post_init__(self) -> None:
        if self.toys_per_row <= 0 or self.toy_rows <= 0:
            raise ConfigError("toy grid must have at least one row and column")
        if not 0 <= self.skip_index < self.toys_per_row * self.toy_rows:
            raise ConfigError(
                f"skip_index {self.skip_index} is outside the "
                f"{self.toys_per_row}x{self.toy_rows} grid"
            )
        if self.max_step <= 0:
            raise ConfigError("max_step must be positive")
        if self.geometry.max_arm_length <= self.geometry.arm_size[1]:
            raise ConfigError(
                "max_arm_length must exceed the arm's retracted length"
            )

    @property
    def total_toys(self) -> int:
        return self.toys_per_row * self.toy_rows - 1

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameConfig:
        """Build a config from nested overrides (``timing`` and ``geometry`` tables)."""
        data = dict(data)
        timing = _build(Timing, data.pop("timing", {}))
        geometry_data = dict(data.pop("geometry", {}))
        for key in ("rail_size", "joint_size", "arm_size"):
            if key in geometry_data:
                geometry_data[key] = tuple(geometry_data[key])
        geometry = _build(MachineGeometry, geometry_data)
        return _build(cls, data, geometry=geometry, timing=timing)

    @classmethod
    def from_toml(cls, path: str | Path) -> GameConfig:
        with open(path, "rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"{path}: {exc}") from exc
        return cls.from_dict(data)


def _build(cls: type, values: dict[str, Any], **extra: Any) -> Any:
    known = {f.name for f in dataclasses.fields(cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigError(f"Unknown {cls.__name__} keys: {', '.join(unknown)}")
    return cls(**values, **extra)
