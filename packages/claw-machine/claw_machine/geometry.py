"""Rectangles, grid placement, and angle helpers."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    def contains_origin(self, x: float, y: float) -> bool:
        """True if the point lies strictly inside the rectangle.

        Points on an edge do not count.
        """
        return self.x < x < self.x + self.w and self.y < y < self.y + self.h


def grid_column(index: int, columns: int) -> int:
    return index % columns


def grid_row(index: int, columns: int) -> int:
    return index // columns


def rad_to_deg(rad: float) -> int:
    return round(math.degrees(rad))


def normalize_angle(angle: float) -> float:
    """Wrap ``angle`` into ``[0, 360)``."""
    return angle % 360
