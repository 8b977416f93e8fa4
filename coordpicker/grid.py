"""Grid settings and snapping of positions to grid intersections."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .geometry import Vec2


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass
class Grid:
    """A square grid with visibility and snapping switches."""

    size: float
    visible: bool = True
    snapping: bool = False

    def snap(self, pos: Vec2, canvas_width: float, canvas_height: float) -> Vec2:
        """Snap ``pos`` to the nearest grid point, or to a canvas edge near it.

        Returns ``pos`` unchanged when snapping is off.
        """
        if not self.snapping:
            return pos
        size = self.size
        half = size / 2.0
        x = _round_half_away(pos.x / size) * size
        y = _round_half_away(pos.y / size) * size
        if pos.x < half:
            return Vec2(0.0, y)
        if pos.x > canvas_width - half:
            return Vec2(canvas_width, y)
        if pos.y < half:
            return Vec2(x, 0.0)
        if pos.y > canvas_height - half:
            return Vec2(x, canvas_height)
        return Vec2(x, y)