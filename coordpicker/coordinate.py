"""Conversion between canvas coordinates and the user's chosen system."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Vec2


@dataclass
class CoordinateSystem:
    """A coordinate system whose origin is the top-left or bottom-left corner."""

    origin_top_left: bool = True
    canvas_height: float = 1080.0

    def to_system(self, canvas_pos: Vec2) -> Vec2:
        """Convert a canvas position into this system's coordinates."""
        if self.origin_top_left:
            return canvas_pos
        return Vec2(canvas_pos.x, self.canvas_height - canvas_pos.y)

    def from_system(self, system_pos: Vec2) -> Vec2:
        """Convert a position in this system back to canvas coordinates."""
        if self.origin_top_left:
            return system_pos
        return Vec2(system_pos.x, self.canvas_height - system_pos.y)