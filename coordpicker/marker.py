"""Colours and the markers placed on the canvas."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Vec2


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit components."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour component {name}={value} is outside 0..255")

    def hex(self) -> str:
        """The colour as ``#rrggbb``; alpha is not included."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass
class Marker:
    """A point placed by the user.

    ``position`` is in canvas coordinates, ``system_position`` in the
    chosen coordinate system.
    """

    position: Vec2
    system_position: Vec2
    color: Color

    def label(self) -> str:
        """The system position as whole numbers, e.g. ``(12, 34)``."""
        return f"({int(self.system_position.x)}, {int(self.system_position.y)})"