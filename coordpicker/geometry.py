"""Small 2D vector and rectangle types used throughout the picker."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """A 2D vector or point with float components."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its minimum and maximum corners."""

    min: Vec2
    max: Vec2

    @classmethod
    def from_center_size(cls, center: Vec2, size: Vec2) -> Rect:
        """Build a rectangle of the given size centred on ``center``."""
        half = size * 0.5
        return cls(center - half, center + half)

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    @property
    def size(self) -> Vec2:
        return self.max - self.min

    def center(self) -> Vec2:
        """The midpoint of the rectangle."""
        return Vec2((self.min.x + self.max.x) / 2, (self.min.y + self.max.y) / 2)

    def contains(self, point: Vec2) -> bool:
        """Whether ``point`` lies inside the rectangle, edges included."""
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
        )