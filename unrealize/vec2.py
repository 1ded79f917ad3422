"""Immutable two-dimensional vector."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """A 2D vector with float components."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> Vec2:
        return cls(0.0, 0.0)

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def normalize(self) -> Vec2:
        """Return the unit vector in this direction, or zero for a zero vector."""
        length = self.length()
        if length == 0.0:
            return Vec2.zero()
        return self * (1.0 / length)