"""A small mutable two-dimensional vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real


@dataclass
class Vector2:
    """A point or direction in 2D space."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        if not isinstance(factor, Real):
            return NotImplemented
        return Vector2(self.x * factor, self.y * factor)

    def __iadd__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, factor: float) -> Vector2:
        if not isinstance(factor, Real):
            return NotImplemented
        self.x *= factor
        self.y *= factor
        return self

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        dist = self.length()
        if dist == 0:
            raise ZeroDivisionError("cannot normalize a zero-length vector")
        self.x /= dist
        self.y /= dist

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        """Return the squared length, avoiding the square root."""
        return self.x * self.x + self.y * self.y

    def dot(self, other: Vector2) -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def distance(self, other: Vector2) -> float:
        """Return the distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)