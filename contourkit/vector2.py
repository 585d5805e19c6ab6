"""Two dimensional vector type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from contourkit.fuzzy import DEFAULT_EPSILON, fuzzy_eq as _fuzzy_eq


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D vector with x and y components."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> "Vector2":
        """The zero vector."""
        return cls(0.0, 0.0)

    def scale(self, scale_factor: float) -> "Vector2":
        """Uniformly scale the vector by ``scale_factor``."""
        return Vector2(scale_factor * self.x, scale_factor * self.y)

    def dot(self, other: "Vector2") -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def perp_dot(self, other: "Vector2") -> float:
        """Perpendicular dot product (``self.x * other.y - self.y * other.x``)."""
        return self.x * other.y - self.y * other.x

    def length_squared(self) -> float:
        """Squared length of the vector."""
        return self.dot(self)

    def length(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector2":
        """Vector in the same direction with length 1."""
        return self.scale(1.0 / self.length())

    def fuzzy_eq(self, other: "Vector2", epsilon: float = DEFAULT_EPSILON) -> bool:
        """Component-wise fuzzy equality using ``epsilon``."""
        return _fuzzy_eq(self.x, other.x, epsilon) and _fuzzy_eq(self.y, other.y, epsilon)

    def perp(self) -> "Vector2":
        """Perpendicular vector (rotated 90 degrees counter clockwise)."""
        return Vector2(-self.y, self.x)

    def unit_perp(self) -> "Vector2":
        """Perpendicular vector with length 1."""
        return self.perp().normalize()

    def rotate_about(self, origin: "Vector2", angle: float) -> "Vector2":
        """Rotate this point around ``origin`` by ``angle`` radians."""
        translated = self - origin
        s = math.sin(angle)
        c = math.cos(angle)
        rotated = Vector2(
            translated.x * c - translated.y * s,
            translated.x * s + translated.y * c,
        )
        return rotated + origin

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}]"


def vec2(x: float, y: float) -> Vector2:
    """Shorthand for ``Vector2(x, y)``."""
    return Vector2(x, y)