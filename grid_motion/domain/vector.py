"""Immutable 2D vector value type used throughout the motion core.

Every component is a finite float. Construction and every operation that
builds a new vector reject NaN and infinities with ``ValueError`` so a bad
value never travels further than the call that produced it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


def floored_mod(n: float, m: float) -> float:
    """Modulo whose result carries the sign of ``m`` (``((n % m) + m) % m``)."""
    return ((n % m) + m) % m


def sign(value: float) -> int:
    """Return -1, 0 or 1. Negative zero maps to 0."""
    return (value > 0) - (value < 0)


def snap_to_integer(value: float, epsilon: float) -> float:
    """Return the nearest integer as a float if ``value`` lies within ``epsilon`` of it."""
    nearest = round(value)
    if abs(value - nearest) <= epsilon:
        return float(nearest)
    return value


@dataclass(frozen=True)
class Vector2:
    """A 2D vector with finite float components."""

    x: float
    y: float

    def __post_init__(self) -> None:
        x = float(self.x)
        y = float(self.y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"vector components must be finite, got ({self.x!r}, {self.y!r})")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def mul(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def div(self, scalar: float) -> Vector2:
        if scalar == 0:
            raise ValueError("cannot divide a vector by zero")
        return Vector2(self.x / scalar, self.y / scalar)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vector2.zero()
        return Vector2(self.x / length, self.y / length)

    def clamp_length(self, max_length: float) -> Vector2:
        """Scale down to ``max_length`` if longer, keeping direction."""
        if max_length < 0:
            raise ValueError("max_length must be >= 0")
        length = self.length()
        if length <= max_length:
            return self
        return self.normalized().mul(max_length)

    def floor(self) -> Vector2:
        return Vector2(math.floor(self.x), math.floor(self.y))

    def mod(self, m: float) -> Vector2:
        if m == 0:
            raise ValueError("modulus must be non-zero")
        return Vector2(floored_mod(self.x, m), floored_mod(self.y, m))

    def sign(self) -> tuple[int, int]:
        return sign(self.x), sign(self.y)

    def snapped(self, epsilon: float) -> Vector2:
        """Snap each component independently onto a nearby integer."""
        return Vector2(snap_to_integer(self.x, epsilon), snap_to_integer(self.y, epsilon))

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, other: Vector2) -> Vector2:
        return self.add(other)

    def __sub__(self, other: Vector2) -> Vector2:
        return self.sub(other)

    def __mul__(self, scalar: float) -> Vector2:
        return self.mul(scalar)

    __rmul__ = __mul__
