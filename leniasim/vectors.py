"""Small immutable 2D and 3D vector types."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _clamp_unit(value: float) -> float:
    return max(min(value, 1.0), -1.0)


@dataclass(frozen=True, slots=True)
class Vec2:
    """A 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def splat(cls, n: float) -> Vec2:
        """Return a vector with both components set to ``n``."""
        return cls(n, n)

    def mag_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def mag(self) -> float:
        return math.sqrt(self.mag_sq())

    def normalized(self) -> Vec2:
        """Unit vector in the same direction, or the zero vector."""
        m = self.mag()
        if m > 0.0:
            return Vec2(self.x / m, self.y / m)
        return Vec2(0.0, 0.0)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def angle_between(self, other: Vec2) -> float:
        """Angle in radians between the two vectors; 0 if either is zero."""
        m = self.mag() * other.mag()
        if m == 0.0:
            return 0.0
        return math.acos(_clamp_unit(self.dot(other) / m))

    def perpendicular(self) -> Vec2:
        """The vector rotated 90 degrees counter-clockwise."""
        return Vec2(-self.y, self.x)

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> Vec2:
        return Vec2(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Vec2:
        return Vec2(self.x / s, self.y / s)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True, slots=True)
class Vec3:
    """A 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def mag_sq(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def mag(self) -> float:
        return math.sqrt(self.mag_sq())

    def normalized(self) -> Vec3:
        """Unit vector in the same direction, or the zero vector."""
        m = self.mag()
        if m > 0.0:
            return Vec3(self.x / m, self.y / m, self.z / m)
        return Vec3(0.0, 0.0, 0.0)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def angle_between(self, other: Vec3) -> float:
        """Angle in radians between the two vectors; 0 if either is zero."""
        m = self.mag() * other.mag()
        if m == 0.0:
            return 0.0
        return math.acos(_clamp_unit(self.dot(other) / m))

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, s: float) -> Vec3:
        return Vec3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Vec3:
        return Vec3(self.x / s, self.y / s, self.z / s)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z