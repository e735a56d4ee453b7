"""Vectors, points, rays and materials used throughout the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Union

Number = Union[int, float]


def clamp(x: float, low: float, high: float) -> float:
    """Limit ``x`` to the closed range ``[low, high]``."""
    return max(low, min(x, high))


@dataclass(frozen=True)
class Vector:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Vector | Number) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, (int, float)):
            return Vector(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __sub__(self, other: Vector | Number) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, (int, float)):
            return Vector(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __mul__(self, other: Vector | Number) -> Vector:
        """Scale by a number, or multiply component-wise by another vector."""
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vector(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> Vector:
        if isinstance(other, (int, float)):
            return Vector(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vector:
        """Return the unit vector in this direction, or the zero vector."""
        norm = self.length()
        if norm > 0:
            return Vector(self.x / norm, self.y / norm, self.z / norm)
        return Vector()

    def rotate_around(self, axis: Vector, angle: float) -> Vector:
        """Rotate by ``angle`` radians around ``axis`` (Rodrigues' formula)."""
        k = axis.normalize()
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return self * cos_a + k.cross(self) * sin_a + k * (k.dot(self) * (1 - cos_a))


@dataclass(frozen=True)
class Point:
    """An immutable position in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, vector: Vector) -> Point:
        if isinstance(vector, Vector):
            return Point(self.x + vector.x, self.y + vector.y, self.z + vector.z)
        return NotImplemented

    def __sub__(self, other: Point | Vector) -> Vector | Point:
        """Point minus point gives a vector; point minus vector gives a point."""
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def translated(self, dx: float, dy: float, dz: float) -> Point:
        return Point(self.x + dx, self.y + dy, self.z + dz)

    def scaled(self, sx: float, sy: float, sz: float) -> Point:
        return Point(self.x * sx, self.y * sy, self.z * sz)


@dataclass(frozen=True)
class Ray:
    """A half-line with a normalised direction."""

    origin: Point = field(default_factory=Point)
    direction: Vector = field(default_factory=lambda: Vector(0.0, 0.0, -1.0))

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", self.direction.normalize())

    def at(self, t: float) -> Point:
        """The point at distance ``t`` along the ray."""
        return self.origin + self.direction * t


@dataclass(frozen=True)
class Material:
    """Surface colour and transparency (0 is opaque, 1 fully transparent)."""

    color: Vector = field(default_factory=lambda: Vector(1.0, 1.0, 1.0))
    transparency: float = 0.0