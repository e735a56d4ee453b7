"""Simple flat and round bodies with unbounded ray distance tests, and a screen camera."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field

from lumitrace.geometry import Material, Point, Ray, Vector

PARALLEL_EPSILON = 1e-6


def _point_text(p: Point) -> str:
    return f"Point({p.x:g}, {p.y:g}, {p.z:g})"


def _vector_text(v: Vector) -> str:
    return f"Vector({v.x:g}, {v.y:g}, {v.z:g})"


def _material_text(m: Material) -> str:
    c = m.color
    return f"Material Color: ({c.x:g}, {c.y:g}, {c.z:g}, {m.transparency:g})"


@dataclass(kw_only=True)
class Body:
    """An object with a reference point and a material."""

    point: Point = field(default_factory=Point)
    material: Material = field(default_factory=Material)

    def scale(self, sx: float, sy: float, sz: float) -> None:
        """Scale the reference point component-wise."""
        self.point = self.point.scaled(sx, sy, sz)

    def describe(self) -> str:
        return (
            f"Object Point: {_point_text(self.point)}\n"
            f"Object Material: {_material_text(self.material)}"
        )


@dataclass(kw_only=True)
class Circle(Body):
    """A ball centred on ``point``."""

    radius: float = 0.0

    def intersect_distance(self, ray: Ray) -> float | None:
        """Distance to the nearer root along the ray, or None if it misses."""
        oc = ray.origin - self.point
        a = ray.direction.dot(ray.direction)
        b = 2.0 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        delta = b * b - 4 * a * c
        if delta < 0:
            return None
        return (-b - math.sqrt(delta)) / (2.0 * a)

    def describe(self) -> str:
        return (
            f"Circle Point: {_point_text(self.point)}\n"
            f"Circle Material: {_material_text(self.material)}\n"
            f"Circle Radius: {self.radius:g}"
        )


@dataclass(kw_only=True)
class FlatPlane(Body):
    """An infinite plane through ``point`` with normal ``normal``."""

    normal: Vector = field(default_factory=Vector)

    def intersect_distance(self, ray: Ray) -> float | None:
        """Signed distance to the plane, or None when the ray is parallel."""
        denom = self.normal.dot(ray.direction)
        if abs(denom) < PARALLEL_EPSILON:
            return None
        return (self.point - ray.origin).dot(self.normal) / denom

    def describe(self) -> str:
        return (
            f"Plane Point: {_point_text(self.point)}\n"
            f"Plane Normal: {_vector_text(self.normal)}\n"
            f"Plane Material: {_material_text(self.material)}"
        )


@dataclass(kw_only=True)
class FlatTriangle(Body):
    """A triangle treated as the plane through its three corners."""

    p1: Point = field(default_factory=Point)
    p2: Point = field(default_factory=Point)
    p3: Point = field(default_factory=Point)

    def __post_init__(self) -> None:
        self.point = self.p1

    def normal(self) -> Vector:
        """Unnormalised normal, (p2 - p1) x (p3 - p1)."""
        return (self.p2 - self.p1).cross(self.p3 - self.p1)

    def intersect_distance(self, ray: Ray) -> float | None:
        """Signed distance to the supporting plane, or None when parallel."""
        n = self.normal()
        denom = n.dot(ray.direction)
        if abs(denom) < PARALLEL_EPSILON:
            return None
        return (self.p1 - ray.origin).dot(n) / denom

    def describe(self) -> str:
        return (
            f"Triangle Point 1: {_point_text(self.p1)}\n"
            f"Triangle Point 2: {_point_text(self.p2)}\n"
            f"Triangle Point 3: {_point_text(self.p3)}\n"
            f"Triangle Material: {_material_text(self.material)}"
        )


@dataclass(kw_only=True)
class Quad(FlatTriangle):
    """A four-cornered flat patch; its plane is given by the first three corners."""

    p4: Point = field(default_factory=Point)

    def describe(self) -> str:
        return (
            f"Quad Point 1: {_point_text(self.p1)}\n"
            f"Quad Point 2: {_point_text(self.p2)}\n"
            f"Quad Point 3: {_point_text(self.p3)}\n"
            f"Quad Point 4: {_point_text(self.p4)}\n"
            f"Quad Material: {_material_text(self.material)}"
        )


@dataclass(kw_only=True)
class ScreenCamera(Quad):
    """A camera described by its screen corners and its pixel size."""

    width: int = 0
    height: int = 0

    def translate(self, dx: float, dy: float, dz: float) -> None:
        """Move all four corners."""
        self.p1 = self.p1.translated(dx, dy, dz)
        self.p2 = self.p2.translated(dx, dy, dz)
        self.p3 = self.p3.translated(dx, dy, dz)
        self.p4 = self.p4.translated(dx, dy, dz)

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def describe(self) -> str:
        return (
            f"Camera Point 1: {_point_text(self.p1)}\n"
            f"Camera Point 2: {_point_text(self.p2)}\n"
            f"Camera Point 3: {_point_text(self.p3)}\n"
            f"Camera Point 4: {_point_text(self.p4)}\n"
            f"Camera Material: {_material_text(self.material)}\n"
            f"Camera Width: {self.width}\n"
            f"Camera Height: {self.height}"
        )


def save_blank_ppm(path: str | os.PathLike[str], width: int, height: int) -> None:
    """Write an all-white plain-text PPM image of the given size."""
    with open(path, "w", encoding="ascii") as stream:
        stream.write(f"P3\n{width} {height}\n255\n")
        row = "255 255 255 " * width + "\n"
        for _ in range(height):
            stream.write(row)