"""Renderable shapes and their ray intersection tests."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from lumitrace.geometry import Material, Point, Ray, Vector

HIT_EPSILON = 1e-4
PARALLEL_EPSILON = 1e-6


@dataclass(frozen=True)
class Hit:
    """Where a ray meets a shape: distance along the ray and surface normal."""

    distance: float
    normal: Vector


class Shape(ABC):
    """Base for everything a ray can hit."""

    material: Material

    @abstractmethod
    def intersect(self, ray: Ray) -> Hit | None:
        """Return the nearest hit in front of the ray origin, or None."""


@dataclass(frozen=True)
class Sphere(Shape):
    center: Point
    radius: float
    material: Material = field(default_factory=Material)

    def intersect(self, ray: Ray) -> Hit | None:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2.0 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return None
        t = (-b - math.sqrt(discriminant)) / (2.0 * a)
        if t < HIT_EPSILON:
            return None
        normal = (ray.at(t) - self.center).normalize()
        return Hit(t, normal)


@dataclass(frozen=True)
class Plane(Shape):
    """A square patch of plane of side ``size``, bounded in x and z."""

    point: Point
    normal: Vector
    size: float
    material: Material = field(default_factory=Material)

    def __post_init__(self) -> None:
        object.__setattr__(self, "normal", self.normal.normalize())

    def intersect(self, ray: Ray) -> Hit | None:
        denom = self.normal.dot(ray.direction)
        if abs(denom) <= PARALLEL_EPSILON:
            return None
        t = (self.point - ray.origin).dot(self.normal) / denom
        if t < HIT_EPSILON:
            return None
        hit_point = ray.at(t)
        half = self.size / 2
        if abs(hit_point.x - self.point.x) <= half and abs(hit_point.z - self.point.z) <= half:
            return Hit(t, self.normal)
        return None


@dataclass(frozen=True)
class Triangle(Shape):
    v0: Point
    v1: Point
    v2: Point
    material: Material = field(default_factory=Material)
    normal: Vector = field(init=False)

    def __post_init__(self) -> None:
        normal = (self.v1 - self.v0).cross(self.v2 - self.v0).normalize()
        object.__setattr__(self, "normal", normal)

    def intersect(self, ray: Ray) -> Hit | None:
        edge1 = self.v1 - self.v0
        edge2 = self.v2 - self.v0
        h = ray.direction.cross(edge2)
        a = edge1.dot(h)
        if abs(a) < PARALLEL_EPSILON:
            return None
        f = 1.0 / a
        s = ray.origin - self.v0
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None
        q = s.cross(edge1)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None
        t = f * edge2.dot(q)
        if t > HIT_EPSILON:
            return Hit(t, self.normal)
        return None