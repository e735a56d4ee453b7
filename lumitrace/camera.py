"""A pinhole camera that produces one primary ray per pixel."""

from __future__ import annotations

from dataclasses import dataclass, field

from lumitrace.geometry import Point, Ray, Vector

_X_AXIS = Vector(1.0, 0.0, 0.0)
_Y_AXIS = Vector(0.0, 1.0, 0.0)
_Z_AXIS = Vector(0.0, 0.0, 1.0)


@dataclass
class Camera:
    """Camera at ``position``; ``orientation`` holds pitch, yaw and roll in radians."""

    width: int
    height: int
    position: Point = field(default_factory=Point)
    orientation: Vector = field(default_factory=Vector)

    def apply_rotation(self, direction: Vector) -> Vector:
        """Rotate a direction by yaw (Y), then pitch (X), then roll (Z)."""
        rotated = direction.rotate_around(_Y_AXIS, self.orientation.y)
        rotated = rotated.rotate_around(_X_AXIS, self.orientation.x)
        return rotated.rotate_around(_Z_AXIS, self.orientation.z)

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        """The primary ray through pixel column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        u = (x - self.width / 2.0) / self.width
        v = (y - self.height / 2.0) / self.height
        direction = self.apply_rotation(Vector(u, v, -1.0).normalize())
        return Ray(self.position, direction)

    def generate_rays(self) -> list[list[Ray]]:
        """All primary rays, as rows indexed by ``y`` then ``x``."""
        return [
            [self.ray_for_pixel(x, y) for x in range(self.width)]
            for y in range(self.height)
        ]