"""Recursive ray tracing with shadows and transparency, and PPM output."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass, field
from typing import Iterable, Sequence, TextIO

from lumitrace.camera import Camera
from lumitrace.geometry import Material, Point, Ray, Vector, clamp
from lumitrace.shapes import Hit, Plane, Shape, Sphere, Triangle

MAX_DEPTH = 5
OFFSET = 1e-4
BACKGROUND = Vector(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Light:
    """A point light with a diffuse intensity and an ambient term."""

    position: Point
    intensity: float = 1.0
    ambient: float = 0.2


@dataclass
class Scene:
    """The shapes to render and the light that illuminates them."""

    objects: list[Shape] = field(default_factory=list)
    light: Light = field(default_factory=lambda: Light(Point(0.0, 5.0, -3.0)))


def _nearest_hit(ray: Ray, objects: Iterable[Shape]) -> tuple[Shape, Hit] | None:
    nearest: tuple[Shape, Hit] | None = None
    for shape in objects:
        hit = shape.intersect(ray)
        if hit is not None and (nearest is None or hit.distance < nearest[1].distance):
            nearest = (shape, hit)
    return nearest


def _in_shadow(ray: Ray, objects: Iterable[Shape], light_distance: float) -> bool:
    for shape in objects:
        hit = shape.intersect(ray)
        if hit is not None and hit.distance < light_distance:
            return True
    return False


def trace_ray(ray: Ray, objects: Sequence[Shape], light: Light, depth: int = 0) -> Vector:
    """Colour seen along ``ray``; transparent surfaces blend with what lies behind."""
    if depth > MAX_DEPTH:
        return BACKGROUND

    nearest = _nearest_hit(ray, objects)
    if nearest is None:
        return BACKGROUND
    shape, hit = nearest

    hit_point = ray.at(hit.distance)
    to_light = light.position - hit_point
    light_distance = to_light.length()
    light_dir = to_light.normalize()

    shadow_ray = Ray(hit_point + light_dir * OFFSET, light_dir)
    if _in_shadow(shadow_ray, objects, light_distance):
        diffuse = 0.0
    else:
        diffuse = max(0.0, hit.normal.dot(light_dir)) * light.intensity
    local_color = shape.material.color * (light.ambient + diffuse)

    alpha = shape.material.transparency
    if alpha <= 0.0:
        return local_color

    behind_ray = Ray(hit_point + ray.direction * OFFSET, ray.direction)
    behind_color = trace_ray(behind_ray, objects, light, depth + 1)
    return local_color * (1 - alpha) + behind_color * alpha


def render(scene: Scene, camera: Camera) -> list[list[Vector]]:
    """Trace every pixel of ``camera``; rows are indexed by ``y`` then ``x``."""
    return [
        [trace_ray(ray, scene.objects, scene.light) for ray in row]
        for row in camera.generate_rays()
    ]


def _channel(value: float) -> int:
    return int(clamp(value * 255, 0, 255))


def _ppm_lines(image: Sequence[Sequence[Vector]], width: int, height: int) -> Iterable[str]:
    if len(image) != height or any(len(row) != width for row in image):
        raise ValueError(f"image does not measure {width}x{height}")
    yield f"P3\n{width} {height}\n255\n"
    for row in reversed(image):
        for pixel in row:
            yield f"{_channel(pixel.x)} {_channel(pixel.y)} {_channel(pixel.z)}\n"


def format_ppm(image: Sequence[Sequence[Vector]], width: int, height: int) -> str:
    """Plain-text PPM of ``image``, bottom row first."""
    return "".join(_ppm_lines(image, width, height))


def write_ppm(
    image: Sequence[Sequence[Vector]], width: int, height: int, stream: TextIO
) -> None:
    """Write ``image`` as plain-text PPM to ``stream``."""
    for line in _ppm_lines(image, width, height):
        stream.write(line)


def default_scene() -> Scene:
    """A ground plane, several spheres and a triangle, lit from above."""
    ground = Material(Vector(1.0, 1.0, 0.0), 0.0)
    blue = Material(Vector(0.0, 0.0, 1.0), 0.5)
    orange = Material(Vector(1.0, 0.5, 0.0), 0.0)
    red_glass = Material(Vector(1.0, 0.0, 0.0), 0.5)
    red = Material(Vector(1.0, 0.0, 0.0), 0.0)
    objects: list[Shape] = [
        Plane(Point(0.0, 0.0, 0.0), Vector(0.0, 1.0, 0.0), 100.0, ground),
        Sphere(Point(3.0, 2.0, -6.0), 0.5, blue),
        Sphere(Point(1.0, 1.0, -5.0), 0.5, orange),
        Sphere(Point(0.0, 1.1, -5.0), 1.0, red_glass),
        Sphere(Point(-1.0, 1.7, -3.0), 0.3, red),
        Triangle(
            Point(-1.5, 1.0, -2.0), Point(-0.5, 1.0, -3.0), Point(-1.5, 2.0, -4.0), orange
        ),
        Sphere(Point(0.0, 1.0, -10.0), 0.5, orange),
    ]
    return Scene(objects, Light(Point(0.0, 5.0, -3.0), intensity=1.0, ambient=0.2))


def default_camera(width: int = 800, height: int = 800) -> Camera:
    """A camera above the scene, pitched down by ten degrees."""
    return Camera(width, height, Point(0.0, 3.0, 1.0), Vector(-10 * math.pi / 180, 0.0, 0.0))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render the demo scene as a PPM image.")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=800)
    parser.add_argument("-o", "--output", help="output file (default: standard output)")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")

    camera = default_camera(args.width, args.height)
    image = render(default_scene(), camera)
    if args.output is None:
        write_ppm(image, args.width, args.height, sys.stdout)
    else:
        with open(args.output, "w", encoding="ascii") as stream:
            write_ppm(image, args.width, args.height, stream)
    return 0


if __name__ == "__main__":
    sys.exit(main())