import io

import pytest

from lumitrace.camera import Camera
from lumitrace.geometry import Material, Point, Ray, Vector
from lumitrace.render import (
    MAX_DEPTH,
    Light,
    Scene,
    default_camera,
    default_scene,
    format_ppm,
    main,
    render,
    trace_ray,
    write_ppm,
)
from lumitrace.shapes import Sphere

RED = Material(Vector(1.0, 0.0, 0.0), 0.0)
FORWARD = Ray(Point(0.0, 0.0, 0.0), Vector(0.0, 0.0, -1.0))


def test_empty_scene_is_background():
    light = Light(Point(0.0, 5.0, 0.0))
    assert trace_ray(FORWARD, [], light) == Vector(0.0, 0.0, 0.0)


def test_depth_beyond_limit_is_black():
    target = Sphere(Point(0.0, 0.0, -5.0), 1.0, RED)
    light = Light(Point(0.0, 5.0, 0.0))
    assert trace_ray(FORWARD, [target], light, MAX_DEPTH + 1) == Vector(0.0, 0.0, 0.0)


def test_shadowed_surface_gets_only_ambient():
    target = Sphere(Point(0.0, 0.0, -5.0), 1.0, RED)
    blocker = Sphere(Point(0.0, 2.5, -2.0), 0.5, RED)
    light = Light(Point(0.0, 5.0, 0.0), intensity=1.0, ambient=0.2)
    color = trace_ray(FORWARD, [target, blocker], light)
    assert color.x == pytest.approx(0.2)
    assert color.y == 0.0 and color.z == 0.0


def test_lit_surface_is_brighter_than_ambient():
    target = Sphere(Point(0.0, 0.0, -5.0), 1.0, RED)
    light = Light(Point(0.0, 5.0, 0.0), intensity=1.0, ambient=0.2)
    color = trace_ray(FORWARD, [target], light)
    assert color.x > 0.2


def test_fully_transparent_surface_shows_background():
    glass = Sphere(Point(0.0, 0.0, -5.0), 1.0, Material(Vector(1.0, 1.0, 1.0), 1.0))
    light = Light(Point(0.0, 5.0, 0.0))
    color = trace_ray(FORWARD, [glass], light)
    assert color.length() == pytest.approx(0.0)


def test_format_ppm_reverses_rows_and_clamps():
    image = [[Vector(1.0, 0.0, 0.0)], [Vector(2.0, -1.0, 0.5)]]
    text = format_ppm(image, 1, 2)
    assert text == "P3\n1 2\n255\n255 0 127\n255 0 0\n"


def test_format_ppm_rejects_wrong_size():
    with pytest.raises(ValueError):
        format_ppm([[Vector()]], 2, 1)


def test_write_ppm_matches_format():
    image = [[Vector(0.1, 0.2, 0.3), Vector(1.0, 1.0, 1.0)]]
    stream = io.StringIO()
    write_ppm(image, 2, 1, stream)
    assert stream.getvalue() == format_ppm(image, 2, 1)


def test_render_empty_scene_dimensions_and_black():
    camera = Camera(3, 2)
    image = render(Scene(), camera)
    assert len(image) == 2
    assert all(len(row) == 3 for row in image)
    assert all(pixel == Vector() for row in image for pixel in row)


def test_default_scene_and_camera():
    scene = default_scene()
    assert len(scene.objects) == 7
    assert scene.light.position == Point(0.0, 5.0, -3.0)
    camera = default_camera(4, 3)
    assert (camera.width, camera.height) == (4, 3)
    assert camera.position == Point(0.0, 3.0, 1.0)


def test_main_writes_ppm_file(tmp_path):
    out = tmp_path / "image.ppm"
    assert main(["--width", "4", "--height", "3", "--output", str(out)]) == 0
    lines = out.read_text().splitlines()
    assert lines[:3] == ["P3", "4 3", "255"]
    assert len(lines) == 3 + 12
    for line in lines[3:]:
        values = [int(v) for v in line.split()]
        assert len(values) == 3
        assert all(0 <= v <= 255 for v in values)