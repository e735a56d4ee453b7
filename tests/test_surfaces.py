import pytest

from lumitrace.geometry import Material, Point, Ray, Vector
from lumitrace.surfaces import (
    Body,
    Circle,
    FlatPlane,
    FlatTriangle,
    Quad,
    ScreenCamera,
    save_blank_ppm,
)

ORIGIN = Point(0.0, 0.0, 0.0)
DOWN_Z = Ray(ORIGIN, Vector(0.0, 0.0, -1.0))


def test_body_scale_multiplies_point():
    body = Body(point=Point(1.0, 2.0, 3.0))
    body.scale(2.0, 3.0, 4.0)
    assert body.point == Point(1.0 * 2.0, 2.0 * 3.0, 3.0 * 4.0)


def test_body_describe_uses_point_format():
    text = Body(point=Point(0.0, 0.0, 0.0)).describe()
    assert "Point(0, 0, 0)" in text


def test_circle_hit_and_miss():
    circle = Circle(point=Point(0.0, 0.0, -5.0), radius=1.0)
    assert circle.intersect_distance(DOWN_Z) == pytest.approx(5.0 - 1.0)
    miss = Ray(ORIGIN, Vector(0.0, 1.0, 0.0))
    assert Circle(point=Point(0.0, 0.0, -5.0), radius=1.0).intersect_distance(miss) is None


def test_circle_describe_has_radius():
    text = Circle(point=ORIGIN, radius=0.5).describe()
    assert text.splitlines()[-1] == "Circle Radius: 0.5"


def test_flat_plane_parallel_and_hit():
    plane = FlatPlane(point=Point(0.0, 0.0, -3.0), normal=Vector(0.0, 0.0, 1.0))
    assert plane.intersect_distance(DOWN_Z) == pytest.approx(3.0)
    parallel = Ray(ORIGIN, Vector(1.0, 0.0, 0.0))
    assert plane.intersect_distance(parallel) is None


def test_triangle_normal_is_perpendicular_to_edges():
    tri = FlatTriangle(p1=Point(0.0, 0.0, 0.0), p2=Point(1.0, 0.0, 0.0), p3=Point(0.0, 1.0, 0.0))
    n = tri.normal()
    assert n == Vector(0.0, 0.0, 1.0)
    assert n.dot(tri.p2 - tri.p1) == 0.0
    assert n.dot(tri.p3 - tri.p1) == 0.0
    assert tri.point == tri.p1


def test_triangle_intersect_distance():
    tri = FlatTriangle(
        p1=Point(0.0, 0.0, -2.0), p2=Point(1.0, 0.0, -2.0), p3=Point(0.0, 1.0, -2.0)
    )
    assert tri.intersect_distance(DOWN_Z) == pytest.approx(2.0)
    assert tri.intersect_distance(Ray(ORIGIN, Vector(1.0, 0.0, 0.0))) is None


def test_quad_shares_triangle_normal():
    corners = dict(p1=Point(0.0, 0.0, 0.0), p2=Point(1.0, 0.0, 0.0), p3=Point(1.0, 1.0, 0.0))
    quad = Quad(**corners, p4=Point(0.0, 1.0, 0.0), material=Material(Vector(1.0, 0.0, 0.0)))
    assert quad.normal() == FlatTriangle(**corners).normal()
    assert "Quad Point 4: Point(0, 1, 0)" in quad.describe()


def test_screen_camera_translate_moves_all_corners():
    cam = ScreenCamera(
        p1=Point(0.0, 0.0, 0.0),
        p2=Point(1.0, 0.0, 0.0),
        p3=Point(1.0, 1.0, 0.0),
        p4=Point(0.0, 1.0, 0.0),
        width=80,
        height=60,
    )
    before = [cam.p1, cam.p2, cam.p3, cam.p4]
    cam.translate(1.0, 2.0, 3.0)
    after = [cam.p1, cam.p2, cam.p3, cam.p4]
    for old, new in zip(before, after):
        assert new - old == Vector(1.0, 2.0, 3.0)


def test_screen_camera_set_size_and_describe():
    cam = ScreenCamera(width=80, height=60)
    cam.set_size(320, 240)
    assert (cam.width, cam.height) == (320, 240)
    lines = cam.describe().splitlines()
    assert lines[-2:] == ["Camera Width: 320", "Camera Height: 240"]


def test_save_blank_ppm(tmp_path):
    out = tmp_path / "blank.ppm"
    save_blank_ppm(out, 2, 3)
    lines = out.read_text().splitlines()
    assert lines[:3] == ["P3", "2 3", "255"]
    assert len(lines) == 3 + 3
    assert all(line == "255 255 255 255 255 255 " for line in lines[3:])