# lumitrace

A compact ray tracer in plain Python with no dependencies beyond the standard
library. It traces spheres, bounded square ground planes and triangles lit by a
single point light, with hard shadows and transparency, and writes the result
as a plain-text PPM (`P3`) image.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

The `lumitrace` command renders the built-in demo scene (a yellow ground plane,
several spheres, one of them semi-transparent, and a triangle) and writes a PPM
image:

```
lumitrace > scene.ppm
lumitrace --width 200 --height 150 -o scene.ppm
```

Options:

- `--width`, `--height`: image size in pixels (default 800 x 800; both must be
  positive).
- `-o`, `--output`: file to write; without it the image goes to standard output.

Pure Python is slow, so large images take some time to render.

## Library use

```python
import sys

from lumitrace.geometry import Material, Point, Vector
from lumitrace.shapes import Plane, Sphere
from lumitrace.camera import Camera
from lumitrace.render import Light, Scene, render, write_ppm

ground = Material(Vector(1, 1, 0), 0.0)
glass = Material(Vector(1, 0, 0), 0.5)

scene = Scene(
    objects=[
        Plane(Point(0, 0, 0), Vector(0, 1, 0), 100, ground),
        Sphere(Point(0, 1.1, -5), 1, glass),
    ],
    light=Light(Point(0, 5, -3), intensity=1.0, ambient=0.2),
)
camera = Camera(160, 120, Point(0, 1, 3))

image = render(scene, camera)
write_ppm(image, camera.width, camera.height, sys.stdout)
```

### Building blocks

- `lumitrace.geometry`: immutable `Vector`, `Point`, `Ray` and `Material`, and
  `clamp`. Vectors support `+`, `-`, `*` (by a number, or component-wise by
  another vector), `dot`, `cross`, `length`, `normalize` and `rotate_around`
  (Rodrigues' rotation). A `Ray` always normalises its direction; `Ray.at(t)`
  gives the point at distance `t`.
- `lumitrace.shapes`: `Sphere`, `Plane` (a square patch of the given size,
  bounded in x and z) and `Triangle`; each has `intersect(ray)` returning a
  `Hit` (distance and normal) or `None`. Hits closer than `1e-4` are ignored.
- `lumitrace.camera`: `Camera` with an orientation vector holding pitch, yaw
  and roll in radians, applied as yaw, then pitch, then roll.
  `ray_for_pixel(x, y)` raises `IndexError` outside the image;
  `generate_rays()` returns all primary rays row by row.
- `lumitrace.render`: `trace_ray` (shadows, and transparency blended up to a
  depth of 5 with a black background), `render`, `format_ppm` and `write_ppm`
  (bottom row first; `ValueError` if the image does not match the given size),
  `default_scene`, `default_camera` and the `main` entry point.
- `lumitrace.surfaces`: simpler unbounded bodies (`Circle`, `FlatPlane`,
  `FlatTriangle`, `Quad`) whose `intersect_distance(ray)` returns a raw signed
  distance or `None`, each with a text `describe()`; a `ScreenCamera` holding
  four screen corners and a pixel size, with `translate` and `set_size`; and
  `save_blank_ppm` for writing an all-white PPM canvas.

## Limitations

- Output is plain-text PPM only; there is no window or preview.
- There are no reflections, refractions or textures, and only one light.
- The command renders only the built-in demo scene; scenes cannot be loaded
  from files.
- The bodies in `lumitrace.surfaces` are not used by the renderer, and
  `ScreenCamera` does not produce rays or support rotation.