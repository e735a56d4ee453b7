"""A small pure-Python ray tracer: shapes, a camera, shading and PPM output."""

__version__ = "0.1.0"
__all__ = ["camera", "geometry", "render", "shapes", "surfaces"]