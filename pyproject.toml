[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lumitrace"
version = "0.1.0"
description = "A small pure-Python ray tracer that renders spheres, planes and triangles to PPM images"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "ppm", "3d", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lumitrace = "lumitrace.render:main"

[tool.hatch.build.targets.wheel]
packages = ["lumitrace"]

[tool.pytest.ini_options]
addopts = "-ra"
