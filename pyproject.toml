[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "softrender"
version = "0.1.0"
description = "A small software renderer: wireframe and flat rasterizers, projection matrices, textures, Bezier curves, OBJ data types and ray-tracing primitives"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = [
    "rasterizer",
    "ray tracing",
    "rendering",
    "graphics",
    "bezier",
    "bresenham",
    "z-buffer",
]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["softrender"]

[tool.hatch.build.targets.sdist]
include = [
    "softrender",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
