"""Wireframe and flat rasterizers, transforms, textures, Bezier curves and ray-tracing primitives."""

__version__ = "0.1.0"