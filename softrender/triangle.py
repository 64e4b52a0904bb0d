"""Triangle with per-vertex position, colour, normal and texture coordinates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

import numpy as np

from .texture import Texture


def _default_vertices() -> np.ndarray:
    v = np.zeros((3, 4))
    v[:, 3] = 1.0
    return v


def _check_index(ind: int) -> int:
    if not 0 <= ind < 3:
        raise IndexError(f"triangle vertex index {ind} out of range")
    return ind


@dataclass
class Triangle:
    """Vertices are stored homogeneously; a 3-component vertex gets ``w = 1``."""

    v: np.ndarray = field(default_factory=_default_vertices)
    color: np.ndarray = field(default_factory=lambda: np.zeros((3, 3)))
    tex_coords: np.ndarray = field(default_factory=lambda: np.zeros((3, 2)))
    normal: np.ndarray = field(default_factory=lambda: np.zeros((3, 3)))
    tex: Optional[Texture] = None

    def a(self) -> np.ndarray:
        return self.v[0].copy()

    def b(self) -> np.ndarray:
        return self.v[1].copy()

    def c(self) -> np.ndarray:
        return self.v[2].copy()

    def set_vertex(self, ind: int, vertex: Sequence[float]) -> None:
        """Set vertex ``ind`` from a 3- or 4-component position."""
        arr = np.asarray(vertex, dtype=np.float64).ravel()
        if arr.size == 3:
            arr = np.append(arr, 1.0)
        elif arr.size != 4:
            raise ValueError("a vertex needs 3 or 4 components")
        self.v[_check_index(ind)] = arr

    def set_normal(self, ind: int, normal: Sequence[float]) -> None:
        self.normal[_check_index(ind)] = np.asarray(normal, dtype=np.float64)

    def set_color(self, ind: int, r: float, g: float, b: float) -> None:
        """Set vertex colour from 0-255 channels; stored normalised to ``[0, 1]``."""
        if any(c < 0.0 or c > 255.0 for c in (r, g, b)):
            raise ValueError("Invalid color values")
        self.color[_check_index(ind)] = np.array([r, g, b], dtype=np.float64) / 255.0

    def set_tex_coord(self, ind: int, uv: Sequence[float]) -> None:
        self.tex_coords[_check_index(ind)] = np.asarray(uv, dtype=np.float64)

    def set_normals(self, normals: Iterable[Sequence[float]]) -> None:
        for ind, n in enumerate(normals):
            self.set_normal(ind, n)

    def set_colors(self, colors: Iterable[Sequence[float]]) -> None:
        """Set all vertex colours from 0-255 channel triples."""
        for ind, (r, g, b) in enumerate(colors):
            self.set_color(ind, r, g, b)

    def get_color(self) -> np.ndarray:
        """Flat colour of the triangle in 0-255 units (first vertex's colour)."""
        return self.color[0] * 255.0

    def to_vector4(self) -> np.ndarray:
        """Vertex positions with ``w`` forced to 1, one row per vertex."""
        res = self.v.copy()
        res[:, 3] = 1.0
        return res