"""Rasterizer that fills indexed triangles with a flat colour and a depth test."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from .rasterizer import (
    ColorBufferId,
    IndexBufferId,
    PositionBufferId,
    Primitive,
    RasterizerBase,
)
from .triangle import Triangle


def _corners(v) -> Tuple[float, float, float, float, float, float]:
    return (
        float(v[0][0]), float(v[0][1]),
        float(v[1][0]), float(v[1][1]),
        float(v[2][0]), float(v[2][1]),
    )


def compute_barycentric_2d(x: float, y: float, v) -> Tuple[float, float, float]:
    """Barycentric coordinates of ``(x, y)`` with respect to the first two components of ``v``."""
    x0, y0, x1, y1, x2, y2 = _corners(v)
    c1 = (x * (y1 - y2) + (x2 - x1) * y + x1 * y2 - x2 * y1) / (
        x0 * (y1 - y2) + (x2 - x1) * y0 + x1 * y2 - x2 * y1
    )
    c2 = (x * (y2 - y0) + (x0 - x2) * y + x2 * y0 - x0 * y2) / (
        x1 * (y2 - y0) + (x0 - x2) * y1 + x2 * y0 - x0 * y2
    )
    c3 = (x * (y0 - y1) + (x1 - x0) * y + x0 * y1 - x1 * y0) / (
        x2 * (y0 - y1) + (x1 - x0) * y2 + x0 * y1 - x1 * y0
    )
    return c1, c2, c3


def inside_triangle(x: float, y: float, v) -> bool:
    """Whether ``(x, y)`` lies strictly inside the triangle; degenerate triangles contain nothing."""
    try:
        alpha, beta, gamma = compute_barycentric_2d(x, y, v)
    except ZeroDivisionError:
        return False
    return alpha > 0 and beta > 0 and gamma > 0


class FlatRasterizer(RasterizerBase):
    """Fills triangles with the colour of their first vertex, nearest depth wins."""

    def _pixel_index(self, x: int, y: int) -> int:
        return (self.height - 1 - y) * self.width + x

    def set_pixel(self, point: Sequence[float], color: Sequence[float]) -> None:
        """Write ``color`` at screen point ``(x, y)``."""
        x, y = int(point[0]), int(point[1])
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        self.frame_buf[self._pixel_index(x, y)] = color

    def draw(
        self,
        pos_buffer: PositionBufferId,
        ind_buffer: IndexBufferId,
        col_buffer: ColorBufferId,
        primitive: Primitive,
    ) -> None:
        """Project the indexed triangles and fill them."""
        if primitive is not Primitive.TRIANGLE:
            raise ValueError("only triangle primitives can be drawn")
        positions = self.pos_buf[pos_buffer.pos_id]
        indices = self.ind_buf[ind_buffer.ind_id]
        colors = self.col_buf[col_buffer.col_id]

        f1 = (50 - 0.1) / 2.0
        f2 = (50 + 0.1) / 2.0
        mvp = self.projection @ self.view @ self.model

        for face in indices:
            tri = Triangle()
            for corner, idx in enumerate(face):
                clip = mvp @ np.append(positions[idx], 1.0)
                ndc = clip / clip[3]
                tri.set_vertex(
                    corner,
                    (
                        0.5 * self.width * (ndc[0] + 1.0),
                        0.5 * self.height * (ndc[1] + 1.0),
                        -ndc[2] * f1 + f2,
                    ),
                )
            tri.set_colors(colors[idx] for idx in face)
            self._rasterize_triangle(tri)

    def _rasterize_triangle(self, t: Triangle) -> None:
        v = t.to_vector4()
        x0, y0, x1, y1, x2, y2 = _corners(v)
        d1 = x0 * (y1 - y2) + (x2 - x1) * y0 + x1 * y2 - x2 * y1
        d2 = x1 * (y2 - y0) + (x0 - x2) * y1 + x2 * y0 - x0 * y2
        d3 = x2 * (y0 - y1) + (x1 - x0) * y2 + x0 * y1 - x1 * y0
        if d1 == 0 or d2 == 0 or d3 == 0:
            return

        x_min = max(math.floor(min(x0, x1, x2)), 0)
        x_max = min(math.ceil(max(x0, x1, x2)), self.width - 1)
        y_min = max(math.floor(min(y0, y1, y2)), 0)
        y_max = min(math.ceil(max(y0, y1, y2)), self.height - 1)
        if x_min > x_max or y_min > y_max:
            return

        xs, ys = np.meshgrid(
            np.arange(x_min, x_max + 1, dtype=np.float64),
            np.arange(y_min, y_max + 1, dtype=np.float64),
        )
        alpha = (xs * (y1 - y2) + (x2 - x1) * ys + x1 * y2 - x2 * y1) / d1
        beta = (xs * (y2 - y0) + (x0 - x2) * ys + x2 * y0 - x0 * y2) / d2
        gamma = (xs * (y0 - y1) + (x1 - x0) * ys + x0 * y1 - x1 * y0) / d3
        inside = (alpha > 0) & (beta > 0) & (gamma > 0)
        if not inside.any():
            return

        w = v[:, 3]
        z = v[:, 2]
        w_reciprocal = 1.0 / (alpha / w[0] + beta / w[1] + gamma / w[2])
        z_interp = (
            alpha * z[0] / w[0] + beta * z[1] / w[1] + gamma * z[2] / w[2]
        ) * w_reciprocal

        pixel = (self.height - 1 - ys.astype(np.int64)) * self.width + xs.astype(np.int64)
        mask = inside & (z_interp < self.depth_buf[pixel])
        targets = pixel[mask]
        self.frame_buf[targets] = t.get_color()
        self.depth_buf[targets] = z_interp[mask]