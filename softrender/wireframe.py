"""Wireframe rasterizer drawing triangle edges with Bresenham lines."""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple

import numpy as np

from .rasterizer import IndexBufferId, PositionBufferId, Primitive, RasterizerBase
from .triangle import Triangle

LINE_COLOR = np.array([255.0, 255.0, 255.0])

_VERTEX_COLORS = ((255.0, 0.0, 0.0), (0.0, 255.0, 0.0), (0.0, 0.0, 255.0))


def _bresenham(x1: float, y1: float, x2: float, y2: float) -> Iterator[Tuple[int, int]]:
    dx = int(x2 - x1)
    dy = int(y2 - y1)
    dx1, dy1 = abs(dx), abs(dy)
    px = 2 * dy1 - dx1
    py = 2 * dx1 - dy1
    step = 1 if (dx < 0 and dy < 0) or (dx > 0 and dy > 0) else -1

    if dy1 <= dx1:
        if dx >= 0:
            x, y, xe = int(x1), int(y1), int(x2)
        else:
            x, y, xe = int(x2), int(y2), int(x1)
        yield x, y
        while x < xe:
            x += 1
            if px < 0:
                px += 2 * dy1
            else:
                y += step
                px += 2 * (dy1 - dx1)
            yield x, y
    else:
        if dy >= 0:
            x, y, ye = int(x1), int(y1), int(y2)
        else:
            x, y, ye = int(x2), int(y2), int(y1)
        yield x, y
        while y < ye:
            y += 1
            if py <= 0:
                py += 2 * dx1
            else:
                x += step
                py += 2 * (dx1 - dy1)
            yield x, y


class WireframeRasterizer(RasterizerBase):
    """Draws the outline of each indexed triangle in white."""

    def set_pixel(self, point: Sequence[float], color: Sequence[float]) -> None:
        """Write ``color`` at screen point ``(x, y)``; points off screen are ignored."""
        x, y = float(point[0]), float(point[1])
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return
        ind = int((self.height - y) * self.width + x)
        if ind >= len(self.frame_buf):
            return
        self.frame_buf[ind] = color

    def draw_line(self, begin: Sequence[float], end: Sequence[float]) -> None:
        for x, y in _bresenham(begin[0], begin[1], end[0], end[1]):
            self.set_pixel((x, y), LINE_COLOR)

    def _rasterize_wireframe(self, t: Triangle) -> None:
        self.draw_line(t.c(), t.a())
        self.draw_line(t.c(), t.b())
        self.draw_line(t.b(), t.a())

    def draw(
        self, pos_buffer: PositionBufferId, ind_buffer: IndexBufferId, primitive: Primitive
    ) -> None:
        """Project the indexed triangles and draw their edges."""
        if primitive is not Primitive.TRIANGLE:
            raise ValueError("only triangle primitives can be drawn")
        positions = self.pos_buf[pos_buffer.pos_id]
        indices = self.ind_buf[ind_buffer.ind_id]

        f1 = (100 - 0.1) / 2.0
        f2 = (100 + 0.1) / 2.0
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
                        ndc[2] * f1 + f2,
                    ),
                )
            tri.set_colors(_VERTEX_COLORS)
            self._rasterize_wireframe(tri)