"""Cubic Bézier curves drawn into an RGB image, by formula and by de Casteljau."""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple

import numpy as np

Point = Tuple[float, float]

RED = 0
GREEN = 1
STEP = 0.001


def _steps() -> Iterator[float]:
    t = 0.0
    while t <= 1.0:
        yield t
        t += STEP


def _as_point(p: Sequence[float]) -> Point:
    return float(p[0]), float(p[1])


def _plot(image: np.ndarray, point: Point, channel: int) -> None:
    x, y = int(point[0]), int(point[1])
    height, width = image.shape[:2]
    if not (0 <= x < width and 0 <= y < height):
        raise IndexError(f"curve point ({point[0]}, {point[1]}) lies outside the image")
    image[y, x, channel] = 255


def naive_bezier(points: Sequence[Sequence[float]], image: np.ndarray) -> None:
    """Mark the cubic curve of the first four points in the red channel."""
    if len(points) < 4:
        raise ValueError("a cubic curve needs four control points")
    p0, p1, p2, p3 = (_as_point(p) for p in points[:4])
    for t in _steps():
        a = (1 - t) ** 3
        b = 3 * t * (1 - t) ** 2
        c = 3 * t ** 2 * (1 - t)
        d = t ** 3
        point = (
            a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0],
            a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1],
        )
        _plot(image, point, RED)


def recursive_bezier(control_points: Sequence[Sequence[float]], t: float) -> Point:
    """Point at parameter ``t`` on the curve, by de Casteljau's algorithm."""
    if not control_points:
        raise ValueError("at least one control point is needed")
    points = [_as_point(p) for p in control_points]
    if len(points) == 1:
        return points[0]
    reduced = [
        ((1 - t) * a[0] + t * b[0], (1 - t) * a[1] + t * b[1])
        for a, b in zip(points, points[1:])
    ]
    return recursive_bezier(reduced, t)


def bezier(control_points: Sequence[Sequence[float]], image: np.ndarray) -> None:
    """Mark the curve of any number of control points in the green channel."""
    for t in _steps():
        _plot(image, recursive_bezier(control_points, t), GREEN)


def _draw_ring(image: np.ndarray, center: Point, radius: float = 3, thickness: float = 3) -> None:
    cx, cy = round(center[0]), round(center[1])
    height, width = image.shape[:2]
    ys, xs = np.ogrid[:height, :width]
    distance = np.hypot(xs - cx, ys - cy)
    image[np.abs(distance - radius) <= thickness / 2] = 255


def render_curves(
    control_points: Sequence[Sequence[float]], width: int = 700, height: int = 700
) -> np.ndarray:
    """Image with white rings at the control points and, for four of them, both curves.

    Where the two curves coincide the pixel is yellow.
    """
    image = np.zeros((height, width, 3), dtype=np.uint8)
    for point in control_points:
        _draw_ring(image, _as_point(point))
    if len(control_points) == 4:
        naive_bezier(control_points, image)
        bezier(control_points, image)
    return image