"""Model, view and projection matrices for the rasterizers."""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

_MY_PI = 3.1415926


def get_view_matrix(eye_pos: Sequence[float]) -> np.ndarray:
    """Translation moving the eye position to the origin."""
    view = np.identity(4)
    view[:3, 3] = -np.asarray(eye_pos, dtype=np.float64)[:3]
    return view


def rotation_z_matrix(rotation_angle: float) -> np.ndarray:
    """Rotation about the z axis by ``rotation_angle`` degrees."""
    angle = rotation_angle / 180 * math.pi
    model = np.identity(4)
    c, s = math.cos(angle), math.sin(angle)
    model[0, 0] = c
    model[1, 0] = s
    model[0, 1] = -s
    model[1, 1] = c
    return model


def identity_model_matrix(rotation_angle: float = 0.0) -> np.ndarray:
    """Model matrix that leaves the scene unchanged whatever the angle."""
    return np.identity(4)


def spot_model_matrix(angle: float) -> np.ndarray:
    """Uniform scale by 2.5 followed by a rotation of ``angle`` degrees about y."""
    rad = angle * math.pi / 180.0
    c, s = math.cos(rad), math.sin(rad)
    rotation = np.array(
        [
            [c, 0, s, 0],
            [0, 1, 0, 0],
            [-s, 0, c, 0],
            [0, 0, 0, 1],
        ],
        dtype=np.float64,
    )
    scale = np.diag([2.5, 2.5, 2.5, 1.0])
    translate = np.identity(4)
    return translate @ rotation @ scale


def _frustum(
    fov_rad: float,
    aspect_ratio: float,
    n: float,
    f: float,
    z_scale: Optional[float] = None,
) -> np.ndarray:
    t = abs(n) * math.tan(fov_rad / 2)
    r = aspect_ratio * t
    left = -r
    b = -t
    if t == 0 or r == 0:
        raise ValueError("field of view and aspect ratio must give a non-empty frustum")
    if n == f:
        raise ValueError("near and far planes must differ")
    projection = np.identity(4)
    projection[0, 0] = 2 * n / (r - left)
    projection[0, 2] = (left + r) / (left - r)
    projection[1, 1] = 2 * n / (t - b)
    projection[1, 2] = (b + t) / (b - t)
    projection[2, 2] = (f + n) / (n - f) if z_scale is None else z_scale
    projection[2, 3] = 2 * f * n / (f - n)
    projection[3, 2] = 1
    projection[3, 3] = 0
    return projection


def perspective_matrix(
    eye_fov: float, aspect_ratio: float, z_near: float, z_far: float
) -> np.ndarray:
    """Perspective projection mapping ``z = z_near`` to 1 and ``z = z_far`` to -1."""
    return _frustum(eye_fov / 180 * math.pi, aspect_ratio, z_near, z_far)


def reversed_z_perspective_matrix(
    eye_fov: float, aspect_ratio: float, z_near: float, z_far: float
) -> np.ndarray:
    """Perspective projection for a camera looking down -z; near and far are distances."""
    return _frustum(eye_fov / 180 * _MY_PI, aspect_ratio, -z_near, -z_far)


def spot_projection_matrix(
    eye_fov: float, aspect_ratio: float, z_near: float, z_far: float
) -> np.ndarray:
    """Projection used for the shaded model: stretched depth and the image turned upside down."""
    n, f = z_near, z_far
    if n == f:
        raise ValueError("near and far planes must differ")
    projection = _frustum(
        eye_fov / 180 * math.pi, aspect_ratio, n, f, z_scale=-3 * (f + n) / (n - f)
    )
    upside_down = np.diag([-1.0, -1.0, 1.0, 1.0])
    return upside_down @ projection