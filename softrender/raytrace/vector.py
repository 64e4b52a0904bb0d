"""Vector types and numeric helpers used by the ray tracer."""

from __future__ import annotations

import math
import random
import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional, TextIO, Tuple

K_INFINITY = 3.4028234663852886e38
"""Largest finite single-precision float; used as "no hit yet" distance."""

BAR_WIDTH = 70


@dataclass(frozen=True, slots=True)
class Vector3f:
    """Immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, value: float) -> "Vector3f":
        """Vector with all three components equal to ``value``."""
        return cls(value, value, value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other):
        if not isinstance(other, Vector3f):
            return NotImplemented
        return Vector3f(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vector3f):
            return NotImplemented
        return Vector3f(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, Vector3f):
            return Vector3f(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vector3f(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3f(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, (int, float)):
            return Vector3f(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __neg__(self) -> "Vector3f":
        return Vector3f(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"{self.x:g}, {self.y:g}, {self.z:g}"


@dataclass(frozen=True, slots=True)
class Vector2f:
    """Immutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other):
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x + other.x, self.y + other.y)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector2f(self.x * other, self.y * other)
        return NotImplemented


class MaterialType(Enum):
    """How a surface interacts with light."""

    DIFFUSE_AND_GLOSSY = auto()
    REFLECTION_AND_REFRACTION = auto()
    REFLECTION = auto()


def lerp(a: Vector3f, b: Vector3f, t: float) -> Vector3f:
    """Linear interpolation between ``a`` and ``b``."""
    return a * (1 - t) + b * t


def normalize(v: Vector3f) -> Vector3f:
    """Unit vector in the direction of ``v``; the zero vector is returned as is."""
    mag2 = v.x * v.x + v.y * v.y + v.z * v.z
    if mag2 > 0:
        inv_mag = 1 / math.sqrt(mag2)
        return Vector3f(v.x * inv_mag, v.y * inv_mag, v.z * inv_mag)
    return v


def dot_product(a: Vector3f, b: Vector3f) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross_product(a: Vector3f, b: Vector3f) -> Vector3f:
    return Vector3f(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def clamp(lo: float, hi: float, v: float) -> float:
    """Clamp ``v`` into ``[lo, hi]``."""
    return max(lo, min(hi, v))


def solve_quadratic(a: float, b: float, c: float) -> Optional[Tuple[float, float]]:
    """Real roots of ``a x^2 + b x + c`` in ascending order, or None."""
    if a == 0:
        raise ValueError("leading coefficient must be non-zero")
    discr = b * b - 4 * a * c
    if discr < 0:
        return None
    if discr == 0:
        x0 = x1 = -0.5 * b / a
    else:
        root = math.sqrt(discr)
        q = -0.5 * (b + root) if b > 0 else -0.5 * (b - root)
        x0 = q / a
        x1 = c / q
    return (x1, x0) if x0 > x1 else (x0, x1)


def random_float() -> float:
    """Uniform random number in ``[0, 1)``."""
    return random.random()


def progress_bar(progress: float) -> str:
    """Text progress bar for a fraction in ``[0, 1]``."""
    pos = int(BAR_WIDTH * progress)
    cells = "".join(
        "=" if i < pos else ">" if i == pos else " " for i in range(BAR_WIDTH)
    )
    return f"[{cells}] {int(progress * 100.0)} %"


def update_progress(progress: float, stream: Optional[TextIO] = None) -> None:
    """Redraw the progress bar in place on ``stream`` (stdout by default)."""
    out = sys.stdout if stream is None else stream
    out.write(progress_bar(progress) + "\r")
    out.flush()