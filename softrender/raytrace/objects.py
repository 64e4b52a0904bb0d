"""Renderable objects and lights for the ray tracer."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple, Union

from .vector import (
    K_INFINITY,
    MaterialType,
    Vector2f,
    Vector3f,
    cross_product,
    dot_product,
    lerp,
    normalize,
    solve_quadratic,
)


@dataclass(frozen=True)
class Intersection:
    """Where a ray hit an object: distance, triangle index and barycentric uv."""

    t_near: float
    index: int = 0
    uv: Vector2f = field(default_factory=Vector2f)


class SceneObject(ABC):
    """Base class holding the material properties shared by all objects."""

    def __init__(
        self,
        *,
        material_type: MaterialType = MaterialType.DIFFUSE_AND_GLOSSY,
        ior: float = 1.3,
        kd: float = 0.8,
        ks: float = 0.2,
        diffuse_color: Optional[Vector3f] = None,
        specular_exponent: float = 25.0,
    ) -> None:
        self.material_type = material_type
        self.ior = ior
        self.kd = kd
        self.ks = ks
        self.diffuse_color = (
            Vector3f.splat(0.2) if diffuse_color is None else diffuse_color
        )
        self.specular_exponent = specular_exponent

    @abstractmethod
    def intersect(self, orig: Vector3f, direction: Vector3f) -> Optional[Intersection]:
        """Nearest intersection with the ray, or None."""

    @abstractmethod
    def surface_properties(
        self, point: Vector3f, direction: Vector3f, index: int, uv: Vector2f
    ) -> Tuple[Vector3f, Vector2f]:
        """Surface normal and texture coordinates at a hit point."""

    def eval_diffuse_color(self, st: Vector2f) -> Vector3f:
        return self.diffuse_color


class Sphere(SceneObject):
    """Sphere given by centre and radius."""

    def __init__(self, center: Vector3f, radius: float, **material) -> None:
        super().__init__(**material)
        self.center = center
        self.radius = radius
        self.radius2 = radius * radius

    def intersect(self, orig: Vector3f, direction: Vector3f) -> Optional[Intersection]:
        offset = orig - self.center
        a = dot_product(direction, direction)
        if a == 0:
            return None
        b = 2 * dot_product(direction, offset)
        c = dot_product(offset, offset) - self.radius2
        roots = solve_quadratic(a, b, c)
        if roots is None:
            return None
        t0, t1 = roots
        if t0 < 0:
            t0 = t1
        if t0 < 0:
            return None
        return Intersection(t0)

    def surface_properties(
        self, point: Vector3f, direction: Vector3f, index: int, uv: Vector2f
    ) -> Tuple[Vector3f, Vector2f]:
        return normalize(point - self.center), Vector2f()


def ray_triangle_intersect(
    v0: Vector3f, v1: Vector3f, v2: Vector3f, orig: Vector3f, direction: Vector3f
) -> Optional[Tuple[float, float, float]]:
    """Möller–Trumbore test; returns ``(t, u, v)`` on a hit, else None."""
    e1 = v1 - v0
    e2 = v2 - v0
    s = orig - v0
    s1 = cross_product(direction, e2)
    s2 = cross_product(s, e1)
    s1e1 = dot_product(s1, e1)
    if s1e1 == 0:
        return None
    t = dot_product(s2, e2) / s1e1
    u = dot_product(s1, s) / s1e1
    v = dot_product(s2, direction) / s1e1
    if t >= 0 and u >= 0 and v >= 0 and (1.0 - u - v) >= 0:
        return t, u, v
    return None


class MeshTriangle(SceneObject):
    """Indexed triangle mesh with per-vertex texture coordinates."""

    def __init__(
        self,
        vertices: Sequence[Vector3f],
        vertex_index: Sequence[int],
        num_triangles: int,
        st_coordinates: Sequence[Vector2f],
        **material,
    ) -> None:
        super().__init__(**material)
        count = num_triangles * 3
        indices = tuple(int(i) for i in vertex_index[:count])
        if len(indices) < count:
            raise ValueError("not enough vertex indices for the triangle count")
        needed = max(indices, default=0) + 1
        if len(vertices) < needed or len(st_coordinates) < needed:
            raise ValueError("vertex index refers past the supplied vertices")
        self.vertices = tuple(vertices[:needed])
        self.vertex_index = indices
        self.num_triangles = num_triangles
        self.st_coordinates = tuple(st_coordinates[:needed])

    def _corner_indices(self, k: int) -> Tuple[int, int, int]:
        return self.vertex_index[3 * k], self.vertex_index[3 * k + 1], self.vertex_index[3 * k + 2]

    def intersect(self, orig: Vector3f, direction: Vector3f) -> Optional[Intersection]:
        best: Optional[Intersection] = None
        t_near = K_INFINITY
        for k in range(self.num_triangles):
            i0, i1, i2 = self._corner_indices(k)
            hit = ray_triangle_intersect(
                self.vertices[i0], self.vertices[i1], self.vertices[i2], orig, direction
            )
            if hit is not None and hit[0] < t_near:
                t, u, v = hit
                t_near = t
                best = Intersection(t, k, Vector2f(u, v))
        return best

    def surface_properties(
        self, point: Vector3f, direction: Vector3f, index: int, uv: Vector2f
    ) -> Tuple[Vector3f, Vector2f]:
        i0, i1, i2 = self._corner_indices(index)
        v0, v1, v2 = self.vertices[i0], self.vertices[i1], self.vertices[i2]
        e0 = normalize(v1 - v0)
        e1 = normalize(v2 - v1)
        normal = normalize(cross_product(e0, e1))
        st0, st1, st2 = self.st_coordinates[i0], self.st_coordinates[i1], self.st_coordinates[i2]
        st = st0 * (1 - uv.x - uv.y) + st1 * uv.x + st2 * uv.y
        return normal, st

    def eval_diffuse_color(self, st: Vector2f) -> Vector3f:
        scale = 5
        pattern = (math.fmod(st.x * scale, 1) > 0.5) ^ (math.fmod(st.y * scale, 1) > 0.5)
        return lerp(
            Vector3f(0.815, 0.235, 0.031), Vector3f(0.937, 0.937, 0.231), float(pattern)
        )


@dataclass
class Light:
    """Point light; a scalar intensity is spread over all three channels."""

    position: Vector3f
    intensity: Union[Vector3f, float]

    def __post_init__(self) -> None:
        if not isinstance(self.intensity, Vector3f):
            self.intensity = Vector3f.splat(float(self.intensity))