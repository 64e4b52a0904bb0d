"""Plain data types produced by the OBJ loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Vector2:
    """Two-component vector holding texture coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Vector2(self.x * other, self.y * other)


@dataclass(frozen=True)
class Vector3:
    """Three-component vector holding positions and normals."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other):
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __truediv__(self, other):
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Vector3(self.x / other, self.y / other, self.z / other)


@dataclass
class Vertex:
    """A model vertex: position, normal and texture coordinate."""

    position: Vector3 = field(default_factory=Vector3)
    normal: Vector3 = field(default_factory=Vector3)
    texture_coordinate: Vector2 = field(default_factory=Vector2)


@dataclass
class Material:
    """Material properties read from an MTL file."""

    name: str = ""
    ka: Vector3 = field(default_factory=Vector3)
    kd: Vector3 = field(default_factory=Vector3)
    ks: Vector3 = field(default_factory=Vector3)
    ns: float = 0.0
    ni: float = 0.0
    d: float = 0.0
    illum: int = 0
    map_ka: str = ""
    map_kd: str = ""
    map_ks: str = ""
    map_ns: str = ""
    map_d: str = ""
    map_bump: str = ""


@dataclass
class Mesh:
    """A named vertex list with triangle indices and a material."""

    vertices: List[Vertex] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)
    name: str = ""
    material: Material = field(default_factory=Material)

    def __post_init__(self) -> None:
        self.vertices = list(self.vertices)
        self.indices = list(self.indices)