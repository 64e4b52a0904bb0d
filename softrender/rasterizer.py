"""Shared state of the software rasterizers: buffers, matrices and ids."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Dict, Sequence

import numpy as np


class Buffers(Flag):
    COLOR = 1
    DEPTH = 2


class Primitive(Enum):
    LINE = auto()
    TRIANGLE = auto()


@dataclass(frozen=True)
class PositionBufferId:
    pos_id: int = 0


@dataclass(frozen=True)
class IndexBufferId:
    ind_id: int = 0


@dataclass(frozen=True)
class ColorBufferId:
    col_id: int = 0


class RasterizerBase:
    """Frame and depth buffers plus loaded vertex data for a ``width x height`` target."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("rasterizer dimensions must be positive")
        self.width = width
        self.height = height
        self.model = np.identity(4)
        self.view = np.identity(4)
        self.projection = np.identity(4)
        self.normal_id = -1
        self.pos_buf: Dict[int, np.ndarray] = {}
        self.ind_buf: Dict[int, np.ndarray] = {}
        self.col_buf: Dict[int, np.ndarray] = {}
        self.nor_buf: Dict[int, np.ndarray] = {}
        self.frame_buf = np.zeros((width * height, 3))
        self.depth_buf = np.zeros(width * height)
        self._ids = itertools.count()

    def _index(self, x: int, y: int) -> int:
        return (self.height - y) * self.width + x

    def load_positions(self, positions: Sequence[Sequence[float]]) -> PositionBufferId:
        pid = next(self._ids)
        self.pos_buf[pid] = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
        return PositionBufferId(pid)

    def load_indices(self, indices: Sequence[Sequence[int]]) -> IndexBufferId:
        iid = next(self._ids)
        self.ind_buf[iid] = np.asarray(indices, dtype=np.int64).reshape(-1, 3)
        return IndexBufferId(iid)

    def load_colors(self, colors: Sequence[Sequence[float]]) -> ColorBufferId:
        cid = next(self._ids)
        self.col_buf[cid] = np.asarray(colors, dtype=np.float64).reshape(-1, 3)
        return ColorBufferId(cid)

    def load_normals(self, normals: Sequence[Sequence[float]]) -> ColorBufferId:
        nid = next(self._ids)
        self.nor_buf[nid] = np.asarray(normals, dtype=np.float64).reshape(-1, 3)
        self.normal_id = nid
        return ColorBufferId(nid)

    def clear(self, buffers: Buffers) -> None:
        """Reset the colour buffer to black and/or the depth buffer to infinity."""
        if Buffers.COLOR in buffers:
            self.frame_buf.fill(0.0)
        if Buffers.DEPTH in buffers:
            self.depth_buf.fill(np.inf)

    def frame_buffer(self) -> np.ndarray:
        """The colour buffer, one RGB row per pixel, top image row first."""
        return self.frame_buf