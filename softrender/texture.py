"""Image textures sampled by normalised (u, v) coordinates."""

from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image


class Texture:
    """An RGB image addressed with texture coordinates in ``[0, 1]``."""

    def __init__(self, image) -> None:
        data = np.asarray(image)
        if data.ndim != 3 or data.shape[2] != 3 or data.shape[0] == 0 or data.shape[1] == 0:
            raise ValueError("texture image must be a non-empty height x width x 3 array")
        self.image_data = data
        self.height, self.width = data.shape[0], data.shape[1]

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Texture":
        """Load an image file as an RGB texture."""
        with Image.open(path) as img:
            return cls(np.array(img.convert("RGB")))

    def get_color(self, u: float, v: float) -> np.ndarray:
        """RGB colour at ``(u, v)``; coordinates are clamped to ``[0, 1]``."""
        u = min(max(u, 0.0), 1.0)
        v = min(max(v, 0.0), 1.0)
        col = min(int(u * self.width), self.width - 1)
        row = min(int((1 - v) * self.height), self.height - 1)
        return self.image_data[row, col].astype(np.float64)