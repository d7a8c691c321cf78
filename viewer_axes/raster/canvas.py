from __future__ import annotations

import numpy as np

from viewer_axes.config import RGBA


def new_canvas(width: int, height: int, color: RGBA = (255, 255, 255, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def blend_pixel(dst: np.ndarray, x: int, y: int, color: RGBA, coverage: float = 1.0) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    a = (color[3] / 255.0) * coverage
    if a <= 0.0:
        return
    current = dst[y, x, :3].astype(np.float32)
    dst[y, x, :3] = (np.asarray(color[:3], dtype=np.float32) * a + current * (1.0 - a)).astype(np.uint8)
    dst[y, x, 3] = 255
