from __future__ import annotations

from functools import lru_cache

import numpy as np

from viewer_axes.config import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE_PX, RGBA, TickEngineConfig, parse_hex_color
from viewer_axes.raster.draw_lines import draw_line
from viewer_axes.raster.draw_text import draw_text, text_size
from viewer_axes.surface import Point


class RasterSurface:
    """DrawingSurface over an (H, W, 4) uint8 RGBA numpy canvas."""

    def __init__(
        self,
        canvas: np.ndarray,
        *,
        font_family: str = DEFAULT_FONT_FAMILY,
        font_size_px: float = DEFAULT_FONT_SIZE_PX,
    ) -> None:
        if canvas.ndim != 3 or canvas.shape[2] != 4 or canvas.dtype != np.uint8:
            raise ValueError("canvas must be an (H, W, 4) uint8 array")
        self.canvas = canvas
        self.font_family = font_family
        self.font_size_px = float(font_size_px)

    @classmethod
    def for_config(cls, canvas: np.ndarray, config: TickEngineConfig) -> RasterSurface:
        return cls(canvas, font_family=config.font_family, font_size_px=config.font_size_px)

    @property
    def width(self) -> int:
        return int(self.canvas.shape[1])

    @property
    def height(self) -> int:
        return int(self.canvas.shape[0])

    def stroke_line(self, start: Point, end: Point, color: str) -> None:
        draw_line(self.canvas, start[0], start[1], end[0], end[1], _rgba(color))

    def draw_text(self, text: str, x: float, y: float, color: str) -> None:
        _, h = self.measure_text(text)
        draw_text(
            self.canvas,
            int(x),
            int(y) - h,
            text,
            _rgba(color),
            font_family=self.font_family,
            font_size_px=self.font_size_px,
        )

    def measure_text(self, text: str) -> tuple[int, int]:
        return text_size(text, font_family=self.font_family, font_size_px=self.font_size_px)


@lru_cache(maxsize=64)
def _rgba(color: str) -> RGBA:
    return parse_hex_color(color)
