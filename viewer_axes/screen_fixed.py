from __future__ import annotations

from dataclasses import dataclass

from viewer_axes.config import TickEngineConfig
from viewer_axes.painter import AxesPainter
from viewer_axes.surface import DrawingSurface
from viewer_axes.transform import AffineTransform2D


@dataclass(frozen=True)
class Insets:
    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0


class ScreenFixedAxesPainter:
    """Paints axes pinned at fixed screen offsets, independent of pan and zoom.

    The x axis sits `x_insets.top` pixels below the top edge, or
    `x_insets.bottom` pixels above the bottom edge when `top` is negative,
    and spans from `left` to `width - right`. The y axis sits
    `y_insets.left` pixels from the left edge, or `y_insets.right` pixels
    from the right edge when `left` is negative, and spans from
    `height - bottom` to `top`.
    """

    def __init__(self, x_insets: Insets, y_insets: Insets, config: TickEngineConfig | None = None) -> None:
        self.x_insets = x_insets
        self.y_insets = y_insets
        self.axes_painter = AxesPainter(config)

    def paint(self, surface: DrawingSurface, transform: AffineTransform2D, width: float, height: float) -> None:
        screen_to_world = transform.inverse()
        xi = self.x_insets
        yi = self.y_insets

        x_axis_screen_y = height - xi.bottom if xi.top < 0 else xi.top
        px_min = screen_to_world.apply(xi.left, x_axis_screen_y)
        px_max = screen_to_world.apply(width - xi.right, x_axis_screen_y)

        y_axis_screen_x = width - yi.right if yi.left < 0 else yi.left
        py_min = screen_to_world.apply(y_axis_screen_x, height - yi.bottom)
        py_max = screen_to_world.apply(y_axis_screen_x, yi.top)

        painter = self.axes_painter
        if painter.config.paint_grid:
            painter.paint_grid(surface, transform, width, height)
        painter.paint_axis_x(surface, transform, width, height, px_min[0], px_max[0], px_min[1])
        painter.paint_axis_y(surface, transform, width, height, py_min[1], py_max[1], py_min[0])
