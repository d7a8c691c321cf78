from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import TypeVar

import numpy as np

from viewer_axes.config import DEFAULT_CONFIG, TickEngineConfig
from viewer_axes.surface import DrawingSurface, Point
from viewer_axes.ticks import (
    MeasureText,
    choose_label_format,
    compute_adjusted_world_tick_distance_x,
    compute_tick_positions,
    compute_world_tick_distance,
    format_tick_label,
)
from viewer_axes.transform import AffineTransform2D, screen_rect_to_world_bounds


LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")

# Horizontal padding factor between a y label and its tick.
Y_LABEL_PADDING = 1.05
# Fraction of the label height used to center y labels on the tick.
Y_LABEL_BASELINE_SHIFT = 0.3


@dataclass(frozen=True)
class ViewportState:
    transform: AffineTransform2D
    width: float
    height: float


@dataclass(frozen=True)
class WorldBounds:
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def from_viewport(cls, viewport: ViewportState) -> WorldBounds:
        if viewport.width <= 0 or viewport.height <= 0:
            x, y = viewport.transform.inverse().apply(0.0, 0.0)
            return cls(min_x=x, max_x=x, min_y=y, max_y=y)
        min_x, max_x, min_y, max_y = screen_rect_to_world_bounds(
            viewport.transform, viewport.width, viewport.height
        )
        return cls(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)


@dataclass(frozen=True)
class AxisTickSet:
    positions: np.ndarray
    interval: float
    label_format: str | None = None

    @classmethod
    def empty(cls, label_format: str | None = None) -> AxisTickSet:
        return cls(positions=np.empty(0, dtype=np.float64), interval=math.nan, label_format=label_format)

    def within(self, vmin: float, vmax: float) -> np.ndarray:
        lo, hi = min(vmin, vmax), max(vmin, vmax)
        return self.positions[(self.positions >= lo) & (self.positions <= hi)]

    def label(self, value: float) -> str | None:
        if self.label_format is None:
            return None
        return format_tick_label(value, self.label_format)


@dataclass
class AxesCache:
    viewport: ViewportState | None = None
    bounds: WorldBounds | None = None
    ticks_x: AxisTickSet | None = None
    ticks_y: AxisTickSet | None = None
    recompute_count: int = 0

    def is_valid_for(self, viewport: ViewportState) -> bool:
        return self.viewport is not None and self.viewport == viewport

    def invalidate(self) -> None:
        self.viewport = None
        self.bounds = None
        self.ticks_x = None
        self.ticks_y = None


class AxesPainter:
    """Paints labeled coordinate axes and a background grid for a zoomable view."""

    def __init__(self, config: TickEngineConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._cache = AxesCache()

    @property
    def recompute_count(self) -> int:
        return self._cache.recompute_count

    @property
    def viewport(self) -> ViewportState | None:
        return self._cache.viewport

    @property
    def world_bounds(self) -> WorldBounds:
        return self._require(self._cache.bounds)

    @property
    def ticks_x(self) -> AxisTickSet:
        return self._require(self._cache.ticks_x)

    @property
    def ticks_y(self) -> AxisTickSet:
        return self._require(self._cache.ticks_y)

    def invalidate(self) -> None:
        self._cache.invalidate()

    def validate(
        self,
        measure_text: MeasureText,
        transform: AffineTransform2D,
        width: float,
        height: float,
    ) -> bool:
        """Recompute bounds and ticks if the viewport changed. Returns True when recomputed."""
        viewport = ViewportState(transform=transform, width=float(width), height=float(height))
        if self._cache.is_valid_for(viewport):
            return False

        bounds = WorldBounds.from_viewport(viewport)
        if viewport.width <= 0 or viewport.height <= 0:
            label_format = choose_label_format(1.0) if self.config.print_labels else None
            ticks_x = AxisTickSet.empty(label_format)
            ticks_y = AxisTickSet.empty(label_format)
        else:
            ticks_x = self._compute_ticks_x(measure_text, transform, bounds)
            ticks_y = self._compute_ticks_y(transform, bounds)

        self._cache.viewport = viewport
        self._cache.bounds = bounds
        self._cache.ticks_x = ticks_x
        self._cache.ticks_y = ticks_y
        self._cache.recompute_count += 1
        LOGGER.debug(
            "axes recomputed for %gx%g: x=[%g, %g] step %g, y=[%g, %g] step %g",
            viewport.width,
            viewport.height,
            bounds.min_x,
            bounds.max_x,
            ticks_x.interval,
            bounds.min_y,
            bounds.max_y,
            ticks_y.interval,
        )
        return True

    def paint(self, surface: DrawingSurface, transform: AffineTransform2D, width: float, height: float) -> None:
        self.validate(surface.measure_text, transform, width, height)
        if self.config.paint_grid:
            self._paint_grid(surface, transform)
        bounds = self.world_bounds
        self._paint_x(surface, transform, bounds.min_x, bounds.max_x, 0.0)
        self._paint_y(surface, transform, bounds.min_y, bounds.max_y, 0.0)

    def paint_grid(self, surface: DrawingSurface, transform: AffineTransform2D, width: float, height: float) -> None:
        self.validate(surface.measure_text, transform, width, height)
        self._paint_grid(surface, transform)

    def paint_axis_x(
        self,
        surface: DrawingSurface,
        transform: AffineTransform2D,
        width: float,
        height: float,
        world_min_x: float,
        world_max_x: float,
        world_y: float,
    ) -> None:
        self.validate(surface.measure_text, transform, width, height)
        self._paint_x(surface, transform, world_min_x, world_max_x, world_y)

    def paint_axis_y(
        self,
        surface: DrawingSurface,
        transform: AffineTransform2D,
        width: float,
        height: float,
        world_min_y: float,
        world_max_y: float,
        world_x: float,
    ) -> None:
        self.validate(surface.measure_text, transform, width, height)
        self._paint_y(surface, transform, world_min_y, world_max_y, world_x)

    def _compute_ticks_x(
        self,
        measure_text: MeasureText,
        transform: AffineTransform2D,
        bounds: WorldBounds,
    ) -> AxisTickSet:
        cfg = self.config
        unit_length = transform.unit_length_x()
        interval = compute_world_tick_distance(unit_length, cfg.min_screen_tick_distance_x)
        if cfg.print_labels and cfg.adjust_for_string_lengths:
            interval = compute_adjusted_world_tick_distance_x(
                measure_text,
                unit_length,
                bounds.min_x,
                bounds.max_x,
                interval,
                min_screen_tick_distance=cfg.min_screen_tick_distance_x,
            )
        positions = compute_tick_positions(bounds.min_x, bounds.max_x, interval, max_tick_count=cfg.max_tick_count)
        label_format = choose_label_format(interval) if cfg.print_labels else None
        return AxisTickSet(positions=positions, interval=interval, label_format=label_format)

    def _compute_ticks_y(self, transform: AffineTransform2D, bounds: WorldBounds) -> AxisTickSet:
        cfg = self.config
        interval = compute_world_tick_distance(transform.unit_length_y(), cfg.min_screen_tick_distance_y)
        positions = compute_tick_positions(bounds.min_y, bounds.max_y, interval, max_tick_count=cfg.max_tick_count)
        label_format = choose_label_format(interval) if cfg.print_labels else None
        return AxisTickSet(positions=positions, interval=interval, label_format=label_format)

    def _paint_grid(self, surface: DrawingSurface, transform: AffineTransform2D) -> None:
        bounds = self.world_bounds
        color = self.config.grid_color
        for x in self.ticks_x.positions.tolist():
            self._stroke_world_line(surface, transform, (x, bounds.min_y), (x, bounds.max_y), color)
        for y in self.ticks_y.positions.tolist():
            self._stroke_world_line(surface, transform, (bounds.min_x, y), (bounds.max_x, y), color)

    def _paint_x(
        self,
        surface: DrawingSurface,
        transform: AffineTransform2D,
        world_min_x: float,
        world_max_x: float,
        world_y: float,
    ) -> None:
        color = self.config.axes_color
        self._stroke_world_line(surface, transform, (world_min_x, world_y), (world_max_x, world_y), color)
        ticks = self.ticks_x
        for x in ticks.within(world_min_x, world_max_x).tolist():
            start, end = self._tick_mark(transform, (x, world_y), (0.0, -1.0))
            surface.stroke_line(start, end, color)
            label = ticks.label(x)
            if label is not None:
                w, h = surface.measure_text(label)
                surface.draw_text(label, int(end[0] - w * 0.5), int(end[1] + h), color)

    def _paint_y(
        self,
        surface: DrawingSurface,
        transform: AffineTransform2D,
        world_min_y: float,
        world_max_y: float,
        world_x: float,
    ) -> None:
        color = self.config.axes_color
        self._stroke_world_line(surface, transform, (world_x, world_min_y), (world_x, world_max_y), color)
        ticks = self.ticks_y
        for y in ticks.within(world_min_y, world_max_y).tolist():
            start, end = self._tick_mark(transform, (world_x, y), (-1.0, 0.0))
            surface.stroke_line(start, end, color)
            label = ticks.label(y)
            if label is not None:
                w, h = surface.measure_text(label)
                surface.draw_text(
                    label,
                    int(end[0] - w * Y_LABEL_PADDING),
                    int(end[1] + h * Y_LABEL_BASELINE_SHIFT),
                    color,
                )

    def _tick_mark(
        self,
        transform: AffineTransform2D,
        world_point: Point,
        world_direction: Point,
    ) -> tuple[Point, Point]:
        # Transform a one-unit segment, then rescale it so ticks keep a fixed
        # pixel length under anisotropic zoom.
        start = transform.apply(*world_point)
        dx, dy = transform.apply_vector(*world_direction)
        length = math.hypot(dx, dy)
        if length == 0.0:
            return start, start
        size = self.config.tick_size_screen
        end = (start[0] + dx / length * size, start[1] + dy / length * size)
        return start, end

    @staticmethod
    def _stroke_world_line(
        surface: DrawingSurface,
        transform: AffineTransform2D,
        world_start: Point,
        world_end: Point,
        color: str,
    ) -> None:
        surface.stroke_line(transform.apply(*world_start), transform.apply(*world_end), color)

    @staticmethod
    def _require(value: _T | None) -> _T:
        if value is None:
            raise RuntimeError("axes are not validated; call validate() or paint() first")
        return value
