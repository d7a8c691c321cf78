"""Adaptive, labeled coordinate axes for zoomable 2D views."""

from viewer_axes.config import DEFAULT_CONFIG, TickEngineConfig, validate_axes_config
from viewer_axes.errors import AxesError, DegenerateTransformError
from viewer_axes.painter import AxesPainter, AxisTickSet, ViewportState, WorldBounds
from viewer_axes.screen_fixed import Insets, ScreenFixedAxesPainter
from viewer_axes.surface import DrawingSurface
from viewer_axes.ticks import (
    choose_label_format,
    compute_adjusted_world_tick_distance_x,
    compute_tick_positions,
    compute_world_tick_distance,
    format_tick_label,
    snap_up_to_nice_value,
)
from viewer_axes.transform import AffineTransform2D

__version__ = "0.1.0"

__all__ = [
    "AffineTransform2D",
    "AxesError",
    "AxesPainter",
    "AxisTickSet",
    "DEFAULT_CONFIG",
    "DegenerateTransformError",
    "DrawingSurface",
    "Insets",
    "ScreenFixedAxesPainter",
    "TickEngineConfig",
    "ViewportState",
    "WorldBounds",
    "choose_label_format",
    "compute_adjusted_world_tick_distance_x",
    "compute_tick_positions",
    "compute_world_tick_distance",
    "format_tick_label",
    "snap_up_to_nice_value",
    "validate_axes_config",
]
