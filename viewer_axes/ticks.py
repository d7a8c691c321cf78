from __future__ import annotations

import logging
import math
from typing import Callable

import numpy as np

from viewer_axes.errors import DegenerateTransformError


LOGGER = logging.getLogger(__name__)

MeasureText = Callable[[str], tuple[float, float]]

NICE_MANTISSAS = (1, 2, 5)
LABEL_WIDTH_PADDING = 1.05
DEFAULT_MAX_TICK_COUNT = 10_000
# Beyond 2**53 consecutive tick indices are no longer distinct floats.
_MAX_EXACT_INDEX = 2**53
_LOG_EPS = 1e-9


def snap_up_to_nice_value(value: float) -> float:
    """Smallest m * 10**e (m in 1, 2, 5) that is >= value."""
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"value must be finite and > 0, got {value!r}")
    exp = math.floor(math.log10(value))
    # log10 may land one decade low for values just above a power of ten.
    while True:
        for mantissa in NICE_MANTISSAS:
            candidate = _scaled(mantissa, exp)
            if candidate >= value:
                return candidate
        exp += 1


def compute_world_tick_distance(axis_unit_screen_length: float, min_screen_tick_distance: float) -> float:
    if not math.isfinite(axis_unit_screen_length) or axis_unit_screen_length <= 0:
        raise DegenerateTransformError(
            f"axis unit screen length must be finite and > 0, got {axis_unit_screen_length!r}"
        )
    if not math.isfinite(min_screen_tick_distance) or min_screen_tick_distance <= 0:
        raise ValueError("min_screen_tick_distance must be finite and > 0")
    return snap_up_to_nice_value(min_screen_tick_distance / axis_unit_screen_length)


def compute_adjusted_world_tick_distance_x(
    measure_text: MeasureText,
    axis_unit_screen_length: float,
    world_min: float,
    world_max: float,
    world_tick_distance: float,
    *,
    min_screen_tick_distance: float,
) -> float:
    """Widen an x tick distance so that the outermost labels fit between ticks.

    The labels of the first and last bracketing ticks are formatted at the
    candidate distance and measured. If the wider one (plus 5% padding)
    exceeds `min_screen_tick_distance`, the distance is recomputed once with
    that width as the minimum spacing.
    """
    label_format = choose_label_format(world_tick_distance)
    n_min = math.floor(world_min / world_tick_distance)
    n_max = math.floor(world_max / world_tick_distance) + 1
    width_min, _ = measure_text(format_tick_label(n_min * world_tick_distance, label_format))
    width_max, _ = measure_text(format_tick_label(n_max * world_tick_distance, label_format))
    max_label_width = max(float(width_min), float(width_max)) * LABEL_WIDTH_PADDING
    if max_label_width > min_screen_tick_distance:
        return compute_world_tick_distance(axis_unit_screen_length, max_label_width)
    return world_tick_distance


def compute_tick_positions(
    world_min: float,
    world_max: float,
    interval: float,
    *,
    max_tick_count: int = DEFAULT_MAX_TICK_COUNT,
) -> np.ndarray:
    """Multiples of `interval` bracketing [world_min, world_max] with one tick past each edge."""
    if not math.isfinite(interval) or interval <= 0:
        raise ValueError(f"interval must be finite and > 0, got {interval!r}")
    if not math.isfinite(world_min) or not math.isfinite(world_max):
        raise ValueError("world range must be finite")
    if world_max < world_min:
        return np.empty(0, dtype=np.float64)

    n_min = math.floor(world_min / interval)
    if n_min * interval > world_min:
        n_min -= 1
    if world_max == world_min:
        return np.asarray([n_min * interval], dtype=np.float64)

    n_max = math.floor(world_max / interval) + 1
    if n_max * interval < world_max:
        n_max += 1

    count = n_max - n_min + 1
    if count > max_tick_count:
        LOGGER.warning(
            "tick count %d exceeds limit %d for range [%g, %g] at interval %g; skipping ticks",
            count,
            max_tick_count,
            world_min,
            world_max,
            interval,
        )
        return np.empty(0, dtype=np.float64)
    if max(abs(n_min), abs(n_max)) > _MAX_EXACT_INDEX:
        LOGGER.warning("tick interval %g is below float resolution near %g; skipping ticks", interval, world_min)
        return np.empty(0, dtype=np.float64)

    return np.arange(n_min, n_max + 1, dtype=np.float64) * interval


def choose_label_format(interval: float) -> str:
    """Format string with as many decimals as the interval's magnitude needs."""
    if not math.isfinite(interval) or interval <= 0:
        raise ValueError(f"interval must be finite and > 0, got {interval!r}")
    if interval >= 1.0:
        return ".0f"
    decimals = max(0, -math.floor(math.log10(interval) + _LOG_EPS))
    return f".{decimals}f"


def format_tick_label(value: float, label_format: str) -> str:
    text = format(float(value), label_format)
    # Ticks a hair below zero would otherwise print as "-0.0".
    if text.startswith("-") and float(text) == 0.0:
        text = text[1:]
    return text


def _scaled(mantissa: int, exp: int) -> float:
    if exp >= 0:
        return float(mantissa * 10**exp)
    return mantissa / 10 ** (-exp)
