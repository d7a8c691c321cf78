from __future__ import annotations

from dataclasses import asdict, dataclass, fields
import math
import re
from typing import Any, Mapping

from viewer_axes.ticks import DEFAULT_MAX_TICK_COUNT

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

RGBA = tuple[int, int, int, int]

DEFAULT_FONT_FAMILY = "DejaVu Sans"
DEFAULT_FONT_SIZE_PX = 9.0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class TickEngineConfig:
    """Per-painter settings. Colors and font are presentation only."""

    min_screen_tick_distance_x: float = 30.0
    min_screen_tick_distance_y: float = 20.0
    tick_size_screen: float = 5.0
    adjust_for_string_lengths: bool = True
    print_labels: bool = True
    paint_grid: bool = True
    max_tick_count: int = DEFAULT_MAX_TICK_COUNT
    axes_color: str = "#808080"
    grid_color: str = "#F0F0F0"
    font_family: str = DEFAULT_FONT_FAMILY
    font_size_px: float = DEFAULT_FONT_SIZE_PX

    def __post_init__(self) -> None:
        for key in ("min_screen_tick_distance_x", "min_screen_tick_distance_y", "font_size_px"):
            value = getattr(self, key)
            if not _is_number(value) or not math.isfinite(value) or value <= 0:
                raise ValueError(f"`{key}` must be a positive number")
        if not _is_number(self.tick_size_screen) or not math.isfinite(self.tick_size_screen) or self.tick_size_screen < 0:
            raise ValueError("`tick_size_screen` must be a non-negative number")
        for key in ("adjust_for_string_lengths", "print_labels", "paint_grid"):
            if not isinstance(getattr(self, key), bool):
                raise ValueError(f"`{key}` must be a bool")
        if not isinstance(self.max_tick_count, int) or isinstance(self.max_tick_count, bool) or self.max_tick_count < 1:
            raise ValueError("`max_tick_count` must be an int >= 1")
        for key in ("axes_color", "grid_color"):
            value = getattr(self, key)
            if not isinstance(value, str) or not _HEX_COLOR.match(value):
                raise ValueError(f"`{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")
        if not isinstance(self.font_family, str) or not self.font_family.strip():
            raise ValueError("`font_family` must be a non-empty string")


DEFAULT_CONFIG = TickEngineConfig()


def validate_axes_config(overrides: Mapping[str, Any] | None = None) -> TickEngineConfig:
    """Merge user overrides onto the defaults, rejecting unknown keys."""
    raw: dict[str, Any] = asdict(DEFAULT_CONFIG)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown axes option: {key}")
            raw[key] = value
    for f in fields(TickEngineConfig):
        if f.type == "float" and _is_number(raw[f.name]):
            raw[f.name] = float(raw[f.name])
    return TickEngineConfig(**raw)


def parse_hex_color(value: str) -> RGBA:
    if not _HEX_COLOR.match(value):
        raise ValueError(f"not a hex color: {value!r}")
    r = int(value[1:3], 16)
    g = int(value[3:5], 16)
    b = int(value[5:7], 16)
    a = int(value[7:9], 16) if len(value) == 9 else 255
    return (r, g, b, a)
