from __future__ import annotations

from typing import Protocol


Point = tuple[float, float]


class DrawingSurface(Protocol):
    """Capabilities the axes painter needs from a 2D canvas.

    Colors are hex strings (#RRGGBB or #RRGGBBAA). Text is anchored at the
    left end of its baseline, as with AWT, Qt or HTML canvas text.
    """

    def stroke_line(self, start: Point, end: Point, color: str) -> None:
        ...

    def draw_text(self, text: str, x: float, y: float, color: str) -> None:
        ...

    def measure_text(self, text: str) -> tuple[float, float]:
        ...
