from __future__ import annotations

from dataclasses import dataclass, field
import unittest

from viewer_axes.config import TickEngineConfig
from viewer_axes.screen_fixed import Insets, ScreenFixedAxesPainter
from viewer_axes.transform import AffineTransform2D


GRID = "#F0F0F0"
AXES = "#808080"
VIEW = AffineTransform2D(sx=32.0, sy=-32.0, tx=256.0, ty=128.0)
W, H = 512, 256


@dataclass
class RecordingSurface:
    lines: list[tuple[tuple[float, float], tuple[float, float], str]] = field(default_factory=list)
    texts: list[tuple[str, float, float, str]] = field(default_factory=list)

    def stroke_line(self, start, end, color) -> None:
        self.lines.append((tuple(start), tuple(end), color))

    def draw_text(self, text, x, y, color) -> None:
        self.texts.append((text, x, y, color))

    def measure_text(self, text):
        return (6.0 * len(text), 10.0)


class ScreenFixedAxesPainterTests(unittest.TestCase):
    def test_axes_pinned_to_bottom_and_left_edges(self) -> None:
        painter = ScreenFixedAxesPainter(
            x_insets=Insets(top=-1, left=10, bottom=20, right=10),
            y_insets=Insets(top=10, left=30, bottom=10, right=0),
        )
        surface = RecordingSurface()
        painter.paint(surface, VIEW, W, H)

        axes = [(s, e) for s, e, c in surface.lines if c == AXES]
        self.assertIn(((10.0, 236.0), (502.0, 236.0)), axes)
        self.assertIn(((30.0, 246.0), (30.0, 10.0)), axes)
        # x ticks -7..7 and y ticks -3..3 fall inside the pinned spans.
        self.assertEqual(len(axes), 2 + 15 + 7)
        self.assertEqual(len(surface.texts), 15 + 7)
        self.assertEqual(len([1 for _, _, c in surface.lines if c == GRID]), 18 + 10)

    def test_axes_follow_the_screen_not_the_world(self) -> None:
        painter = ScreenFixedAxesPainter(
            x_insets=Insets(top=-1, left=0, bottom=20, right=0),
            y_insets=Insets(top=0, left=30, bottom=0, right=0),
        )
        panned = AffineTransform2D(sx=32.0, sy=-32.0, tx=-1000.0, ty=900.0)
        for transform in (VIEW, panned):
            surface = RecordingSurface()
            painter.paint(surface, transform, W, H)
            axes = [(s, e) for s, e, c in surface.lines if c == AXES]
            with self.subTest(transform=transform):
                self.assertIn(((0.0, 236.0), (512.0, 236.0)), axes)
                self.assertIn(((30.0, 256.0), (30.0, 0.0)), axes)
        self.assertEqual(painter.axes_painter.recompute_count, 2)

    def test_negative_left_inset_pins_y_axis_to_right_edge(self) -> None:
        painter = ScreenFixedAxesPainter(
            x_insets=Insets(top=16, left=0, bottom=0, right=0),
            y_insets=Insets(top=0, left=-1, bottom=0, right=15),
            config=TickEngineConfig(paint_grid=False),
        )
        surface = RecordingSurface()
        painter.paint(surface, VIEW, W, H)
        axes = [(s, e) for s, e, c in surface.lines if c == AXES]
        self.assertIn(((0.0, 16.0), (512.0, 16.0)), axes)
        self.assertIn(((497.0, 256.0), (497.0, 0.0)), axes)
        self.assertFalse(any(c == GRID for _, _, c in surface.lines))


if __name__ == "__main__":
    unittest.main()
