from __future__ import annotations

import json
from pathlib import Path
import tempfile
import unittest

from PIL import Image

from viewer_axes.cli import build_view_transform, main


class ViewerAxesCliTests(unittest.TestCase):
    def test_view_transform_centers_world_point(self) -> None:
        t = build_view_transform(width=200, height=100, scale_x=10.0, scale_y=20.0, center_x=3.0, center_y=-1.0)
        self.assertEqual(t.apply(3.0, -1.0), (100.0, 50.0))
        self.assertEqual(t.apply(4.0, 0.0), (110.0, 30.0))
        with self.assertRaises(ValueError):
            build_view_transform(width=10, height=10, scale_x=0.0, scale_y=1.0)

    def test_render_writes_png(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "nested" / "axes.png"
            rc = main(["render", "--out", str(out), "--width", "200", "--height", "120", "--scale", "25"])
            self.assertEqual(rc, 0)
            with Image.open(out) as img:
                self.assertEqual(img.size, (200, 120))
                self.assertEqual(img.mode, "RGBA")
                self.assertEqual(img.getpixel((50, 60))[:3], (128, 128, 128))

    def test_render_screen_fixed_with_config_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            cfg = Path(td) / "axes.json"
            cfg.write_text(json.dumps({"paint_grid": False, "axes_color": "#000000"}), encoding="utf-8")
            out = Path(td) / "fixed.png"
            rc = main(
                [
                    "render",
                    "--out",
                    str(out),
                    "--width",
                    "160",
                    "--height",
                    "100",
                    "--config",
                    str(cfg),
                    "--screen-fixed",
                    "--inset",
                    "20",
                ]
            )
            self.assertEqual(rc, 0)
            with Image.open(out) as img:
                self.assertEqual(img.getpixel((100, 80))[:3], (0, 0, 0))

    def test_invalid_config_reports_error(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            cfg = Path(td) / "axes.json"
            cfg.write_text(json.dumps({"no_such_option": 1}), encoding="utf-8")
            out = Path(td) / "axes.png"
            with self.assertLogs("viewer_axes.cli", level="ERROR"):
                rc = main(["render", "--out", str(out), "--config", str(cfg)])
            self.assertEqual(rc, 2)
            self.assertFalse(out.exists())


if __name__ == "__main__":
    unittest.main()
