from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

from PIL import Image

from viewer_axes.config import TickEngineConfig, validate_axes_config
from viewer_axes.painter import AxesPainter
from viewer_axes.raster import RasterSurface, new_canvas
from viewer_axes.screen_fixed import Insets, ScreenFixedAxesPainter
from viewer_axes.transform import AffineTransform2D


LOGGER = logging.getLogger(__name__)


def build_view_transform(
    *,
    width: float,
    height: float,
    scale_x: float,
    scale_y: float,
    center_x: float = 0.0,
    center_y: float = 0.0,
) -> AffineTransform2D:
    """World-to-screen transform with y pointing up and (center_x, center_y) mid-screen."""
    if scale_x <= 0 or scale_y <= 0:
        raise ValueError("scale must be > 0")
    return AffineTransform2D(
        sx=scale_x,
        sy=-scale_y,
        tx=width / 2.0 - center_x * scale_x,
        ty=height / 2.0 + center_y * scale_y,
    )


def load_config(path: Path | None) -> TickEngineConfig:
    if path is None:
        return validate_axes_config()
    overrides = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(overrides, dict):
        raise ValueError(f"{path}: axes config must be a JSON object")
    return validate_axes_config(overrides)


def render(args: argparse.Namespace) -> Path:
    config = load_config(args.config)
    transform = build_view_transform(
        width=args.width,
        height=args.height,
        scale_x=args.scale_x if args.scale_x is not None else args.scale,
        scale_y=args.scale_y if args.scale_y is not None else args.scale,
        center_x=args.center_x,
        center_y=args.center_y,
    )
    canvas = new_canvas(args.width, args.height)
    surface = RasterSurface.for_config(canvas, config)
    if args.screen_fixed:
        inset = float(args.inset)
        ScreenFixedAxesPainter(
            x_insets=Insets(top=-1.0, left=inset, bottom=inset, right=inset),
            y_insets=Insets(top=inset, left=inset, bottom=inset, right=inset),
            config=config,
        ).paint(surface, transform, args.width, args.height)
    else:
        AxesPainter(config).paint(surface, transform, args.width, args.height)

    args.out.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(canvas).save(args.out)
    LOGGER.info("wrote %dx%d axes image to %s", args.width, args.height, args.out)
    return args.out


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="viewer_axes")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    rp = sub.add_parser("render", help="Paint axes for a viewport into a PNG file.")
    rp.add_argument("--out", type=Path, required=True)
    rp.add_argument("--width", type=int, default=640)
    rp.add_argument("--height", type=int, default=400)
    rp.add_argument("--scale", type=float, default=50.0, help="Pixels per world unit on both axes.")
    rp.add_argument("--scale-x", type=float, default=None)
    rp.add_argument("--scale-y", type=float, default=None)
    rp.add_argument("--center-x", type=float, default=0.0)
    rp.add_argument("--center-y", type=float, default=0.0)
    rp.add_argument("--config", type=Path, default=None, help="JSON file with axes option overrides.")
    rp.add_argument("--screen-fixed", action="store_true", help="Pin axes to the bottom/left screen edges.")
    rp.add_argument("--inset", type=float, default=40.0, help="Screen inset for --screen-fixed axes.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.command == "render":
        if args.width <= 0 or args.height <= 0:
            parser.error("--width/--height must be > 0")
        try:
            render(args)
        except ValueError as exc:
            LOGGER.error("%s", exc)
            return 2
    return 0
