from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from viewer_axes.errors import DegenerateTransformError


# Relative to the column lengths, so pure zoom never counts as singular.
_SINGULAR_EPS = 1e-12


@dataclass(frozen=True)
class AffineTransform2D:
    """World-to-screen affine map.

    x' = sx * x + shx * y + tx
    y' = shy * x + sy * y + ty
    """

    sx: float = 1.0
    shy: float = 0.0
    shx: float = 0.0
    sy: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> AffineTransform2D:
        return cls()

    @classmethod
    def scaling(cls, sx: float, sy: float) -> AffineTransform2D:
        return cls(sx=float(sx), sy=float(sy))

    @classmethod
    def translation(cls, tx: float, ty: float) -> AffineTransform2D:
        return cls(tx=float(tx), ty=float(ty))

    def determinant(self) -> float:
        return (self.sx * self.sy) - (self.shx * self.shy)

    def is_invertible(self) -> bool:
        det = self.determinant()
        scale = math.hypot(self.sx, self.shy) * math.hypot(self.shx, self.sy)
        return math.isfinite(det) and det != 0.0 and abs(det) > _SINGULAR_EPS * scale

    def then(self, other: AffineTransform2D) -> AffineTransform2D:
        """Return the transform that applies `self` first, then `other`."""
        return AffineTransform2D(
            sx=other.sx * self.sx + other.shx * self.shy,
            shy=other.shy * self.sx + other.sy * self.shy,
            shx=other.sx * self.shx + other.shx * self.sy,
            sy=other.shy * self.shx + other.sy * self.sy,
            tx=other.sx * self.tx + other.shx * self.ty + other.tx,
            ty=other.shy * self.tx + other.sy * self.ty + other.ty,
        )

    def inverse(self) -> AffineTransform2D:
        det = self.determinant()
        if not self.is_invertible():
            raise DegenerateTransformError(f"transform is not invertible (determinant={det!r})")
        sx = self.sy / det
        shy = -self.shy / det
        shx = -self.shx / det
        sy = self.sx / det
        tx = -(sx * self.tx + shx * self.ty)
        ty = -(shy * self.tx + sy * self.ty)
        if not all(math.isfinite(v) for v in (sx, shy, shx, sy, tx, ty)):
            raise DegenerateTransformError(f"inverse overflows (determinant={det!r})")
        return AffineTransform2D(sx=sx, shy=shy, shx=shx, sy=sy, tx=tx, ty=ty)

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (
            self.sx * x + self.shx * y + self.tx,
            self.shy * x + self.sy * y + self.ty,
        )

    def apply_vector(self, dx: float, dy: float) -> tuple[float, float]:
        return (self.sx * dx + self.shx * dy, self.shy * dx + self.sy * dy)

    def apply_array(self, xs: np.ndarray, ys: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        return (
            self.sx * xs + self.shx * ys + self.tx,
            self.shy * xs + self.sy * ys + self.ty,
        )

    def unit_length_x(self, length: float = 1.0) -> float:
        """Screen length of a world vector of `length` along the x axis."""
        dx, dy = self.apply_vector(length, 0.0)
        return math.hypot(dx, dy)

    def unit_length_y(self, length: float = 1.0) -> float:
        """Screen length of a world vector of `length` along the y axis."""
        dx, dy = self.apply_vector(0.0, length)
        return math.hypot(dx, dy)


def screen_rect_to_world_bounds(
    world_to_screen: AffineTransform2D,
    width: float,
    height: float,
) -> tuple[float, float, float, float]:
    """Bounding box (min_x, max_x, min_y, max_y) of the screen rectangle in world space."""
    screen_to_world = world_to_screen.inverse()
    corners_x = np.asarray([0.0, width, width, 0.0], dtype=np.float64)
    corners_y = np.asarray([0.0, 0.0, height, height], dtype=np.float64)
    wx, wy = screen_to_world.apply_array(corners_x, corners_y)
    return (float(np.min(wx)), float(np.max(wx)), float(np.min(wy)), float(np.max(wy)))
