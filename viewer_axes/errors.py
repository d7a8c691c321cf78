from __future__ import annotations


class AxesError(ValueError):
    """Base error for axes painting contract violations."""


class DegenerateTransformError(AxesError):
    """Raised when a world-to-screen transform cannot be inverted or collapses an axis."""
