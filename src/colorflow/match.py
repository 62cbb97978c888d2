from __future__ import annotations

import numpy as np

from .colors import Color, ColorLike


def _vec(c: ColorLike) -> np.ndarray:
    # int64, not uint8: differences must not wrap
    return np.asarray(Color.of(c).rgb, dtype=np.int64)


def distance(color_a: ColorLike, color_b: ColorLike) -> float:
    """Euclidean distance in RGB space."""
    return float(np.linalg.norm(_vec(color_a) - _vec(color_b)))


def matches(color_a: ColorLike, color_b: ColorLike, tolerance: int = 0) -> bool:
    """
    Same hex when tolerance is 0; otherwise every channel must differ by
    at most `tolerance` (per-channel, not Euclidean).
    """
    if tolerance <= 0:
        return Color.of(color_a).hex == Color.of(color_b).hex
    return bool(np.all(np.abs(_vec(color_a) - _vec(color_b)) <= tolerance))


__all__ = ["distance", "matches"]
