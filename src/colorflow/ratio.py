from __future__ import annotations

import numpy as np

from .colors import Color, ColorLike

NEUTRAL_RATIO = 0.5


def optimal_ratio(color_a: ColorLike, color_b: ColorLike, target: ColorLike) -> float:
    """
    Blend ratio in [0,1] whose A→B lerp lands closest to `target`.

    Least-squares projection of target onto the RGB segment A→B:
        t = (T-A)·(B-A) / (B-A)·(B-A)
    clamped to the segment. A zero-length segment gives 0.5.
    """
    a = np.asarray(Color.of(color_a).rgb, dtype=np.float64)
    b = np.asarray(Color.of(color_b).rgb, dtype=np.float64)
    t = np.asarray(Color.of(target).rgb, dtype=np.float64)

    ab = b - a
    denom = float(ab @ ab)
    if denom == 0.0:
        return NEUTRAL_RATIO
    r = float((t - a) @ ab) / denom
    return 0.0 if r <= 0.0 else 1.0 if r >= 1.0 else r


__all__ = ["NEUTRAL_RATIO", "optimal_ratio"]
