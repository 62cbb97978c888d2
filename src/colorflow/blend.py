# blend.py – two ways of combining colors
#   - "symbolic": fixed lookup over the 8 palette codes, only at ratio 0.5
#   - "interpolate": per-channel linear RGB lerp at any ratio

from __future__ import annotations

from itertools import combinations_with_replacement
from types import MappingProxyType
from typing import Literal, Mapping

import numpy as np

from .colors import CODES, Code, Color, ColorLike

MixMode = Literal["symbolic", "interpolate"]
MIX_MODES: tuple[MixMode, ...] = ("symbolic", "interpolate")

DEFAULT_RATIO = 0.5

# order-independent; W and K are handled before the table
SYMBOLIC_BLENDS: Mapping[frozenset[str], Code] = MappingProxyType(
    {
        frozenset("RG"): "Y",
        frozenset("RB"): "M",
        frozenset("GB"): "C",
        frozenset("CM"): "B",
        frozenset("CY"): "G",
        frozenset("MY"): "R",
    }
)


def mix_codes(a: Code, b: Code) -> Code:
    """Symbolic blend of two palette codes. Unlisted pairs give W."""
    if a == b:
        return a
    if a == "W" or b == "W":
        return b if a == "W" else a
    if a == "K" or b == "K":
        return "K"
    return SYMBOLIC_BLENDS.get(frozenset((a, b)), "W")


def clamp_ratio(ratio: float) -> float:
    return 0.0 if ratio <= 0.0 else 1.0 if ratio >= 1.0 else float(ratio)


def lerp(a: Color, b: Color, ratio: float) -> Color:
    # round half up, like Math.round for non-negative channels
    va = np.asarray(a.rgb, dtype=np.float64)
    vb = np.asarray(b.rgb, dtype=np.float64)
    out = np.floor(va * (1.0 - ratio) + vb * ratio + 0.5).astype(int)
    return Color(int(out[0]), int(out[1]), int(out[2]))


def blend(
    color_a: ColorLike,
    color_b: ColorLike,
    ratio: float = DEFAULT_RATIO,
    mode: MixMode = "interpolate",
) -> Color:
    """
    Combine two colors. ratio 0 keeps color_a, 1 gives color_b.
    Symbolic lookup applies only when mode == "symbolic", ratio == 0.5 and
    both colors are palette entries; otherwise RGB interpolation is used.
    """
    a, b = Color.of(color_a), Color.of(color_b)
    if a == b:
        return a
    t = clamp_ratio(ratio)
    if mode == "symbolic" and t == 0.5 and a.code and b.code:
        return Color.of(mix_codes(a.code, b.code))
    return lerp(a, b, t)


def all_combinations() -> list[tuple[Code, Code, Code]]:
    """Mixing chart: every unordered code pair with its symbolic result."""
    return [(a, b, mix_codes(a, b)) for a, b in combinations_with_replacement(CODES, 2)]


__all__ = [
    "DEFAULT_RATIO",
    "MIX_MODES",
    "MixMode",
    "SYMBOLIC_BLENDS",
    "all_combinations",
    "blend",
    "clamp_ratio",
    "lerp",
    "mix_codes",
]
