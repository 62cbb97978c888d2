# colors.py – color values for the blending puzzle
#   - 8 symbolic codes (R,G,B,C,M,Y,K,W) bound to fixed hex values
#   - arbitrary RGB triples, rendered as '#RRGGBB'
#   - identity is the hex value, so 'R' and '#FF5555' are the same color

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping, Tuple, Union

log = logging.getLogger(__name__)

Hex = str
RGB = Tuple[int, int, int]
Code = Literal["R", "G", "B", "C", "M", "Y", "K", "W"]

# --- palette -----------------------------------------------------------------
CODES: tuple[Code, ...] = ("R", "G", "B", "C", "M", "Y", "K", "W")

PALETTE: Mapping[Code, tuple[str, Hex]] = MappingProxyType(
    {
        "R": ("Red", "#FF5555"),
        "G": ("Green", "#55FF55"),
        "B": ("Blue", "#5555FF"),
        "C": ("Cyan", "#55FFFF"),
        "M": ("Magenta", "#FF55FF"),
        "Y": ("Yellow", "#FFFF55"),
        "K": ("Black", "#333333"),
        "W": ("White", "#FFFFFF"),
    }
)

_CODE_BY_HEX: Mapping[Hex, Code] = MappingProxyType(
    {hex_: code for code, (_name, hex_) in PALETTE.items()}
)

_FALLBACK: RGB = (0, 0, 0)


# --- conversions -------------------------------------------------------------
def _clamp_u8(v: int) -> int:
    return 0 if v < 0 else 255 if v > 255 else int(v)


def to_hex(r: int, g: int, b: int) -> Hex:
    """Render channels as '#RRGGBB' (uppercase, zero-padded)."""
    return f"#{_clamp_u8(r):02X}{_clamp_u8(g):02X}{_clamp_u8(b):02X}"


def _parse_hex(s: str) -> RGB | None:
    raw = s.strip().lstrip("#")
    if len(raw) == 3 and all(c in string.hexdigits for c in raw):
        raw = "".join(ch * 2 for ch in raw)
    if len(raw) != 6 or not all(c in string.hexdigits for c in raw):
        return None
    r, g, b = (int(raw[i : i + 2], 16) for i in (0, 2, 4))
    return r, g, b


def to_rgb(color: ColorLike) -> RGB:
    """
    Resolve a symbolic code, hex string, RGB triple or Color to channels 0–255.
    Malformed input resolves to (0, 0, 0) instead of raising.
    """
    if isinstance(color, Color):
        return color.rgb
    if isinstance(color, tuple):
        if len(color) != 3:
            log.warning("not an RGB triple: %r, using #000000", color)
            return _FALLBACK
        r, g, b = (_clamp_u8(int(c)) for c in color)
        return r, g, b
    s = (color or "").strip()
    code = s.upper()
    if len(code) == 1 and code in PALETTE:
        return _parse_hex(PALETTE[code][1])  # type: ignore[return-value]
    rgb = _parse_hex(s)
    if rgb is None:
        log.warning("unrecognized color %r, using #000000", color)
        return _FALLBACK
    return rgb


# --- value type --------------------------------------------------------------
@dataclass(frozen=True)
class Color:
    """An immutable RGB color. Palette members are also symbolic."""

    r: int
    g: int
    b: int

    @classmethod
    def of(cls, value: ColorLike) -> Color:
        if isinstance(value, Color):
            return value
        return cls(*to_rgb(value))

    @property
    def rgb(self) -> RGB:
        return self.r, self.g, self.b

    @property
    def hex(self) -> Hex:
        return to_hex(self.r, self.g, self.b)

    @property
    def code(self) -> Code | None:
        """Symbolic code when this color is a palette entry, else None."""
        return _CODE_BY_HEX.get(self.hex)

    @property
    def is_symbolic(self) -> bool:
        return self.code is not None

    def __str__(self) -> str:
        return self.code or self.hex


ColorLike = Union[Color, str, RGB]


def color_name(color: ColorLike) -> str:
    c = Color.of(color)
    return PALETTE[c.code][0] if c.code else c.hex


def symbolic(code: str) -> Color:
    """Palette color for a code; raises KeyError for anything else."""
    key = code.strip().upper()
    if key not in PALETTE:
        raise KeyError(f"unknown color code '{code}'")
    return Color.of(key)


__all__ = [
    "CODES",
    "PALETTE",
    "Code",
    "Color",
    "ColorLike",
    "Hex",
    "RGB",
    "color_name",
    "symbolic",
    "to_hex",
    "to_rgb",
]
