# color_describer/palette/types.py
"""
types.py.

Does: Define the immutable records shared by the palette parser and the
nearest-color search, plus the two-hex-digit channel decoder both use.
"""

from __future__ import annotations

import string
from dataclasses import dataclass

RGB = tuple[int, int, int]

HEX_LENGTH = 6
_HEX_DIGITS = frozenset(string.hexdigits)


def decode_channel(pair: str) -> int | None:
    """Does: Decode exactly two ASCII hex digits; None for anything else.

    `int(x, 16)` alone would also accept signs, whitespace and underscores.
    """
    if len(pair) != 2 or not all(ch in _HEX_DIGITS for ch in pair):
        return None
    return int(pair, 16)


@dataclass(frozen=True)
class PaletteEntry:
    """One labeled reference color; channels are always within 0–255."""

    red: int
    green: int
    blue: int
    description: str

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} channel out of bounds: {value}")

    @property
    def rgb(self) -> RGB:
        return (self.red, self.green, self.blue)

    @property
    def hex(self) -> str:
        return f"{self.red:02X}{self.green:02X}{self.blue:02X}"


# Source order is preserved; duplicates are allowed.
Palette = tuple[PaletteEntry, ...]

__all__ = ["RGB", "HEX_LENGTH", "decode_channel", "PaletteEntry", "Palette"]

__docformat__ = "google"
