"""
nearest.py
==========

Does: Find the palette entry closest to a target color by Euclidean RGB
      distance and return its description.
Used By: cli, the package-level `describe_color`, tests.
Returns: Distances (float), the winning PaletteEntry, or its description.

Ties are resolved stable-first-wins: a candidate replaces the current best
only when strictly closer, so the earliest entry in palette order wins.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from color_describer.palette.types import RGB, PaletteEntry
from color_describer.search.errors import EmptyPalette
from color_describer.search.hex_color import parse_hex_color
from color_describer.utils.log import debug

__all__ = [
    "rgb_distance",
    "find_nearest_entry",
    "nearest_description",
    "describe_color",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


# =============================================================================
# 1) DISTANCE
# =============================================================================

def rgb_distance(rgb1: RGB, rgb2: RGB) -> float:
    """Does: Compute Euclidean distance in sRGB space."""
    return sum((a - b) ** 2 for a, b in zip(rgb1, rgb2)) ** 0.5


# =============================================================================
# 2) LINEAR SCAN
# =============================================================================

def find_nearest_entry(palette: Sequence[PaletteEntry], target: RGB) -> PaletteEntry:
    """Does: Linear scan for the minimum-distance entry (earliest wins on ties).

    Raises: EmptyPalette if `palette` has no entries.
    """
    if not palette:
        raise EmptyPalette()

    best = palette[0]
    best_d = rgb_distance(best.rgb, target)
    for entry in palette[1:]:
        d = rgb_distance(entry.rgb, target)
        if d < best_d:
            best, best_d = entry, d
    debug(f"nearest to {target}: {best.hex} {best.description!r} (d={best_d:.3f})", topic="search")
    return best


def nearest_description(palette: Sequence[PaletteEntry], target: RGB) -> str:
    """Does: Return only the description of the nearest entry."""
    return find_nearest_entry(palette, target).description


# =============================================================================
# 3) HEX STRING → DESCRIPTION
# =============================================================================

def describe_color(palette: Sequence[PaletteEntry], hex_string: str) -> str:
    """
    Does: Validate `hex_string` (trim, length 6, red, green, blue) and return
          the description of the closest palette entry.
    Raises: InvalidLength / InvalidRedComponent / InvalidGreenComponent /
            InvalidBlueComponent on bad input; EmptyPalette on an empty palette.
    """
    target = parse_hex_color(hex_string)
    logger.debug("Describing %s as RGB %s against %d entries", hex_string, target, len(palette))
    return nearest_description(palette, target)
