"""
search package.
==============

Does: Validate hex color input and find the nearest palette entry by
      Euclidean RGB distance.
"""

from .errors import (
    ColorDescriberError,
    EmptyPalette,
    HexColorError,
    InvalidBlueComponent,
    InvalidGreenComponent,
    InvalidLength,
    InvalidRedComponent,
    MalformedPaletteLine,
    PaletteSourceError,
)
from .hex_color import decode_channel, parse_hex_color
from .nearest import (
    describe_color,
    find_nearest_entry,
    nearest_description,
    rgb_distance,
)

__all__ = [
    # errors
    "ColorDescriberError",
    "HexColorError",
    "InvalidLength",
    "InvalidRedComponent",
    "InvalidGreenComponent",
    "InvalidBlueComponent",
    "MalformedPaletteLine",
    "EmptyPalette",
    "PaletteSourceError",
    # hex input
    "decode_channel",
    "parse_hex_color",
    # search
    "rgb_distance",
    "find_nearest_entry",
    "nearest_description",
    "describe_color",
]

__docformat__ = "google"
