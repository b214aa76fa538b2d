"""
color_describer
===============

Does: Root package for the colorblind-friendly color describer: parse a
      labeled reference palette and name any 6-digit hex color by its nearest
      palette entry.
Returns: Re-exports the palette parser, the nearest-color search and the
         error taxonomy.
Used by: The `color-describe` CLI and library callers.
"""

from .palette import Palette, PaletteEntry, load_palette, load_palette_file, parse_palette
from .search import (
    ColorDescriberError,
    EmptyPalette,
    HexColorError,
    InvalidBlueComponent,
    InvalidGreenComponent,
    InvalidLength,
    InvalidRedComponent,
    MalformedPaletteLine,
    PaletteSourceError,
    describe_color,
    find_nearest_entry,
)

__all__: list[str] = [
    "Palette",
    "PaletteEntry",
    "parse_palette",
    "load_palette",
    "load_palette_file",
    "describe_color",
    "find_nearest_entry",
    "ColorDescriberError",
    "HexColorError",
    "InvalidLength",
    "InvalidRedComponent",
    "InvalidGreenComponent",
    "InvalidBlueComponent",
    "MalformedPaletteLine",
    "EmptyPalette",
    "PaletteSourceError",
]
__docformat__ = "google"
