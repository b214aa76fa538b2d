"""
palette.
=======

Does: Parse reference palettes from text and load the bundled, file-based and
      generated (CSS3, XKCD) palettes.
Used By: search.nearest consumers, the CLI and tests.
Returns: Immutable Palette tuples of PaletteEntry records.
"""

# ── Types ────────────────────────────────────────────────────────────────────
from .types import RGB, Palette, PaletteEntry

# ── Parsing ──────────────────────────────────────────────────────────────────
from .parser import parse_palette, parse_palette_line

# ── Sources ──────────────────────────────────────────────────────────────────
from .sources import (
    PALETTE_SOURCES,
    bundled_palette_path,
    clear_palette_cache,
    css3_palette_text,
    load_palette,
    load_palette_file,
    render_palette_text,
    xkcd_palette_text,
)

__all__ = [
    # types
    "RGB",
    "Palette",
    "PaletteEntry",
    # parsing
    "parse_palette",
    "parse_palette_line",
    # sources
    "PALETTE_SOURCES",
    "render_palette_text",
    "bundled_palette_path",
    "css3_palette_text",
    "xkcd_palette_text",
    "load_palette_file",
    "load_palette",
    "clear_palette_cache",
]
