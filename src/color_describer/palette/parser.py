"""
parser.py
=========

Does: Turn the semi-structured palette text (`<index> <HEX6> <description...>`
      per line) into an ordered, immutable Palette.
Used By: palette.sources (bundled/file/css3/xkcd), tests.
Returns: Palette (tuple of PaletteEntry), possibly empty, never raises on a
         bad line.

Notes:
- Blank/whitespace-only lines and lines starting with '#' are skipped silently.
- Lines with fewer than 3 single-space separated tokens are skipped with a
  MalformedPaletteLine warning.
- Channel decoding is lenient by default: a pair that is not two hex digits
  decodes as 0. `strict_channels=True` skips such lines instead.
"""

from __future__ import annotations

import logging

from color_describer.palette.types import HEX_LENGTH, Palette, PaletteEntry, decode_channel
from color_describer.search.errors import MalformedPaletteLine

__all__ = ["parse_palette", "parse_palette_line"]
__docformat__ = "google"

log = logging.getLogger(__name__)

COMMENT_PREFIX = "#"
MIN_TOKENS = 3


def _decode_color_token(token: str, strict: bool) -> tuple[int, int, int] | None:
    """Does: Decode the HEX6 token; None only when strict and the token is bad."""
    channels = [decode_channel(token[i:i + 2]) for i in (0, 2, 4)]
    if strict and (len(token) != HEX_LENGTH or None in channels):
        return None
    r, g, b = (0 if c is None else c for c in channels)
    return (r, g, b)


def parse_palette_line(
    line: str,
    line_number: int = 1,
    *,
    strict_channels: bool = False,
) -> PaletteEntry | MalformedPaletteLine | None:
    """
    Does: Parse one line of palette text.
    Returns: a PaletteEntry, None for blank/comment lines, or the
             MalformedPaletteLine diagnostic describing why it was skipped.
    """
    if not line.strip() or line.startswith(COMMENT_PREFIX):
        return None

    tokens = line.split(" ")
    if len(tokens) < MIN_TOKENS:
        return MalformedPaletteLine(line_number, line)

    rgb = _decode_color_token(tokens[1], strict_channels)
    if rgb is None:
        return MalformedPaletteLine(line_number, line, f"invalid color token {tokens[1]!r}")

    description = " ".join(tokens[2:]).strip()
    return PaletteEntry(rgb[0], rgb[1], rgb[2], description)


def parse_palette(
    text: str,
    *,
    strict_channels: bool = False,
    diagnostics: list[MalformedPaletteLine] | None = None,
) -> Palette:
    """
    Does: Parse every line of `text` in order, skipping comments and logging
          malformed lines.
    Returns: Palette in source order; duplicates kept.
    """
    entries: list[PaletteEntry] = []
    for line_number, raw in enumerate(text.split("\n"), start=1):
        result = parse_palette_line(
            raw.removesuffix("\r"), line_number, strict_channels=strict_channels
        )
        if result is None:
            continue
        if isinstance(result, MalformedPaletteLine):
            log.warning("Skipping malformed palette line: %s", result)
            if diagnostics is not None:
                diagnostics.append(result)
            continue
        entries.append(result)
    log.debug("Parsed %d palette entries", len(entries))
    return tuple(entries)
