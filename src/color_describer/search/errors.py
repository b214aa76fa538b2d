"""
errors.py
=========

Does: Define the error taxonomy for hex-color validation, palette parsing
      diagnostics, palette sources and empty-palette searches.
Used By: hex_color, nearest, palette.parser, palette.sources, cli.
Returns: Exception classes only (no side effects).
"""

from __future__ import annotations

__all__ = [
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


class ColorDescriberError(Exception):
    """Root of every error raised by color_describer."""


# ── Hex input validation ─────────────────────────────────────────────────────
class HexColorError(ColorDescriberError, ValueError):
    """Raise when a user-supplied hex color string fails validation."""

    reason = "invalid hex color"

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"{self.reason}: {value!r}")


class InvalidLength(HexColorError):
    reason = "hex color must be exactly 6 characters"


class InvalidRedComponent(HexColorError):
    reason = "invalid red component"


class InvalidGreenComponent(HexColorError):
    reason = "invalid green component"


class InvalidBlueComponent(HexColorError):
    reason = "invalid blue component"


# ── Palette ──────────────────────────────────────────────────────────────────
class MalformedPaletteLine(ColorDescriberError, ValueError):
    """Diagnostic for a skipped palette line; logged and collected, not raised."""

    def __init__(self, line_number: int, line: str, reason: str = "fewer than 3 tokens"):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {line!r}")


class EmptyPalette(ColorDescriberError, LookupError):
    """Raise when a nearest-color search is given a palette with no entries."""

    def __init__(self, message: str = "palette has no entries; cannot search"):
        super().__init__(message)


class PaletteSourceError(ColorDescriberError, OSError):
    """Raise when a palette resource cannot be read or produced."""

    def __init__(self, source: str, detail: str):
        self.source = source
        self.detail = detail
        super().__init__(f"cannot load palette {source!r}: {detail}")
