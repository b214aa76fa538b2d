"""
hex_color.py
============

Does: Validate a user-supplied 6-digit hex color and decode it into an RGB
      triple, failing fast on the first bad slot.
Used By: nearest.describe_color, cli.
Returns: RGB tuple[int, int, int] or raises a HexColorError subclass.
"""

from __future__ import annotations

from color_describer.palette.types import HEX_LENGTH, RGB, decode_channel
from color_describer.search.errors import (
    HexColorError,
    InvalidBlueComponent,
    InvalidGreenComponent,
    InvalidLength,
    InvalidRedComponent,
)

__all__ = ["decode_channel", "parse_hex_color"]
__docformat__ = "google"

# (slice start, error raised when that slot fails), in validation order
_CHANNEL_SLOTS: tuple[tuple[int, type[HexColorError]], ...] = (
    (0, InvalidRedComponent),
    (2, InvalidGreenComponent),
    (4, InvalidBlueComponent),
)


def parse_hex_color(value: str) -> RGB:
    """Does: Trim, check length, then decode red, green and blue in that order."""
    text = value.strip()
    if len(text) != HEX_LENGTH:
        raise InvalidLength(value)
    channels = []
    for start, error in _CHANNEL_SLOTS:
        channel = decode_channel(text[start:start + 2])
        if channel is None:
            raise error(value)
        channels.append(channel)
    r, g, b = channels
    return (r, g, b)
