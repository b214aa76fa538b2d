"""
sources.py
==========

Does: Produce palette text from the bundled resource, a user file, the CSS3
      named colors (webcolors) or the XKCD survey colors (matplotlib), and
      parse each one once into an immutable Palette.
Used By: cli, package-level helpers, tests.
Returns: Palette tuples; rendered palette text for generated sources.
"""

from __future__ import annotations

import os
import string
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

from color_describer.palette.parser import parse_palette
from color_describer.palette.types import Palette
from color_describer.search.errors import PaletteSourceError
from color_describer.utils.load_config import (
    PALETTE_SOURCES,
    Settings,
    current_settings,
    resolve_data_dir,
)
from color_describer.utils.log import debug

__all__ = [
    "PALETTE_SOURCES",
    "render_palette_text",
    "bundled_palette_path",
    "css3_palette_text",
    "xkcd_palette_text",
    "load_palette_file",
    "load_palette",
    "clear_palette_cache",
]
__docformat__ = "google"


# ── Rendering ────────────────────────────────────────────────────────────────
def render_palette_text(pairs: Iterable[tuple[str, str]]) -> str:
    """Does: Render (hex, description) pairs as `<i> <HEX6> <description>` lines."""
    lines = [
        f"{i} {hx.lstrip('#').upper()} {description}"
        for i, (hx, description) in enumerate(pairs, start=1)
    ]
    return "\n".join(lines) + "\n" if lines else ""


# ── Generated sources ────────────────────────────────────────────────────────
def css3_palette_text() -> str:
    """Does: CSS3 named colors sorted by name, e.g. `1 F0F8FF Aliceblue`."""
    import webcolors

    names = sorted(webcolors.names(webcolors.CSS3))
    return render_palette_text(
        (webcolors.name_to_hex(n, spec=webcolors.CSS3), n[:1].upper() + n[1:]) for n in names
    )


def xkcd_palette_text() -> str:
    """Does: XKCD survey colors sorted by name, e.g. `1 ACC2D9 Cloudy Blue`."""
    try:
        from matplotlib.colors import XKCD_COLORS  # lazy import
    except ImportError as e:
        raise PaletteSourceError("xkcd", f"matplotlib is unavailable: {e}") from e

    items = sorted((k.replace("xkcd:", ""), hx) for k, hx in XKCD_COLORS.items())
    return render_palette_text((hx, string.capwords(name)) for name, hx in items)


# ── Files ────────────────────────────────────────────────────────────────────
def _read_text(path: Path, encoding: str, source: str) -> str:
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise PaletteSourceError(source, str(e)) from e


def bundled_palette_path(settings: Settings | None = None) -> Path:
    """Does: Locate the bundled palette inside the resolved data directory."""
    settings = settings or current_settings()
    return resolve_data_dir() / settings.palette_file


def load_palette_file(
    path: str | os.PathLike[str],
    *,
    encoding: str = "utf-8",
    strict_channels: bool = False,
) -> Palette:
    """Does: Read and parse a palette text file. Not cached."""
    p = Path(path)
    palette = parse_palette(_read_text(p, encoding, str(p)), strict_channels=strict_channels)
    debug(f"loaded {len(palette)} entries from {p}", topic="palette")
    return palette


@lru_cache(maxsize=None)
def _load_bundled(path: Path, encoding: str, strict_channels: bool) -> Palette:
    palette = parse_palette(_read_text(path, encoding, "bundled"), strict_channels=strict_channels)
    debug(f"loaded {len(palette)} entries from {path}", topic="palette")
    return palette


@lru_cache(maxsize=None)
def _load_generated(source: str, strict_channels: bool) -> Palette:
    text = css3_palette_text() if source == "css3" else xkcd_palette_text()
    palette = parse_palette(text, strict_channels=strict_channels)
    debug(f"loaded {len(palette)} entries from source {source!r}", topic="palette")
    return palette


def load_palette(source: str = "bundled", *, strict_channels: bool = False) -> Palette:
    """
    Does: Build the named palette once and hand back the same immutable tuple
          on later calls. The bundled palette is cached per resolved file path,
          so pointing the data dir or settings elsewhere loads the new file.
    Raises: PaletteSourceError for unknown sources or unreadable resources.
    """
    if source == "bundled":
        settings = current_settings()
        return _load_bundled(
            bundled_palette_path(settings), settings.palette_encoding, strict_channels
        )
    if source in ("css3", "xkcd"):
        return _load_generated(source, strict_channels)
    raise PaletteSourceError(
        source, f"unknown source; expected one of {', '.join(PALETTE_SOURCES)}"
    )


def clear_palette_cache() -> None:
    """Drop every cached palette (tests, hot reload)."""
    _load_bundled.cache_clear()
    _load_generated.cache_clear()
