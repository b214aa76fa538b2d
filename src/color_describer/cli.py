# src/color_describer/cli.py
import argparse
import logging
import sys

from .palette import PALETTE_SOURCES, load_palette, load_palette_file
from .search import EmptyPalette, HexColorError, PaletteSourceError
from .search import nearest_description, parse_hex_color
from .utils import ConfigFileNotFound, ConfigParseError, ConfigTypeError, DataDirNotFound
from .utils import current_settings, enable_all_topics

EXIT_OK = 0
EXIT_INVALID_COLOR = 1
EXIT_USAGE = 2  # argparse's own exit status for usage errors
EXIT_PALETTE = 3

_CONFIG_ERRORS = (DataDirNotFound, ConfigFileNotFound, ConfigParseError, ConfigTypeError)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="color-describe",
        description="Describe a 6-digit hex color by its nearest colorblind-friendly palette name.",
    )
    parser.add_argument("hex_color", metavar="HEX", help="Color to describe (e.g. d3c2a5)")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--palette", metavar="PATH", help="Palette text file to search instead")
    group.add_argument(
        "--source",
        choices=PALETTE_SOURCES,
        default=None,
        help="Built-in reference palette (default from settings.json)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Skip palette lines whose color token is not six hex digits",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv=None) -> int:
    """CLI: print the description of the palette color nearest to HEX."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.debug:
        enable_all_topics()

    try:
        target = parse_hex_color(args.hex_color)
        settings = current_settings()
        strict = settings.strict_channels if args.strict is None else args.strict
        if args.palette:
            palette = load_palette_file(
                args.palette, encoding=settings.palette_encoding, strict_channels=strict
            )
        else:
            palette = load_palette(args.source or settings.palette_source, strict_channels=strict)
        description = nearest_description(palette, target)
    except HexColorError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID_COLOR
    except (EmptyPalette, PaletteSourceError, *_CONFIG_ERRORS) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_PALETTE

    print(description)
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
