# tests/test_search_nearest.py
"""
nearest-color search tests
==========================

Does: Validate Euclidean distance, stable-first-wins tie-breaking, the
      empty-palette guard and end-to-end hex → description lookups.
"""

from __future__ import annotations

import itertools

import pytest

from color_describer.palette import PaletteEntry, parse_palette
from color_describer.search import errors
from color_describer.search import nearest as nn


SAMPLE = parse_palette(
    "1 000000 Black\n"
    "2 FFFFFF White\n"
    "3 FF0000 Red\n"
    "4 00FF00 Green\n"
    "5 0000FF Blue\n"
    "6 808080 Gray\n"
    "7 FF0000 Second Red\n"
)


# ──────────────────────────────────────────────────────────────────────────────
# Distance
# ──────────────────────────────────────────────────────────────────────────────
def test_rgb_distance_zero_and_max():
    assert nn.rgb_distance((0, 0, 0), (0, 0, 0)) == 0.0
    expected = (3 * (255 ** 2)) ** 0.5
    assert nn.rgb_distance((0, 0, 0), (255, 255, 255)) == pytest.approx(expected, rel=1e-9)


def test_rgb_distance_symmetric():
    a, b = (12, 200, 7), (90, 3, 255)
    assert nn.rgb_distance(a, b) == nn.rgb_distance(b, a)


# ──────────────────────────────────────────────────────────────────────────────
# Concrete scenarios
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("query", ["d3c2a5", "D3C2A5", " D3c2A5 "])
def test_single_entry_palette_case_insensitive(query):
    palette = parse_palette("1 D3C2A5 Slightly Dark Orangish White\n")
    assert nn.describe_color(palette, query) == "Slightly Dark Orangish White"


def test_invalid_queries_raise_before_search():
    palette = parse_palette("1 D3C2A5 Tan\n")
    with pytest.raises(errors.InvalidRedComponent):
        nn.describe_color(palette, "zzzzzz")
    with pytest.raises(errors.InvalidLength):
        nn.describe_color(palette, "ABCDE")


def test_length_error_regardless_of_palette():
    with pytest.raises(errors.InvalidLength):
        nn.describe_color((), "ABC")


def test_nearest_picks_closest():
    assert nn.describe_color(SAMPLE, "F01010") == "Red"
    assert nn.describe_color(SAMPLE, "7a8088") == "Gray"
    assert nn.describe_color(SAMPLE, "0a0a30") == "Black"


# ──────────────────────────────────────────────────────────────────────────────
# Ties: earliest entry wins
# ──────────────────────────────────────────────────────────────────────────────
def test_exact_duplicate_first_wins():
    assert nn.describe_color(SAMPLE, "ff0000") == "Red"


@pytest.mark.parametrize(
    "text,expect",
    [
        ("1 100000 Left\n2 000010 Right\n", "Left"),
        ("1 000010 Right\n2 100000 Left\n", "Right"),
    ],
)
def test_equidistant_entries_first_listed_wins(text, expect):
    assert nn.describe_color(parse_palette(text), "000000") == expect


def test_find_nearest_entry_returns_the_entry_object():
    entry = nn.find_nearest_entry(SAMPLE, (255, 0, 0))
    assert entry is SAMPLE[2]


def test_exact_triple_returns_zero_distance_earliest():
    for entry in SAMPLE:
        found = nn.find_nearest_entry(SAMPLE, entry.rgb)
        assert nn.rgb_distance(found.rgb, entry.rgb) == 0.0
        assert found is next(e for e in SAMPLE if e.rgb == entry.rgb)


def test_result_always_comes_from_palette():
    descriptions = {e.description for e in SAMPLE}
    for r, g, b in itertools.product((0, 0x37, 0x80, 0xC9, 0xFF), repeat=3):
        assert nn.describe_color(SAMPLE, f"{r:02x}{g:02x}{b:02x}") in descriptions


def test_search_does_not_mutate_palette():
    before = tuple(SAMPLE)
    nn.describe_color(SAMPLE, "123456")
    assert SAMPLE == before


# ──────────────────────────────────────────────────────────────────────────────
# Empty palette guard
# ──────────────────────────────────────────────────────────────────────────────
def test_empty_palette_raises():
    with pytest.raises(errors.EmptyPalette):
        nn.find_nearest_entry((), (0, 0, 0))


def test_empty_palette_after_parsing_only_comments():
    with pytest.raises(LookupError):
        nn.describe_color(parse_palette("# nothing\n\n"), "000000")


def test_accepts_any_sequence():
    entries = [PaletteEntry(1, 1, 1, "a"), PaletteEntry(200, 200, 200, "b")]
    assert nn.nearest_description(entries, (210, 190, 205)) == "b"
