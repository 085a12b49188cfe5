"""Tests for the renderer"""

import re

import pytest

from incredifont import new_banner, render
from incredifont.config import constants
from incredifont.core.renderer import (
    block_color,
    colorize_row,
    compose_rows,
    rgb_to_ansi,
)

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def test_plain_test_banner():
    output = new_banner("TEST").finalize().render()
    assert output == (
        "████████ ██████ ██████ ████████ \n"
        "   ██    ██     ██        ██    \n"
        "   ██    ████       ██    ██    \n"
        "   ██    ██████ ██████    ██    \n"
    )


def test_plain_render_has_no_escapes():
    output = new_banner("Hello, World!").with_subtitle("x").finalize().render()
    assert "\x1b[" not in output


def test_colored_render_has_truecolor_escape():
    output = new_banner("TEST").with_colors().finalize().render()
    assert constants.ANSI_TRUECOLOR_PREFIX in output


def test_colored_single_short_glyph_still_colored():
    output = new_banner("i").with_colors().finalize().render()
    assert rgb_to_ansi(constants.BASE_COLOR) in output or any(
        rgb_to_ansi(color) in output for color in constants.RAINBOW_COLORS
    )


def test_stripping_colors_gives_plain_render():
    colored = new_banner("Rainbow 42").with_colors().finalize().render()
    plain = new_banner("Rainbow 42").finalize().render()
    assert ANSI_PATTERN.sub("", colored) == plain


def test_render_is_deterministic():
    banner = new_banner("Same Input").with_colors().with_subtitle("again").finalize()
    assert render(banner) == render(banner)
    assert banner.render() == render(banner)


def test_case_invariance():
    lower = new_banner("abc").with_colors().finalize()
    upper = new_banner("ABC").with_colors().finalize()
    assert lower.render() == upper.render()


def test_subtitle_is_last_line_after_rule():
    output = new_banner("A").with_subtitle("hello").finalize().render()
    lines = [line for line in output.split("\n") if line]
    assert lines[-1] == "hello"
    assert lines[-2] == constants.SEPARATOR_CHAR * constants.DEFAULT_LINE_LENGTH
    assert len(lines) == constants.GLYPH_HEIGHT + 2


def test_rule_uses_line_length():
    output = new_banner("A").with_subtitle("s").with_line_length(12).finalize().render()
    assert constants.SEPARATOR_CHAR * 12 + "\n" in output
    assert constants.SEPARATOR_CHAR * 13 not in output


def test_no_subtitle_means_no_rule():
    output = new_banner("A").with_line_length(12).finalize().render()
    assert constants.SEPARATOR_CHAR not in output
    assert output.count("\n") == constants.GLYPH_HEIGHT


def test_subtitle_is_not_colored():
    output = new_banner("A").with_colors().with_subtitle("plain").finalize().render()
    assert output.endswith("\nplain\n")


def test_compose_rows_concatenates_in_order():
    rows = compose_rows("!.")
    assert rows == ["██      ", "██      ", "    ██  ", "██  ██  "]


def test_colorize_row_keeps_spaces():
    row = colorize_row("██  ██", 0)
    assert ANSI_PATTERN.sub("", row) == "██  ██"
    assert row.count(constants.ANSI_RESET) == 2


def test_colorize_row_without_blocks():
    assert colorize_row("   ", 1) == "   "


def test_rgb_to_ansi():
    assert rgb_to_ansi((1, 2, 3)) == "\x1b[38;2;1;2;3m██\x1b[0m"


@pytest.mark.parametrize("index", range(8))
def test_leading_blocks_get_base_color(index):
    assert block_color(0, index, 10) == constants.BASE_COLOR


def test_rainbow_zone_starts_at_first_palette_color():
    assert block_color(0, 80, 100) == constants.RAINBOW_COLORS[0]


def test_last_block_of_long_row_is_last_palette_color():
    assert block_color(0, 99, 100) == constants.RAINBOW_COLORS[-1]


def test_rainbow_zone_is_monotonic():
    colors = [block_color(0, i, 200) for i in range(160, 200)]
    indices = [constants.RAINBOW_COLORS.index(c) for c in colors]
    assert indices == sorted(indices)
    assert set(indices) == set(range(len(constants.RAINBOW_COLORS)))


@pytest.mark.parametrize("row_index", range(constants.GLYPH_HEIGHT))
def test_row_index_does_not_move_split(row_index):
    assert block_color(row_index, 8, 10) == block_color(0, 8, 10)
    assert block_color(row_index, 7, 10) == constants.BASE_COLOR


def test_rightmost_blocks_of_colored_row_are_rainbow():
    rows = compose_rows("TEST")
    block_count = rows[0].count(constants.BLOCK)
    colored = colorize_row(rows[0], 0)
    last = block_color(0, block_count - 1, block_count)
    assert last in constants.RAINBOW_COLORS
    assert colored.rstrip().endswith(rgb_to_ansi(last))
