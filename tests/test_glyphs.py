"""Tests for the glyph table"""

import re
import string

import pytest

from incredifont.config import constants
from incredifont.core import glyphs


@pytest.mark.parametrize("character", sorted(glyphs.GLYPHS))
def test_every_glyph_has_four_rows(character):
    assert len(glyphs.lookup(character)) == constants.GLYPH_HEIGHT


@pytest.mark.parametrize("character", sorted(glyphs.GLYPHS))
def test_rows_contain_only_whole_blocks(character):
    for row in glyphs.lookup(character):
        assert set(row) <= {constants.BLOCK_CHAR, " "}
        for run in re.findall(f"{constants.BLOCK_CHAR}+", row):
            assert len(run) % 2 == 0


def test_alphabet_covers_letters_digits_and_space():
    expected = set(string.ascii_uppercase) | set(string.digits) | {" "}
    assert expected <= glyphs.SUPPORTED_CHARACTERS


def test_lowercase_is_not_a_key():
    assert not glyphs.is_supported("a")


def test_unknown_character_falls_back_to_last_entry():
    assert glyphs.FALLBACK_CHARACTER == ">"
    assert glyphs.lookup("é") == glyphs.GLYPHS[">"]
    assert glyphs.lookup("\t") == glyphs.lookup(">")


def test_known_glyph():
    assert glyphs.lookup("T") == (
        "████████ ",
        "   ██    ",
        "   ██    ",
        "   ██    ",
    )


def test_table_is_read_only():
    with pytest.raises(TypeError):
        glyphs.GLYPHS["A"] = ("", "", "", "")


def test_lookup_row():
    assert glyphs.lookup_row("E", 2) == "████   "
    with pytest.raises(IndexError):
        glyphs.lookup_row("E", constants.GLYPH_HEIGHT)
