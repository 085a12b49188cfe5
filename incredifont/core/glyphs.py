"""
Glyph table

Maps every supported character to its 4-row block-art representation.
Rows are made of BLOCK units and spaces only, and are not padded to a
common width. Unknown characters resolve to the last entry of the table.
"""

from types import MappingProxyType
from typing import Tuple

from incredifont.config import constants

Glyph = Tuple[str, str, str, str]

_GLYPH_DEFINITIONS = {
    "A": (
        "██████   ",
        "██    ██ ",
        "████████ ",
        "██    ██ ",
    ),
    "B": (
        "██████   ",
        "██    ██ ",
        "██████   ",
        "████████ ",
    ),
    "C": (
        "  ████ ",
        "██     ",
        "██     ",
        "██████ ",
    ),
    "D": (
        "██████   ",
        "██    ██ ",
        "██    ██ ",
        "██████   ",
    ),
    "E": (
        "██████ ",
        "██     ",
        "████   ",
        "██████ ",
    ),
    "F": (
        "  ████ ",
        "██     ",
        "██████ ",
        "██     ",
    ),
    "G": (
        "  ████ ",
        "██     ",
        "██  ██ ",
        "██████ ",
    ),
    "H": (
        "██    ██ ",
        "██    ██ ",
        "████████ ",
        "██    ██ ",
    ),
    "I": (
        "██ ",
        "██ ",
        "██ ",
        "██ ",
    ),
    "J": (
        "    ██ ",
        "    ██ ",
        "██  ██ ",
        "██████ ",
    ),
    "K": (
        "██    ██ ",
        "██  ██   ",
        "████     ",
        "██    ██ ",
    ),
    "L": (
        "██     ",
        "██     ",
        "██     ",
        "██████ ",
    ),
    "M": (
        "████████   ",
        "██  ██  ██ ",
        "██  ██  ██ ",
        "██  ██  ██ ",
    ),
    "N": (
        "██████   ",
        "██    ██ ",
        "██    ██ ",
        "██    ██ ",
    ),
    "O": (
        "██████   ",
        "██    ██ ",
        "██    ██ ",
        "  ██████ ",
    ),
    "P": (
        "  ██████ ",
        "██    ██ ",
        "██████   ",
        "██       ",
    ),
    "Q": (
        "██████   ",
        "██    ██ ",
        "██  ████ ",
        "████  ██ ",
    ),
    "R": (
        "██████   ",
        "██    ██ ",
        "██████   ",
        "██    ██ ",
    ),
    "S": (
        "██████ ",
        "██     ",
        "    ██ ",
        "██████ ",
    ),
    "T": (
        "████████ ",
        "   ██    ",
        "   ██    ",
        "   ██    ",
    ),
    "U": (
        "██    ██ ",
        "██    ██ ",
        "██    ██ ",
        "  ██████ ",
    ),
    "V": (
        "██    ██ ",
        "██    ██ ",
        "██  ██   ",
        "████     ",
    ),
    "W": (
        "██  ██  ██ ",
        "██  ██  ██ ",
        "██  ██  ██ ",
        "  ████████ ",
    ),
    "X": (
        "██    ██ ",
        "  ██     ",
        "    ██   ",
        "██    ██ ",
    ),
    "Y": (
        "██    ██ ",
        "████████ ",
        "   ██    ",
        "   ██    ",
    ),
    "Z": (
        "████  ██ ",
        "    ██   ",
        "  ██     ",
        "████████ ",
    ),
    " ": (
        "   ",
        "   ",
        "   ",
        "   ",
    ),
    "0": (
        "  ████   ",
        "██    ██ ",
        "██    ██ ",
        "  ████   ",
    ),
    "1": (
        "  ██   ",
        "████   ",
        "  ██   ",
        "██████ ",
    ),
    "2": (
        "██████ ",
        "    ██ ",
        "██     ",
        "██████ ",
    ),
    "3": (
        "██████ ",
        "    ██ ",
        "  ████ ",
        "██████ ",
    ),
    "4": (
        "██  ██ ",
        "██  ██ ",
        "██████ ",
        "    ██ ",
    ),
    "5": (
        "██████ ",
        "██     ",
        "    ██ ",
        "██████ ",
    ),
    "6": (
        "██     ",
        "██████ ",
        "██  ██ ",
        "██████ ",
    ),
    "7": (
        "██████ ",
        "    ██ ",
        "  ██   ",
        "██     ",
    ),
    "8": (
        "██████ ",
        "██  ██ ",
        "██  ██ ",
        "██████ ",
    ),
    "9": (
        "██████ ",
        "██  ██ ",
        "██████ ",
        "    ██ ",
    ),
    ".": (
        "    ",
        "    ",
        "██  ",
        "██  ",
    ),
    ",": (
        "    ",
        "    ",
        "██  ",
        "██  ",
    ),
    "!": (
        "██  ",
        "██  ",
        "    ",
        "██  ",
    ),
    "?": (
        "██████ ",
        "    ██ ",
        "      ",
        "  ██   ",
    ),
    "-": (
        "      ",
        "██████",
        "      ",
        "      ",
    ),
    "+": (
        "  ██  ",
        "██████",
        "  ██  ",
        "      ",
    ),
    "=": (
        "      ",
        "██████",
        "██████",
        "      ",
    ),
    "@": (
        "██████  ",
        "██  ████",
        "██    ██",
        "  ██████",
    ),
    "#": (
        " ██  ██ ",
        "████████",
        "████████",
        " ██  ██ ",
    ),
    "$": (
        "██    ",
        "██████",
        "██████",
        "    ██",
    ),
    "%": (
        "██  ██",
        "  ██  ",
        "██    ",
        "██  ██",
    ),
    "&": (
        "████  ",
        "██  ██",
        "  ██  ",
        "██  ██",
    ),
    "*": (
        "██  ██",
        "  ██  ",
        "██  ██",
        "      ",
    ),
    "(": (
        "  ██",
        "██  ",
        "██  ",
        "  ██",
    ),
    ")": (
        "██  ",
        "  ██",
        "  ██",
        "██  ",
    ),
    "[": (
        "████",
        "██  ",
        "██  ",
        "████",
    ),
    "]": (
        "████",
        "  ██",
        "  ██",
        "████",
    ),
    "{": (
        "  ██",
        "██  ",
        "██  ",
        "  ██",
    ),
    "}": (
        "██  ",
        "  ██",
        "  ██",
        "██  ",
    ),
    "|": (
        "██ ",
        "██ ",
        "██ ",
        "██ ",
    ),
    "/": (
        "      ██",
        "    ██  ",
        "  ██    ",
        "██      ",
    ),
    "\\": (
        "██      ",
        "  ██    ",
        "    ██  ",
        "      ██",
    ),
    "_": (
        "      ",
        "      ",
        "      ",
        "██████",
    ),
    "^": (
        "  ██  ",
        "██  ██",
        "      ",
        "      ",
    ),
    "~": (
        "        ",
        "██  ██  ",
        "  ██  ██",
        "        ",
    ),
    "'": (
        "██",
        "██",
        "  ",
        "  ",
    ),
    "\"": (
        "██ ██",
        "██ ██",
        "     ",
        "     ",
    ),
    ":": (
        "  ",
        "██",
        "  ",
        "██",
    ),
    ";": (
        "  ",
        "██",
        "  ",
        "██",
    ),
    "<": (
        "  ██",
        "██  ",
        "██  ",
        "  ██",
    ),
    ">": (
        "██  ",
        "  ██",
        "  ██",
        "██  ",
    ),
}

GLYPHS = MappingProxyType(_GLYPH_DEFINITIONS)
SUPPORTED_CHARACTERS = frozenset(GLYPHS)
FALLBACK_CHARACTER = list(GLYPHS)[-1]


def is_supported(character: str) -> bool:
    """Check if the character has its own glyph"""
    return character in GLYPHS


def lookup(character: str) -> Glyph:
    """
    Get the rows for a character
    
    Args:
        character: Single character, already uppercased
    
    Returns:
        Tuple of GLYPH_HEIGHT rows. Characters without a glyph get the
        fallback entry instead of an error.
    """
    return GLYPHS.get(character, GLYPHS[FALLBACK_CHARACTER])


def lookup_row(character: str, row: int) -> str:
    """Get a single row of a character's glyph"""
    if not 0 <= row < constants.GLYPH_HEIGHT:
        raise IndexError(f"Glyph row out of range: {row}")
    return lookup(character)[row]
