"""Core module - exports core components (for internal use)"""

from incredifont.core.glyphs import GLYPHS, SUPPORTED_CHARACTERS, lookup, lookup_row
from incredifont.core.renderer import render, compose_rows, colorize_row, block_color

__all__ = [
    "GLYPHS",
    "SUPPORTED_CHARACTERS",
    "lookup",
    "lookup_row",
    "render",
    "compose_rows",
    "colorize_row",
    "block_color",
]
