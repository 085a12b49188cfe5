"""
Banner renderer

Turns a validated Banner into text:
1. Composes the GLYPH_HEIGHT rows from the glyph table
2. Optionally colors each block (dim base color, then a rainbow at the right)
3. Appends a rule and the subtitle when one is set

Rendering is a pure function of the Banner and cannot fail.
"""

from typing import List, Tuple, TYPE_CHECKING

from incredifont.config import constants
from incredifont.core import glyphs
from incredifont.utils.logger import get_logger

if TYPE_CHECKING:
    from incredifont.models.banner import Banner

logger = get_logger(__name__)

RGB = Tuple[int, int, int]


def rgb_to_ansi(rgb: RGB) -> str:
    """Wrap one block in a truecolor foreground escape and a reset"""
    r, g, b = rgb
    return f"{constants.ANSI_TRUECOLOR_PREFIX}{r};{g};{b}m{constants.BLOCK}{constants.ANSI_RESET}"


def block_color(row_index: int, block_index: int, block_count: int) -> RGB:
    """
    Color of one block within a row

    Blocks left of RAINBOW_START (as a fraction of the row's blocks) get
    BASE_COLOR. The rest sample RAINBOW_COLORS by their position inside the
    rainbow zone, clamped to the palette. row_index is accepted so every
    row is colored by the same rule; it does not move the split.

    Args:
        row_index: Glyph row, 0 to GLYPH_HEIGHT - 1
        block_index: Position of the block in the row, from 0
        block_count: Number of blocks in the row

    Returns:
        (r, g, b) tuple
    """
    progress = block_index / block_count
    if progress < constants.RAINBOW_START:
        return constants.BASE_COLOR

    palette = constants.RAINBOW_COLORS
    zone_progress = (progress - constants.RAINBOW_START) / (1.0 - constants.RAINBOW_START)
    color_idx = int(zone_progress * len(palette))
    return palette[max(0, min(color_idx, len(palette) - 1))]


def compose_rows(text: str) -> List[str]:
    """Concatenate each character's glyph rows into full-width rows"""
    characters = list(text)
    return [
        "".join(glyphs.lookup(c)[row] for c in characters)
        for row in range(constants.GLYPH_HEIGHT)
    ]


def colorize_row(row: str, row_index: int) -> str:
    """Replace every block in a row with its colored version"""
    block_count = row.count(constants.BLOCK)
    if block_count == 0:
        return row

    parts = []
    block_index = 0
    pos = 0
    while pos < len(row):
        if row.startswith(constants.BLOCK, pos):
            parts.append(rgb_to_ansi(block_color(row_index, block_index, block_count)))
            block_index += 1
            pos += len(constants.BLOCK)
        else:
            parts.append(row[pos])
            pos += 1
    return "".join(parts)


def render(banner: "Banner") -> str:
    """
    Render a banner

    Args:
        banner: Validated Banner

    Returns:
        GLYPH_HEIGHT newline-terminated rows, followed by a rule and the
        subtitle (each newline-terminated) when a subtitle is set
    """
    with logger.text_context(banner.text):
        rows = compose_rows(banner.text)
        logger.debug(f"Composed {len(rows)} rows, width {len(rows[0])}")

        if banner.colors:
            rows = [colorize_row(row, idx) for idx, row in enumerate(rows)]

        lines = list(rows)
        if banner.subtitle is not None:
            lines.append(constants.SEPARATOR_CHAR * banner.line_length)
            lines.append(banner.subtitle)

        return "".join(f"{line}\n" for line in lines)
