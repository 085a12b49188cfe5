"""
ASCII art banner for incredifont itself

Rendered with the library's own glyphs, so it always matches the current
glyph table and color scheme.
"""

from incredifont.config import constants
from incredifont.models.banner import new_banner

BANNER_TEXT = "INCREDIFONT"
BANNER_SUBTITLE = f"Terminal banners in block glyphs - {constants.FRAMEWORK_VERSION}"


def get_banner(colors: bool = True) -> str:
    """
    Get the incredifont ASCII art banner.
    
    Args:
        colors: Apply the rainbow color scheme
    
    Returns:
        str: The rendered banner string
    """
    builder = new_banner(BANNER_TEXT).with_subtitle(BANNER_SUBTITLE)
    if colors:
        builder.with_colors()
    return builder.finalize().render()


def print_banner(colors: bool = True) -> None:
    """
    Print the incredifont ASCII art banner to stdout.
    
    Shown by `incredifont --version`.
    """
    print(get_banner(colors))
