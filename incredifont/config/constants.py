"""
Configuration constants for incredifont

These constants define:
- Glyph geometry (block unit, glyph height)
- Rendering defaults (line length, separator)
- Color scheme (base color, rainbow palette, split point)
"""

# ============================================================================
# GLYPH GEOMETRY
# ============================================================================

BLOCK = "██"  # One block: the unit of color assignment
BLOCK_CHAR = "█"
GLYPH_HEIGHT = 4  # Every glyph has exactly this many rows

# ============================================================================
# RENDERING DEFAULTS
# ============================================================================

DEFAULT_LINE_LENGTH = 80  # Width of the rule drawn above a subtitle
SEPARATOR_CHAR = "━"

# ============================================================================
# COLOR SCHEME
# ============================================================================

ANSI_RESET = "\x1b[0m"
ANSI_TRUECOLOR_PREFIX = "\x1b[38;2;"

# Light gray fill for blocks before the rainbow zone
BASE_COLOR = (230, 230, 230)

# Rainbow zone, indigo to red
RAINBOW_COLORS = (
    (63, 81, 181),    # 3F51B5
    (33, 150, 243),   # 2196F3
    (3, 169, 244),    # 03A9F4
    (0, 150, 136),    # 009688
    (76, 175, 80),    # 4CAF50
    (205, 220, 57),   # CDDC39
    (255, 193, 7),    # FFC107
    (255, 152, 0),    # FF9800
    (255, 87, 34),    # FF5722
    (244, 67, 54),    # F44336
)

# Fraction of a row's blocks (from the left) drawn in BASE_COLOR
RAINBOW_START = 0.8

# ============================================================================
# CLI
# ============================================================================

FRAMEWORK_VERSION = "v0.1.0"
PROMPT = "Enter text for banner: "

# Shown after a successful clipboard copy
CLIPBOARD_MARKER = (
    "\x1b[38;2;76;175;80m██\x1b[0m"
    "\x1b[38;2;205;220;57m██\x1b[0m"
    "\x1b[38;2;255;193;7m██\x1b[0m COPIED TO CLIPBOARD"
)
