"""
Incredifont

Block-glyph terminal banners with an optional dim-to-rainbow color scheme.

Usage:
    Basic:
        from incredifont import new_banner
        
        banner = (
            new_banner("HELLO WORLD")
            .with_colors()
            .with_subtitle("This is a subtitle")
            .with_line_length(80)
            .finalize()
        )
        print(banner.render())
    
    Advanced:
        from incredifont import lookup, render, InvalidConfig

Public API:
    - new_banner / Banner.new: Start configuring a banner
    - BannerBuilder: Unvalidated configuration
    - Banner: Validated, immutable banner
    - render: Render a Banner to a string
    - lookup: Glyph rows for a character
    - All exception classes for error handling
"""

__version__ = "0.1.0"

# Models
from incredifont.models.banner import Banner, BannerBuilder, new_banner

# Core
from incredifont.core.glyphs import GLYPHS, SUPPORTED_CHARACTERS, lookup
from incredifont.core.renderer import render

# Exceptions (for error handling)
from incredifont.utils.exceptions import (
    IncredifontException,
    InvalidConfig,
    ConfigFileError,
    ClipboardError,
)

# Configuration (for advanced usage)
from incredifont.config import constants

# Define public API
__all__ = [
    # Entry point
    "new_banner",
    
    # Models
    "Banner",
    "BannerBuilder",
    
    # Core
    "GLYPHS",
    "SUPPORTED_CHARACTERS",
    "lookup",
    "render",
    
    # Exceptions
    "IncredifontException",
    "InvalidConfig",
    "ConfigFileError",
    "ClipboardError",
    
    # Configuration
    "constants",
]
