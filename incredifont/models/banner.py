"""
Data models for banner configuration

BannerBuilder accumulates options for a banner. Banner is the validated,
immutable result of BannerBuilder.finalize() and is what gets rendered.
"""

from dataclasses import dataclass, asdict
from typing import Optional

from incredifont.config import constants
from incredifont.core import glyphs
from incredifont.utils.exceptions import InvalidConfig


@dataclass
class BannerBuilder:
    """
    Unvalidated banner configuration

    Every with_* method mutates the builder and returns it so calls can be
    chained. None of them can fail; all checks happen in finalize().

    Example:
        >>> banner = (
        ...     new_banner("hello")
        ...     .with_colors()
        ...     .with_subtitle("world")
        ...     .finalize()
        ... )
    """

    text: str
    colors: bool = False
    subtitle: Optional[str] = None
    line_length: Optional[int] = None

    def with_colors(self) -> "BannerBuilder":
        """Enable the dim-to-rainbow color scheme"""
        self.colors = True
        return self

    def with_subtitle(self, subtitle: str) -> "BannerBuilder":
        """Set a subtitle, printed verbatim under the banner"""
        self.subtitle = subtitle
        return self

    def with_line_length(self, length: int) -> "BannerBuilder":
        """Set the width of the rule drawn above the subtitle"""
        self.line_length = length
        return self

    def finalize(self) -> "Banner":
        """
        Validate the configuration and build a Banner

        Returns:
            Banner with uppercased text and defaults filled in

        Raises:
            InvalidConfig: If the text is empty or has a character without
                a glyph
        """
        if not self.text:
            raise InvalidConfig("Text cannot be empty")

        for character in self.text:
            upper = character.upper()
            if len(upper) != 1 or not glyphs.is_supported(upper):
                raise InvalidConfig(f"Unsupported character: {character!r}")

        return Banner(
            text=self.text.upper(),
            colors=self.colors,
            subtitle=self.subtitle,
            line_length=(
                self.line_length
                if self.line_length is not None
                else constants.DEFAULT_LINE_LENGTH
            ),
        )


@dataclass(frozen=True)
class Banner:
    """
    Validated banner

    Only produced by BannerBuilder.finalize(). Rendering reads the fields
    and never changes them, so one Banner can be rendered any number of
    times from any thread.
    """

    text: str
    colors: bool
    subtitle: Optional[str]
    line_length: int

    @staticmethod
    def new(text: str) -> BannerBuilder:
        """Start configuring a banner for the given text"""
        return BannerBuilder(text)

    def render(self) -> str:
        """Render the banner to a multi-line string"""
        from incredifont.core.renderer import render
        return render(self)

    def to_dict(self) -> dict:
        """Fields as a plain dict, for logging"""
        return asdict(self)


def new_banner(text: str) -> BannerBuilder:
    """Entry point: start configuring a banner for the given text"""
    return BannerBuilder(text)
