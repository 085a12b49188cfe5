"""
Command-line entry point

Usage:
    incredifont "HELLO WORLD" --subtitle "This is a subtitle"
    incredifont                      # prompts for the text
    incredifont IMPOSSIBLE --config banner.yml --no-clipboard
"""

import argparse
import logging
import sys
from typing import List, Optional

from incredifont.config import constants
from incredifont.config.loader import load_options, apply_options
from incredifont.models.banner import new_banner
from incredifont.utils.banner import print_banner
from incredifont.utils.clipboard import copy_to_clipboard
from incredifont.utils.exceptions import ConfigFileError, InvalidConfig
from incredifont.utils.logger import get_logger, set_level

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser for the incredifont command
    
    Returns:
        argparse.ArgumentParser with all banner options
    """
    parser = argparse.ArgumentParser(
        prog="incredifont",
        description="Render text as a block-glyph terminal banner.",
    )
    parser.add_argument("text", nargs="?", help="Text to render (prompted for when omitted)")
    parser.add_argument("--subtitle", help="Subtitle printed under a rule")
    parser.add_argument(
        "--line-length",
        type=int,
        default=None,
        help=f"Width of the rule above the subtitle (default: {constants.DEFAULT_LINE_LENGTH})",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--config", help="YAML file with colors/subtitle/line_length options")
    parser.add_argument("--no-clipboard", action="store_true", help="Do not copy the result")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="store_true", help="Show the incredifont banner and version")
    return parser


def read_text(prompt: str = constants.PROMPT) -> str:
    """
    Prompt for the banner text on stdin
    
    Returns:
        The trimmed line, or an empty string when stdin is closed
    """
    try:
        return input(prompt).strip()
    except EOFError:
        logger.warning("No input on stdin")
        return ""


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the incredifont command
    
    Args:
        argv: Command-line arguments, without the program name.
            Defaults to sys.argv[1:]
    
    Returns:
        int: Exit status. 1 for invalid text or an unusable option file,
        0 otherwise (including a failed clipboard copy)
    """
    args = build_parser().parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)
    logger.log_section(f"INCREDIFONT {constants.FRAMEWORK_VERSION}")

    if args.version:
        print_banner(colors=not args.no_color)
        return 0

    text = args.text if args.text is not None else read_text()

    builder = new_banner(text)
    if not args.no_color:
        builder.with_colors()

    if args.config:
        try:
            options = load_options(args.config)
        except ConfigFileError as e:
            logger.error(str(e))
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1
        apply_options(builder, options)
        # --no-color wins over the file
        if args.no_color:
            builder.colors = False

    if args.subtitle is not None:
        builder.with_subtitle(args.subtitle)
    if args.line_length is not None:
        builder.with_line_length(args.line_length)

    try:
        banner = builder.finalize()
    except InvalidConfig as e:
        logger.debug(f"Rejected banner text {text!r}")
        print(f"Error creating banner: {e}", file=sys.stderr)
        return 1

    logger.log_options(banner.to_dict())
    rendered = banner.render()
    print(f"\n{rendered}")

    if not args.no_clipboard and copy_to_clipboard(rendered):
        print(constants.CLIPBOARD_MARKER)

    return 0


if __name__ == "__main__":
    sys.exit(main())
