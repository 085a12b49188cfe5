"""
Clipboard sink

Best-effort copy of rendered output. A failed copy is logged and reported
through the return value; it never affects the rendered banner.
"""

import pyperclip

from incredifont.utils.exceptions import ClipboardError
from incredifont.utils.logger import get_logger

logger = get_logger(__name__)


def set_clipboard(text: str):
    """
    Copy text to the system clipboard

    Raises:
        ClipboardError: If no clipboard mechanism is available or the copy
            fails
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(str(exc)) from exc


def copy_to_clipboard(text: str) -> bool:
    """
    Copy text to the system clipboard, reporting failure instead of raising

    Returns:
        True if the copy succeeded
    """
    try:
        set_clipboard(text)
    except ClipboardError as e:
        logger.warning(f"Failed to copy to clipboard: {e}")
        return False
    logger.debug(f"Copied {len(text)} characters to clipboard")
    return True
