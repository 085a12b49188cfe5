"""Utils module - exports utilities and exceptions"""

from incredifont.utils.exceptions import (
    IncredifontException,
    InvalidConfig,
    ConfigFileError,
    ClipboardError,
)
from incredifont.utils.logger import get_logger

__all__ = [
    # Exceptions
    "IncredifontException",
    "InvalidConfig",
    "ConfigFileError",
    "ClipboardError",
    # Logger
    "get_logger",
]
