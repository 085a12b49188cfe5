"""
Structured logger for incredifont

Provides:
- Consistent log formatting
- Section headers for readability
- Banner text context for messages
"""

import logging
import threading
from typing import Any, Dict, Optional
from contextlib import contextmanager


class BannerLogger:
    """Structured logger with banner-specific helpers"""
    
    def __init__(self, name: str, level: int = logging.WARNING):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        # Text context is per thread
        self._local = threading.local()
        
        # Clear existing handlers to avoid duplicates
        self.logger.handlers = []
        
        # Format: timestamp [level] [component] - message
        formatter = logging.Formatter(
            '%(asctime)s.%(msecs)03d [%(levelname)s] [%(name)s] - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)
    
    def set_level(self, level: int):
        """Change the level of the underlying logger"""
        self.logger.setLevel(level)
    
    @contextmanager
    def text_context(self, text: str):
        """Context manager prefixing messages with the banner text"""
        old_context = self.current_text
        self._local.text = text
        try:
            yield
        finally:
            self._local.text = old_context
    
    @property
    def current_text(self) -> Optional[str]:
        """Banner text context of the calling thread"""
        return getattr(self._local, "text", None)
    
    def _format_message(self, message: str) -> str:
        text = self.current_text
        if text:
            return f"[Text: {text}] {message}"
        return message
    
    def info(self, message: str):
        """Log info level message"""
        self.logger.info(self._format_message(message))
    
    def warning(self, message: str):
        """Log warning level message"""
        self.logger.warning(self._format_message(message))
    
    def error(self, message: str, exc_info: bool = False):
        """Log error level message"""
        self.logger.error(self._format_message(message), exc_info=exc_info)
    
    def debug(self, message: str):
        """Log debug level message"""
        self.logger.debug(self._format_message(message))
    
    def log_section(self, title: str):
        """Log a major section header"""
        self.logger.info(f"[SECTION] {title}")
    
    def log_options(self, options: Dict[str, Any]):
        """Log banner options in structured format"""
        self.logger.debug(self._format_message(f"Options: {options}"))


_loggers: Dict[str, BannerLogger] = {}


def get_logger(name: str, level: int = logging.WARNING) -> BannerLogger:
    """
    Get logger instance
    
    Loggers are cached per name so repeated calls do not stack handlers.
    
    Args:
        name: Logger name (typically __name__ from calling module)
        level: Initial logging level, used only on first creation
    
    Returns:
        BannerLogger instance
    """
    if name not in _loggers:
        _loggers[name] = BannerLogger(name, level)
    return _loggers[name]


def set_level(level: int):
    """Set the level of every logger handed out by get_logger"""
    for banner_logger in _loggers.values():
        banner_logger.set_level(level)
