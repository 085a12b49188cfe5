"""
Custom exceptions for incredifont

Exception hierarchy:
    IncredifontException (base)
    ├── InvalidConfig
    ├── ConfigFileError
    └── ClipboardError
"""


class IncredifontException(Exception):
    """Base exception for incredifont"""
    pass


class InvalidConfig(IncredifontException):
    """
    Raised when a banner configuration cannot be finalized
    
    Examples:
    - Banner text is empty
    - Banner text contains a character with no glyph
    """
    
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
    
    def __str__(self) -> str:
        return f"Invalid banner configuration: {self.reason}"


class ConfigFileError(IncredifontException):
    """
    Raised when a YAML option file cannot be used
    
    Examples:
    - File does not exist
    - File is not valid YAML or not a mapping
    - Unknown option or option of the wrong type
    """
    pass


class ClipboardError(IncredifontException):
    """
    Raised when the rendered banner cannot be copied
    
    Examples:
    - No clipboard mechanism available (headless session)
    - Clipboard backend rejected the content
    """
    pass
