"""Error codes for the calendar invite application."""

from enum import Enum

class ErrorCode(Enum):
    """Enumeration of all possible error codes."""
    # Input Errors
    PARSE_FAILED = "parse_failed"
    VALIDATION_FAILED = "validation_failed"
    
    # Output Errors
    WRITE_FAILED = "write_failed"
    HEADERS_SENT = "headers_sent"
    
    # Configuration Errors
    CONFIG_INVALID = "config_invalid"
