"""Configuration type definitions."""

from typing import TypedDict


class CalendarConfig(TypedDict):
    """Calendar rendering configuration."""
    prodid: str
    default_filename: str
    line_terminator: str  # 'crlf' or 'lf'
    escape_text: bool
    uid_domain: str

class LoggingConfig(TypedDict):
    """Logging configuration."""
    level: str
    file: str | None

class GlobalConfig(TypedDict):
    """Global configuration structure."""
    calendar: CalendarConfig
    logging: LoggingConfig
