"""Centralized error definitions for the calendar invite application."""

from dataclasses import dataclass
from typing import Any

from icsinvite.error_codes import ErrorCode


@dataclass(eq=False)
class IcsInviteError(Exception):
    """Base exception for all calendar invite errors."""
    message: str
    code: ErrorCode
    details: dict[str, Any] | None = None
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Code: {self.code.value}, Details: {self.details})"
        return f"{self.message} (Code: {self.code.value})"

class ParseError(IcsInviteError):
    """Input could not be interpreted as a date/time."""
    def __init__(self, message: str, value: Any = None):
        super().__init__(message, ErrorCode.PARSE_FAILED, {"value": repr(value)})
        self.value = value

class InvalidEventError(IcsInviteError):
    """Event failed validation and cannot be rendered."""
    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors), ErrorCode.VALIDATION_FAILED, {"errors": list(errors)})
        self.errors = list(errors)

class HeadersAlreadySentError(IcsInviteError):
    """Response output already started before a download was requested."""
    def __init__(self, message: str = "Headers have already been sent"):
        super().__init__(message, ErrorCode.HEADERS_SENT)

class WriteFailure(IcsInviteError):
    """Calendar data could not be written to its destination."""
    def __init__(self, message: str, file_path: str):
        super().__init__(message, ErrorCode.WRITE_FAILED, {"file_path": file_path})
        self.file_path = file_path

class ConfigError(IcsInviteError):
    """Configuration error."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.CONFIG_INVALID, details)
