"""Time-related utility functions."""

from datetime import UTC, date, datetime
from typing import Any

from icsinvite.exceptions import ParseError

ICS_DATETIME_FORMAT = '%Y%m%dT%H%M%SZ'


def parse_datetime(value: Any) -> datetime:
    """Interpret a temporal value as a second-precision datetime.
    
    Accepts datetime and date objects, ISO 8601 strings (a trailing ``Z`` is
    read as UTC) and POSIX timestamps. Aware values are converted to UTC,
    naive values are taken to already be UTC.
    
    Args:
        value: The value to interpret
        
    Returns:
        Aware UTC datetime with microseconds dropped
        
    Raises:
        ParseError: If the value cannot be interpreted
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            dt = datetime.fromtimestamp(value, tz=UTC)
        except (OverflowError, OSError, ValueError) as e:
            raise ParseError(f"Invalid timestamp: {value}", value) from e
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise ParseError("Empty date/time value", value)
        try:
            dt = datetime.fromisoformat(text)
        except ValueError as e:
            raise ParseError(f"Invalid date/time: {value}", value) from e
    else:
        raise ParseError(f"Unsupported date/time type: {type(value).__name__}", value)
    
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    else:
        dt = dt.astimezone(UTC)
    return dt.replace(microsecond=0)

def format_ics_datetime(dt: datetime) -> str:
    """Format a datetime as an iCalendar UTC timestamp, e.g. 20240115T093000Z."""
    return dt.strftime(ICS_DATETIME_FORMAT)
