"""
Single-event calendar invitations in iCalendar format.
"""

__version__ = '0.1.0'

from .exceptions import (
    ConfigError,
    HeadersAlreadySentError,
    IcsInviteError,
    InvalidEventError,
    ParseError,
    WriteFailure,
)
from .models import EventRecord, Participant
from .services.calendar.delivery import FlaskOutput, Output, download

__all__ = [
    'ConfigError',
    'EventRecord',
    'FlaskOutput',
    'HeadersAlreadySentError',
    'IcsInviteError',
    'InvalidEventError',
    'Output',
    'ParseError',
    'Participant',
    'WriteFailure',
    'download'
]
