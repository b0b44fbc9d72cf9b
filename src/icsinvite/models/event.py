"""
Event model for single-event calendar invites.
"""

import json
import os
import uuid
from collections.abc import Iterable, Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

from icsinvite.config.settings import IcsSettings
from icsinvite.exceptions import InvalidEventError, WriteFailure
from icsinvite.models.participant import Participant
from icsinvite.services.calendar.builders.ics_builder import IcsBuilder
from icsinvite.services.calendar.delivery import Output, download
from icsinvite.services.calendar.writer import CalendarWriter
from icsinvite.utils.logging_utils import get_logger
from icsinvite.utils.time_utils import parse_datetime

logger = get_logger(__name__)


class EventRecord:
    """One calendar event and everything needed to render it as ICS.

    Properties are set through the ``set_*`` methods (or ``set_property``),
    which normalise values the same way whether they arrive at construction
    or later. Names without a dedicated setter are kept in ``extra`` and
    ignored when rendering.
    """

    PROPERTIES = (
        'type', 'uid', 'start', 'end', 'organiser',
        'attendees', 'description', 'location', 'summary',
    )

    def __init__(self, properties: Mapping[str, Any] | None = None, settings: IcsSettings | None = None):
        """Initialize record, optionally from a property mapping.

        Args:
            properties: Initial property values; an empty ``uid`` counts as absent
            settings: Rendering settings, built-in defaults if omitted

        Raises:
            ParseError: If a start or end value cannot be parsed
        """
        self.settings = settings or IcsSettings()
        self.extra: dict[str, Any] = {}
        self.last_write_error: WriteFailure | None = None

        self._uid = ''
        self._type: str | None = None
        self._start: datetime | None = None
        self._end: datetime | None = None
        self._organiser: Participant | None = None
        self._attendees: list[Participant] = []
        self._description: str | None = None
        self._location: str | None = None
        self._summary: str | None = None
        self._errors: list[str] = []

        for name, value in (properties or {}).items():
            if name == 'uid' and not value:
                continue
            self.set_property(name, value)

        if not self._uid:
            self._uid = self._generate_uid()
            logger.debug(f"Generated event UID {self._uid}")

    def _generate_uid(self) -> str:
        return f"{uuid.uuid4().hex}.{os.getpid()}@{self.settings.uid_domain}"

    # Generic access

    def set_property(self, name: str, value: Any) -> "EventRecord":
        """Set a property by name, using its typed setter when there is one."""
        if name == 'organiser':
            if value is None:
                self._organiser = None
                return self
            participant = Participant.from_value(value)
            return self.set_organiser(participant.name, participant.email)
        if name in self.PROPERTIES:
            return getattr(self, f'set_{name}')(value)
        self.extra[name] = value
        return self

    def get_property(self, name: str) -> Any:
        """Retrieve a property value by name, None if unset."""
        if name in self.PROPERTIES:
            return getattr(self, f'get_{name}')()
        return self.extra.get(name)

    # Identity and metadata

    def set_uid(self, value: str) -> "EventRecord":
        """Overwrite the event UID.

        Raises:
            ValueError: If the value is empty
        """
        if not value:
            raise ValueError("UID must not be empty")
        self._uid = str(value)
        return self

    def get_uid(self) -> str:
        return self._uid

    def set_type(self, value: str | None) -> "EventRecord":
        self._type = value
        return self

    def get_type(self) -> str | None:
        return self._type

    # Times

    def set_start(self, value: Any) -> "EventRecord":
        """Set the start time; None clears it.

        Raises:
            ParseError: If the value is not a valid date/time
        """
        self._start = None if value is None else parse_datetime(value)
        return self

    def get_start(self) -> datetime | None:
        return self._start

    def set_end(self, value: Any) -> "EventRecord":
        """Set the end time; None clears it.

        Raises:
            ParseError: If the value is not a valid date/time
        """
        self._end = None if value is None else parse_datetime(value)
        return self

    def get_end(self) -> datetime | None:
        return self._end

    # Participants

    def set_organiser(self, name: str, email: str) -> "EventRecord":
        self._organiser = Participant.create(email, name)
        return self

    def get_organiser(self) -> Participant | None:
        return self._organiser

    def add_attendee(self, email: str, name: str = '') -> "EventRecord":
        """Append an attendee unless one with the same email already exists.

        Emails compare case-sensitively; an existing entry keeps its name.
        """
        attendee = Participant.create(email, name)
        for existing in self._attendees:
            if existing.email == attendee.email:
                return self
        self._attendees.append(attendee)
        return self

    def set_attendees(self, attendees: Iterable[Any] | str | Mapping[str, Any] | None) -> "EventRecord":
        """Replace the attendee list, adding each entry via add_attendee.

        A single email string, mapping or Participant counts as one attendee.

        Raises:
            ValueError: If the value is neither a participant nor an iterable of them
        """
        if attendees is None:
            attendees = []
        elif isinstance(attendees, (str, Mapping, Participant)):
            attendees = [attendees]
        elif not isinstance(attendees, Iterable):
            raise ValueError(f"Attendees must be a list, got {type(attendees).__name__}")

        self._attendees = []
        for item in attendees:
            participant = Participant.from_value(item)
            self.add_attendee(participant.email, participant.name)
        return self

    def get_attendees(self) -> list[Participant]:
        return list(self._attendees)

    # Free text

    def set_description(self, value: str | None) -> "EventRecord":
        self._description = value
        return self

    def get_description(self) -> str | None:
        return self._description

    def set_location(self, value: str | None) -> "EventRecord":
        self._location = value
        return self

    def get_location(self) -> str | None:
        return self._location

    def set_summary(self, value: str | None) -> "EventRecord":
        self._summary = value
        return self

    def get_summary(self) -> str | None:
        return self._summary

    # Validation and output

    @property
    def errors(self) -> list[str]:
        """Validation errors from the most recent is_valid() call."""
        return list(self._errors)

    def is_valid(self) -> bool:
        """Check whether the record can be rendered, refreshing ``errors``."""
        errors = []
        if not self._summary:
            errors.append("Summary is required")
        if self._start is None:
            errors.append("Date start is required")
        if self._end is None:
            errors.append("Date end is required")
        if self._start is not None and self._end is not None and self._end < self._start:
            errors.append("Date end must be after date start.")
        self._errors = errors
        return not errors

    def get_data(self) -> str:
        """Render the record as ICS text.

        Raises:
            InvalidEventError: If the record does not validate
        """
        if not self.is_valid():
            raise InvalidEventError(self._errors)
        return IcsBuilder(self.settings).render(self)

    def save(self, path: str | Path) -> bool:
        """Write the rendered record to a file.

        Returns:
            True on success; False if the file could not be written, with
            the reason in ``last_write_error``

        Raises:
            InvalidEventError: If the record does not validate
        """
        data = self.get_data()
        writer = CalendarWriter()
        written = writer.write(data, path)
        self.last_write_error = writer.last_error
        return written

    def download(self, output: Output, filename: str = '') -> "EventRecord":
        """Send the rendered record to an output as a file download.

        Raises:
            HeadersAlreadySentError: If the output already started a response
            InvalidEventError: If the record does not validate
        """
        download(self, output, filename)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return all properties as plain, JSON-compatible values."""
        data = dict(self.extra)
        data.update({
            'type': self._type,
            'uid': self._uid,
            'start': self._start.isoformat() if self._start else None,
            'end': self._end.isoformat() if self._end else None,
            'organiser': self._organiser.to_dict() if self._organiser else None,
            'attendees': [attendee.to_dict() for attendee in self._attendees],
            'description': self._description,
            'location': self._location,
            'summary': self._summary,
        })
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)

    def __repr__(self) -> str:
        return f"EventRecord(uid={self._uid!r}, summary={self._summary!r})"
