"""
ICS text builder for single-event calendar invites.
"""

from typing import TYPE_CHECKING

from icalendar import vText
from icalendar.parser import dquote

from icsinvite.config.settings import IcsSettings
from icsinvite.models.participant import Participant
from icsinvite.utils.logging_utils import LoggerMixin
from icsinvite.utils.time_utils import format_ics_datetime

if TYPE_CHECKING:
    from icsinvite.models.event import EventRecord


class IcsBuilder(LoggerMixin):
    """Builder for the VCALENDAR text of one event.
    
    Rendering does not validate; callers check the record first.
    """
    
    def __init__(self, settings: IcsSettings | None = None):
        """Initialize builder."""
        super().__init__()
        self.settings = settings or IcsSettings()
        self.set_log_context(service="ics_builder")
    
    def build_lines(self, record: "EventRecord") -> list[str]:
        """Build the ordered list of content lines for the record."""
        start = record.get_start()
        end = record.get_end()
        if start is None or end is None:
            raise ValueError("Cannot render an event without start and end")
        
        start_str = format_ics_datetime(start)
        lines = [
            'BEGIN:VCALENDAR',
            'VERSION:2.0',
            f'PRODID:{self.settings.prodid}',
            'CALSCALE:GREGORIAN',
            'BEGIN:VEVENT',
            f'UID:{record.get_uid()}',
            f'DTSTART:{start_str}',
            f'DTEND:{format_ics_datetime(end)}',
            f'DTSTAMP:{start_str}',
        ]
        
        organiser = record.get_organiser()
        if organiser is not None:
            lines.append(self._organiser_line(organiser))
        
        for attendee in record.get_attendees():
            lines.extend(self._attendee_lines(attendee))
        
        lines.extend([
            f'DESCRIPTION:{self._text(record.get_description())}',
            f'LAST-MODIFIED:{start_str}',
            f'LOCATION:{self._text(record.get_location())}',
            f'SUMMARY:{self._text(record.get_summary())}',
            'SEQUENCE:0',
            'TRANSP:OPAQUE',
            'END:VEVENT',
            'END:VCALENDAR',
        ])
        return lines
    
    def render(self, record: "EventRecord") -> str:
        """Render the record as ICS text, one terminator after every line."""
        lines = self.build_lines(record)
        self.debug("Rendered calendar", uid=record.get_uid(), lines=len(lines))
        terminator = self.settings.line_terminator
        return terminator.join(lines) + terminator
    
    def _text(self, value: str | None) -> str:
        """Escape a TEXT value unless escaping is disabled."""
        if not value:
            return ''
        if not self.settings.escape_text:
            return value
        return vText(value).to_ical().decode('utf-8')
    
    @staticmethod
    def _param(value: str) -> str:
        """Strip characters a parameter value cannot hold, even quoted."""
        return value.replace('"', "'").replace('\r', ' ').replace('\n', ' ')
    
    def _organiser_line(self, organiser: Participant) -> str:
        return f'ORGANIZER;CN="{self._param(organiser.name)}":mailto:{organiser.email}'
    
    def _attendee_lines(self, attendee: Participant) -> list[str]:
        return [
            f'ATTENDEE;PARTSTAT=NEEDS-ACTION;RSVP=TRUE;CN={dquote(self._param(attendee.name))};',
            f'X-NUM-GUESTS=0:mailto:{attendee.email}',
        ]
