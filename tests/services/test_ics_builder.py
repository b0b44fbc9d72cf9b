"""Tests for ICS rendering."""

from dataclasses import replace

import pytest
from icalendar import Calendar

from icsinvite.models.event import EventRecord
from icsinvite.services.calendar.builders.ics_builder import IcsBuilder


EXPECTED_LINES = [
    "BEGIN:VCALENDAR",
    "VERSION:2.0",
    "PRODID:-//icsinvite//Calendar Invite//EN",
    "CALSCALE:GREGORIAN",
    "BEGIN:VEVENT",
    "UID:event-1@example.com",
    "DTSTART:20240115T093000Z",
    "DTEND:20240115T103000Z",
    "DTSTAMP:20240115T093000Z",
    'ORGANIZER;CN="Olga":mailto:olga@example.com',
    "ATTENDEE;PARTSTAT=NEEDS-ACTION;RSVP=TRUE;CN=Alice;",
    "X-NUM-GUESTS=0:mailto:a@x.com",
    "DESCRIPTION:Quarterly review",
    "LAST-MODIFIED:20240115T093000Z",
    "LOCATION:Room 4",
    "SUMMARY:Planning",
    "SEQUENCE:0",
    "TRANSP:OPAQUE",
    "END:VEVENT",
    "END:VCALENDAR",
]


def test_full_render(valid_record):
    """Every line appears in the fixed order, CRLF terminated."""
    assert valid_record.get_data() == "\r\n".join(EXPECTED_LINES) + "\r\n"

def test_single_event_block(valid_record):
    data = valid_record.get_data()
    assert data.count("BEGIN:VEVENT") == 1
    assert data.count("END:VEVENT") == 1

def test_date_lines(valid_record):
    lines = valid_record.get_data().splitlines()
    assert "DTSTART:20240115T093000Z" in lines
    assert "DTEND:20240115T103000Z" in lines

def test_stamp_reuses_start():
    record = EventRecord({
        "summary": "x",
        "start": "2030-06-01T12:00:00Z",
        "end": "2030-06-01T13:00:00Z",
    })
    lines = record.get_data().splitlines()
    assert "DTSTAMP:20300601T120000Z" in lines
    assert "LAST-MODIFIED:20300601T120000Z" in lines

def test_aware_times_converted_to_utc():
    record = EventRecord({
        "summary": "x",
        "start": "2024-01-15T10:30:00+01:00",
        "end": "2024-01-15T11:30:00+01:00",
    })
    assert "DTSTART:20240115T093000Z" in record.get_data().splitlines()

def test_optional_lines_omitted():
    """No organiser or attendee lines; empty text fields still present."""
    record = EventRecord({
        "summary": "Solo",
        "start": "2024-01-15T09:30:00Z",
        "end": "2024-01-15T10:30:00Z",
    })
    lines = record.get_data().splitlines()
    assert not any(line.startswith("ORGANIZER") for line in lines)
    assert not any(line.startswith("ATTENDEE") for line in lines)
    assert "DESCRIPTION:" in lines
    assert "LOCATION:" in lines

def test_attendees_in_stored_order(valid_record):
    valid_record.add_attendee("b@x.com", "Bob")
    lines = valid_record.get_data().splitlines()
    start = lines.index("ATTENDEE;PARTSTAT=NEEDS-ACTION;RSVP=TRUE;CN=Alice;")
    assert lines[start:start + 4] == [
        "ATTENDEE;PARTSTAT=NEEDS-ACTION;RSVP=TRUE;CN=Alice;",
        "X-NUM-GUESTS=0:mailto:a@x.com",
        "ATTENDEE;PARTSTAT=NEEDS-ACTION;RSVP=TRUE;CN=Bob;",
        "X-NUM-GUESTS=0:mailto:b@x.com",
    ]

def test_organiser_quotes_replaced(valid_record):
    valid_record.set_organiser('Olga "The Boss"', "olga@example.com")
    assert "ORGANIZER;CN=\"Olga 'The Boss'\":mailto:olga@example.com" in valid_record.get_data().splitlines()

def test_attendee_name_with_delimiters_is_quoted(valid_record):
    """Delimiters in a name cannot add parameters or end the parameter list."""
    valid_record.add_attendee("b@x.com", "Smith;ROLE=CHAIR:evil")
    valid_record.add_attendee("c@x.com", "Doe, Jane")
    lines = valid_record.get_data().splitlines()
    assert 'ATTENDEE;PARTSTAT=NEEDS-ACTION;RSVP=TRUE;CN="Smith;ROLE=CHAIR:evil";' in lines
    assert 'ATTENDEE;PARTSTAT=NEEDS-ACTION;RSVP=TRUE;CN="Doe, Jane";' in lines
    assert "ATTENDEE;PARTSTAT=NEEDS-ACTION;RSVP=TRUE;CN=Alice;" in lines

def test_text_escaped(valid_record):
    valid_record.set_summary("Lunch, then talk; bring \\ notes\nand slides")
    lines = valid_record.get_data().split("\r\n")
    assert "SUMMARY:Lunch\\, then talk\\; bring \\\\ notes\\nand slides" in lines

def test_text_unescaped_when_disabled(valid_record):
    record = EventRecord(valid_record.to_dict(), settings=replace(valid_record.settings, escape_text=False))
    record.set_location("Room 1, Floor 2")
    assert "LOCATION:Room 1, Floor 2" in record.get_data().splitlines()

def test_escaped_output_reads_back():
    """A conforming reader recovers the original free text."""
    record = EventRecord({
        "summary": "Review; part 1, draft",
        "description": "Bring laptop\nand charger",
        "location": "HQ, Room 2",
        "start": "2024-01-15T09:30:00Z",
        "end": "2024-01-15T10:30:00Z",
    })
    event = Calendar.from_ical(record.get_data()).walk("VEVENT")[0]
    assert str(event["SUMMARY"]) == "Review; part 1, draft"
    assert str(event["DESCRIPTION"]) == "Bring laptop\nand charger"
    assert str(event["LOCATION"]) == "HQ, Room 2"

def test_lf_terminator(valid_record):
    record = EventRecord(valid_record.to_dict(), settings=replace(valid_record.settings, line_terminator="\n"))
    data = record.get_data()
    assert "\r" not in data
    assert data.endswith("END:VCALENDAR\n")

def test_custom_prodid(valid_record):
    builder = IcsBuilder(replace(valid_record.settings, prodid="-//Example//Invites//EN"))
    assert builder.build_lines(valid_record)[2] == "PRODID:-//Example//Invites//EN"

def test_builder_needs_times():
    with pytest.raises(ValueError):
        IcsBuilder().build_lines(EventRecord({"summary": "x"}))
