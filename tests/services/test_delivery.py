"""Tests for download delivery."""

import pytest
from flask import Response

from icsinvite.exceptions import HeadersAlreadySentError, InvalidEventError
from icsinvite.models.event import EventRecord
from icsinvite.services.calendar.delivery import FlaskOutput, download


class RecordingOutput:
    """Output that remembers every call."""

    def __init__(self, headers_sent=False):
        self.headers_sent = headers_sent
        self.headers = []
        self.body = None

    def set_header(self, name, value):
        self.headers.append((name, value))
        return self

    def set_body(self, payload):
        self.body = payload


def test_download_headers_in_order(valid_record):
    output = RecordingOutput()
    download(valid_record, output)
    payload = valid_record.get_data().encode("utf-8")
    assert output.headers == [
        ("Pragma", "public"),
        ("Expires", "0"),
        ("Cache-Control", "must-revalidate, post-check=0, pre-check=0"),
        ("Cache-Control", "public"),
        ("Content-Description", "File Transfer"),
        ("Content-Type", "text/calendar;charset=utf-8"),
        ("Content-Disposition", 'attachment; filename="invite.ics"'),
        ("Content-Transfer-Encoding", "binary"),
        ("Content-Length", str(len(payload))),
    ]
    assert output.body == payload

def test_download_custom_filename(valid_record):
    output = RecordingOutput()
    valid_record.download(output, "team.ics")
    assert ("Content-Disposition", 'attachment; filename="team.ics"') in output.headers

def test_content_length_counts_bytes(valid_record):
    valid_record.set_summary("Café")
    output = RecordingOutput()
    download(valid_record, output)
    assert dict(output.headers)["Content-Length"] == str(len(output.body))
    assert len(output.body) > len(valid_record.get_data())

def test_headers_already_sent(valid_record):
    output = RecordingOutput(headers_sent=True)
    with pytest.raises(HeadersAlreadySentError):
        download(valid_record, output)
    assert output.headers == []

def test_invalid_event_not_sent():
    output = RecordingOutput()
    with pytest.raises(InvalidEventError):
        download(EventRecord(), output)
    assert output.headers == []
    assert output.body is None

def test_flask_output(valid_record):
    output = FlaskOutput(Response())
    assert output.headers_sent is False
    download(valid_record, output, "meeting.ics")
    response = output.response
    assert output.headers_sent is True
    assert response.headers["Cache-Control"] == "public"
    assert response.headers["Content-Type"] == "text/calendar;charset=utf-8"
    assert response.headers["Content-Disposition"] == 'attachment; filename="meeting.ics"'
    assert response.get_data() == valid_record.get_data().encode("utf-8")
    with pytest.raises(HeadersAlreadySentError):
        download(valid_record, output)
