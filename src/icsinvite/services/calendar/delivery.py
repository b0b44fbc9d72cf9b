"""
Delivery of rendered invites as file downloads.
"""

from typing import TYPE_CHECKING
from typing import Protocol

from flask import Response

from icsinvite.exceptions import HeadersAlreadySentError
from icsinvite.utils.logging_utils import get_logger
from icsinvite.utils.logging_utils import log_execution

if TYPE_CHECKING:
    from icsinvite.models.event import EventRecord

logger = get_logger(__name__)

CONTENT_TYPE = 'text/calendar;charset=utf-8'


class Output(Protocol):
    """Response sink a download is written to."""
    
    @property
    def headers_sent(self) -> bool:
        ...
    
    def set_header(self, name: str, value: str) -> "Output":
        ...
    
    def set_body(self, payload: bytes) -> None:
        ...

class FlaskOutput:
    """Output backed by a Flask response object.
    
    Setting a header replaces any earlier value of the same name.
    """
    
    def __init__(self, response: Response | None = None):
        self.response = response if response is not None else Response()
        self._body_set = False
    
    @property
    def headers_sent(self) -> bool:
        return self._body_set
    
    def set_header(self, name: str, value: str) -> "FlaskOutput":
        self.response.headers[name] = value
        return self
    
    def set_body(self, payload: bytes) -> None:
        self.response.set_data(payload)
        self._body_set = True

@log_execution(level='DEBUG')
def download(record: "EventRecord", output: Output, filename: str = '') -> Output:
    """Send the rendered record to an output as a file download.
    
    Args:
        record: Event to render
        output: Response sink receiving headers and body
        filename: Attachment file name, the configured default if empty
        
    Returns:
        The output, for chaining
        
    Raises:
        HeadersAlreadySentError: If the output already started a response
        InvalidEventError: If the record does not validate
    """
    if output.headers_sent:
        raise HeadersAlreadySentError()
    
    payload = record.get_data().encode('utf-8')
    filename = filename or record.settings.default_filename
    
    (output
        .set_header('Pragma', 'public')
        .set_header('Expires', '0')
        .set_header('Cache-Control', 'must-revalidate, post-check=0, pre-check=0')
        .set_header('Cache-Control', 'public')
        .set_header('Content-Description', 'File Transfer')
        .set_header('Content-Type', CONTENT_TYPE)
        .set_header('Content-Disposition', f'attachment; filename="{filename}"')
        .set_header('Content-Transfer-Encoding', 'binary')
        .set_header('Content-Length', str(len(payload))))
    output.set_body(payload)
    
    logger.info(f"Sent calendar download {filename} ({len(payload)} bytes)")
    return output
