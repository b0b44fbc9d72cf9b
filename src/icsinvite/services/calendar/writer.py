"""
Calendar file writer.
"""

import os
import tempfile
from pathlib import Path

from icsinvite.exceptions import WriteFailure
from icsinvite.utils.logging_utils import LoggerMixin


def _target_mode(file_path: Path) -> int:
    """Permission bits for the written file: the existing file's, else 0o666 less the umask."""
    try:
        return file_path.stat().st_mode & 0o7777
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class CalendarWriter(LoggerMixin):
    """Writes rendered calendar text to disk, all or nothing."""
    
    def __init__(self) -> None:
        """Initialize writer."""
        super().__init__()
        self.last_error: WriteFailure | None = None
        self.set_log_context(service="calendar_writer")
    
    def write(self, data: str, file_path: str | Path) -> bool:
        """Write calendar data to file.
        
        The data goes to a temporary file next to the target which then
        replaces the target, so an existing file is either fully replaced
        or left as it was.
        
        Args:
            data: Rendered calendar text
            file_path: Destination path
            
        Returns:
            True if the file was written, False otherwise (see last_error)
        """
        self.last_error = None
        file_path = Path(file_path)
        payload = data.encode('utf-8')
        temp_path: str | None = None
        
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                dir=file_path.parent,
                prefix=f".{file_path.name}.",
                suffix=".tmp"
            )
            with os.fdopen(fd, 'wb') as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(temp_path, _target_mode(file_path))
            os.replace(temp_path, file_path)
            temp_path = None
        except OSError as e:
            self.last_error = WriteFailure(f"Failed to write calendar file: {e}", str(file_path))
            self.error("Failed to write calendar file", exc_info=e, file_path=file_path)
            return False
        finally:
            if temp_path is not None and os.path.exists(temp_path):
                os.unlink(temp_path)
        
        self.debug(f"Wrote {len(payload)} bytes to calendar file", file_path=file_path)
        self.info(f"Created calendar file: {file_path}")
        return True
