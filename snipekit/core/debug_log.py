"""
Debug log writer.

Path: snipekit/core/debug_log.py

Append-only per-program (or per-auction) log file, written through a
logging.FileHandler on a private, unregistered logger per instance, so
the package loggers and other open logs are unaffected. Each record looks like:

    <blank line>
    <blank line>
    *** 2026-10-17 14:03:52.123456 message text
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO, Union


logger = logging.getLogger(__name__)

DEBUG_LOGGER_NAME = "snipekit.debug"

# Handler added by configure_logging
_installed_handler: Optional[logging.Handler] = None


class DebugRecordFormatter(logging.Formatter):
    """Prefix each record with a blank-line separator and timestamp."""

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S.%f")
        return f"\n\n*** {stamp} {record.getMessage()}"


class DebugLog:
    """
    Append-only debug log.

    Usage:
        log = DebugLog(debug=True)
        log.open("snipekit", auction="123456789", log_dir="~/.snipekit/logs")
        log.write("Bid placed")
        log.print_log(sys.stderr, "Cannot reach server")
        log.close()
    """

    def __init__(self, debug: bool = False):
        self.debug = debug
        self.path: Optional[Path] = None
        self._handler: Optional[logging.FileHandler] = None
        # Unregistered, so each instance writes only to its own file
        self._logger = logging.Logger(f"{DEBUG_LOGGER_NAME}.{id(self)}", logging.DEBUG)
        self._logger.propagate = False

    @property
    def is_open(self) -> bool:
        return self._handler is not None

    def open(
        self,
        progname: str,
        auction: Optional[str] = None,
        log_dir: Union[str, Path, None] = None,
    ) -> bool:
        """
        Open (or reopen) the log file in append mode.

        A file that cannot be opened is reported on stderr and leaves
        the log closed; it is not fatal.

        Args:
            progname: Program name, used as the file name prefix.
            auction: Optional auction id, giving progname.auction.log.
            log_dir: Optional directory for the file.

        Returns:
            True if the log is open.
        """
        if auction is None:
            filename = f"{progname}.log"
        else:
            filename = f"{progname}.{auction}.log"

        path = Path(filename)
        if log_dir:
            path = Path(log_dir).expanduser() / filename

        self.close()

        try:
            handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        except OSError as e:
            print(f"Unable to open log file {path}: {e.strerror or e}", file=sys.stderr)
            return False

        handler.terminator = ""
        handler.setFormatter(DebugRecordFormatter())
        self._logger.addHandler(handler)
        self._handler = handler
        self.path = path
        logger.debug("Debug log opened: %s", path)
        return True

    def close(self):
        """Close the log file if open."""
        if self._handler is None:
            return
        self._logger.removeHandler(self._handler)
        self._handler.close()
        self._handler = None
        self.path = None

    def write(self, message: str):
        """Write a timestamped record. Does nothing if the log is closed."""
        if self._handler is None:
            return
        self._logger.debug(message)
        self._handler.flush()

    def print_log(self, stream: TextIO, message: str):
        """Write to stream, and also to the log file when debugging."""
        if self.debug:
            self.write(message)
        stream.write(message)
        stream.flush()

    def log_char(self, char: Optional[str]):
        """Append raw text without a record header. None flushes."""
        if self._handler is None:
            return
        if char is None:
            self._handler.flush()
            return
        self._handler.stream.write(char)

    def __enter__(self) -> "DebugLog":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def configure_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
):
    """
    Configure logging for the snipekit package.

    Call this at application startup to enable logging. Calling it again
    replaces the handler installed by the previous call.

    Args:
        level: Logging level (default: INFO).
        format_string: Optional custom format string.
        handler: Optional custom handler (default: StreamHandler).

    Example:
        from snipekit.core.debug_log import configure_logging
        configure_logging(level=logging.DEBUG)
    """
    global _installed_handler

    if format_string is None:
        format_string = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(format_string))

    package_logger = logging.getLogger("snipekit")

    # Replace the handler from a previous call
    if _installed_handler is not None:
        package_logger.removeHandler(_installed_handler)
        _installed_handler.close()

    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    _installed_handler = handler
