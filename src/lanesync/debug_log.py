"""Debug logging with in-app viewer support.

Captures both ring-buffer ``log`` calls and Python ``logging`` records so the
TUI and the CLI can dump the recent history of drag and sync activity.
"""

from __future__ import annotations

import contextlib
import logging
import time
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any

from lanesync.limits import MAX_LOG_MESSAGE_LENGTH


class LogSource(Enum):
    """Source of the log entry."""

    TEXTUAL = "TEXTUAL"
    LOGGING = "LOGGING"


@dataclass(slots=True)
class LogEntry:
    """A captured log entry."""

    group: str  # Level name (DEBUG, INFO, WARNING, ERROR)
    message: str
    timestamp: float
    source: LogSource


MAX_LOG_LINES = 2000
log_buffer: deque[LogEntry] = deque(maxlen=MAX_LOG_LINES)


class LaneSyncLogger:
    """Logger that records into the ring buffer and forwards to Textual devtools."""

    def __call__(self, *args: object, **kwargs: Any) -> None:
        """Log at INFO level (default)."""
        self.info(*args, **kwargs)

    def _log(self, level: str, *args: object, **kwargs: Any) -> None:
        output = " ".join(str(arg) for arg in args)
        if kwargs:
            key_values = " ".join(f"{key}={value!r}" for key, value in kwargs.items())
            output = f"{output} {key_values}" if output else key_values

        if len(output) > MAX_LOG_MESSAGE_LENGTH:
            output = output[:MAX_LOG_MESSAGE_LENGTH] + "... [truncated]"

        log_buffer.append(
            LogEntry(
                group=level,
                message=output,
                timestamp=time.time(),
                source=LogSource.TEXTUAL,
            )
        )

        # Devtools logging is best effort; there may be no running app.
        with contextlib.suppress(Exception):
            from textual import log as textual_log

            textual_log(output)

    def debug(self, *args: object, **kwargs: Any) -> None:
        """Log at DEBUG level."""
        self._log("DEBUG", *args, **kwargs)

    def info(self, *args: object, **kwargs: Any) -> None:
        """Log at INFO level."""
        self._log("INFO", *args, **kwargs)

    def warning(self, *args: object, **kwargs: Any) -> None:
        """Log at WARNING level."""
        self._log("WARNING", *args, **kwargs)

    def error(self, *args: object, **kwargs: Any) -> None:
        """Log at ERROR level."""
        self._log("ERROR", *args, **kwargs)


class DebugLogHandler(logging.Handler):
    """Logging handler that captures stdlib records into the debug buffer."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            log_buffer.append(
                LogEntry(
                    group=record.levelname,
                    message=msg,
                    timestamp=record.created,
                    source=LogSource.LOGGING,
                )
            )
        except Exception:
            self.handleError(record)


_debug_logging_initialized: bool = False


def setup_debug_logging(level: int = logging.INFO) -> None:
    """Attach the debug buffer handler to the ``lanesync`` logger tree.

    Idempotent: calling it more than once has no further effect.
    """
    global _debug_logging_initialized

    if _debug_logging_initialized:
        return

    handler = DebugLogHandler()
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    package_logger = logging.getLogger("lanesync")
    package_logger.addHandler(handler)
    package_logger.setLevel(level)

    _debug_logging_initialized = True
    log.info("Debug logging initialized")


def export_logs_to_file(file_path: str) -> int:
    """Export all logs from the buffer to a file.

    Args:
        file_path: Path to write the log file to

    Returns:
        Number of log entries written
    """
    from datetime import datetime
    from pathlib import Path

    output_path = Path(file_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8") as f:
        f.write("# lanesync debug log export\n")
        f.write(f"# Total entries: {len(log_buffer)}\n")
        f.write("# " + "=" * 76 + "\n\n")

        for entry in log_buffer:
            ts = datetime.fromtimestamp(entry.timestamp).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
            source = "[PY]" if entry.source == LogSource.LOGGING else "[TX]"
            f.write(f"{ts} {source} [{entry.group}] {entry.message}\n")

    return len(log_buffer)


log = LaneSyncLogger()
