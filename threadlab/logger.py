"""Debug logging to standard error, tagged with time, level and caller location."""

from __future__ import annotations

import sys
import time
from enum import Enum
from types import FrameType

# Logging follows the interpreter's debug mode: running under ``python -O``
# silences every message, the way a release build drops them.
ENABLED = __debug__


class Level(str, Enum):
    """Severity tags written into each log line."""

    DEB = "DEB"
    INF = "INF"
    WAR = "WAR"
    ERR = "ERR"
    FAT = "FAT"


def _stamp() -> tuple[str, str]:
    now = time.localtime()
    date = f"{time.strftime('%b', now)} {now.tm_mday:2d} {now.tm_year}"
    clock = time.strftime("%H:%M:%S", now)
    return date, clock


def _emit(level: Level | str, message: str, frame: FrameType | None) -> str | None:
    level = Level(level)
    if not ENABLED:
        return None
    date, clock = _stamp()
    if frame is not None:
        filename = frame.f_code.co_filename
        function = frame.f_code.co_name
        lineno = frame.f_lineno
    else:
        filename, function, lineno = "?", "?", 0
    line = f"[{date}] [{clock}] [{level.value}] [{filename}] [{function}] [{lineno}] -> {message}"
    stream = sys.stderr
    stream.write(line + "\n")
    stream.flush()
    return line


def log_msg(level: Level | str, message: str) -> str | None:
    """Write one log line for the caller and return it (None when disabled)."""
    return _emit(level, message, sys._getframe(1))


def deb(message: str) -> str | None:
    """Log a debug message."""
    return _emit(Level.DEB, message, sys._getframe(1))


def inf(message: str) -> str | None:
    """Log an informational message."""
    return _emit(Level.INF, message, sys._getframe(1))


def war(message: str) -> str | None:
    """Log a warning."""
    return _emit(Level.WAR, message, sys._getframe(1))


def err(message: str) -> str | None:
    """Log an error."""
    return _emit(Level.ERR, message, sys._getframe(1))


def fat(message: str) -> str | None:
    """Log a fatal error."""
    return _emit(Level.FAT, message, sys._getframe(1))