"""Levelled logging to standard error with a UTC timestamp."""

from __future__ import annotations

import enum
import sys
from datetime import datetime, timezone


class LogLevel(enum.IntEnum):
    """Severity of a log message; higher values are more severe."""

    DEBUG = 0
    INFO = 1
    ERROR = 2

    def __str__(self) -> str:
        return self.name.lower()


_verbosity = LogLevel.DEBUG


def set_verbosity(level: LogLevel) -> LogLevel:
    """Set the minimum level that gets printed; return the previous one."""
    global _verbosity
    previous = _verbosity
    _verbosity = LogLevel(level)
    return previous


def now() -> str:
    """Current UTC time as an ISO-8601 string with second resolution."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def log(level: LogLevel, ctx: str, msg: str, *args: object) -> None:
    """Print ``msg`` (formatted with ``args``) if ``level`` passes the verbosity."""
    level = LogLevel(level)
    if level < _verbosity:
        return
    text = msg.format(*args) if args else msg
    print(f"{now()} | [{level}][{ctx:30}] {text}", file=sys.stderr)