"""StrEnum definitions for type-safe constants."""

import logging
from enum import StrEnum

# Python has no level above CRITICAL; PANIC sits one step higher so that
# FATAL and PANIC remain distinct thresholds.
PANIC = logging.CRITICAL + 10
logging.addLevelName(PANIC, "PANIC")


class LogLevel(StrEnum):
    """Log severity thresholds selectable through LOG_LEVEL."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"
    PANIC = "panic"
    DISABLED = "disabled"

    @property
    def threshold(self) -> int:
        """Lowest stdlib logging level that still gets through."""
        return _THRESHOLDS[self]


_THRESHOLDS: dict[LogLevel, int] = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.PANIC: PANIC,
    LogLevel.DISABLED: PANIC + 1,
}
