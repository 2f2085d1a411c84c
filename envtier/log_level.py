"""LOG_LEVEL handling.

The resolved level is applied with logging.disable(), the stdlib's
process-wide threshold that sits above every logger's own level.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from envtier.enums import LogLevel

if TYPE_CHECKING:
    from envtier.env_set import Getter

logger = logging.getLogger(__name__)

_TOKENS: dict[str, LogLevel] = {
    "debug": LogLevel.DEBUG,
    "d": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "i": LogLevel.INFO,
    "warn": LogLevel.WARN,
    "warning": LogLevel.WARN,
    "w": LogLevel.WARN,
    "error": LogLevel.ERROR,
    "err": LogLevel.ERROR,
    "e": LogLevel.ERROR,
    "fatal": LogLevel.FATAL,
    "f": LogLevel.FATAL,
    "panic": LogLevel.PANIC,
    "p": LogLevel.PANIC,
    "off": LogLevel.DISABLED,
    "no": LogLevel.DISABLED,
    "none": LogLevel.DISABLED,
    "": LogLevel.DISABLED,
}


def parse_log_level(token: str) -> LogLevel | None:
    """Map a LOG_LEVEL token to a LogLevel (case-insensitive); None if unknown."""
    return _TOKENS.get(token.lower())


def set_global_level(level: LogLevel) -> None:
    """Drop every record below `level`, process-wide."""
    logging.disable(level.threshold - 1)


def apply_log_level(
    env: "Getter",
    default_level: LogLevel,
    key: str = "LOG_LEVEL",
) -> LogLevel:
    """Determine the log level from the `key` variable, apply it and return it.

    Unknown non-empty tokens fall back to `default_level` and log a warning.
    """
    token, _ = env.string(key, "")

    level = parse_log_level(token)
    if level is None:
        logger.warning('Log level "%s" invalid.', token)
        level = default_level

    set_global_level(level)
    return level
