"""Severity levels shared by formatters, handlers and the logger."""

from enum import IntEnum


class LogLevel(IntEnum):
    """Ordered log severities.

    Numeric values line up with the standard library ``logging`` module so
    records can be bridged in either direction without a lookup table.
    """

    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @property
    def display_name(self) -> str:
        """Name rendered into formatted output (e.g. ``INFO``)."""
        return self.name


# Accepted spellings beyond the canonical member names
_ALIASES = {"WARN": LogLevel.WARNING, "FATAL": LogLevel.CRITICAL}


def parse_level(value: "LogLevel | int | str") -> LogLevel:
    """Resolve a level from a member, its numeric value or its name.

    Args:
        value: A LogLevel, an int equal to a level value, or a level name
            (case-insensitive, ``WARN`` and ``FATAL`` accepted as aliases).

    Returns:
        The matching LogLevel.

    Raises:
        ValueError: If the value does not name a known level.
    """
    if isinstance(value, LogLevel):
        return value
    if isinstance(value, bool):
        raise ValueError(f"invalid log level: {value!r}")
    if isinstance(value, int):
        try:
            return LogLevel(value)
        except ValueError:
            raise ValueError(f"invalid log level: {value!r}") from None
    if not isinstance(value, str):
        raise ValueError(f"invalid log level: {value!r}")
    name = value.strip().upper()
    if name.isdigit():
        return parse_level(int(name))
    if name in _ALIASES:
        return _ALIASES[name]
    try:
        return LogLevel[name]
    except KeyError:
        raise ValueError(f"invalid log level: {value!r}") from None


def from_stdlib_level(levelno: int) -> LogLevel:
    """Map a ``logging`` level number to the nearest level at or below it.

    Numbers below TRACE map to TRACE; custom stdlib levels between two
    members round down (e.g. 25 becomes INFO).
    """
    result = LogLevel.TRACE
    for level in LogLevel:
        if level <= levelno:
            result = level
    return result
