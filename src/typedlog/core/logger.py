"""Logger facade exposing one method per severity level."""

import sys
import time
import traceback
from collections.abc import Generator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from types import TracebackType
from typing import Self

from typedlog.core.fields import FieldSet, FieldValue
from typedlog.core.levels import LogLevel
from typedlog.core.ports import HandlerPort

FieldsArg = FieldSet | Mapping[str, FieldValue] | None


@dataclass
class TimedLogResult:
    """Result object for Logger.timed context manager."""

    elapsed_seconds: float | None = None


def _build_fields(fields: FieldsArg, attributes: Mapping[str, FieldValue]) -> FieldSet:
    # A FieldSet without extra attributes is passed through untouched
    if isinstance(fields, FieldSet) and not attributes:
        return fields
    result = FieldSet(fields)
    if attributes:
        result.update(attributes)
    return result


class Logger:
    """Dispatch log calls to a single owned handler.

    The logger does no filtering of its own; the handler's minimum level
    decides what is written.

    Example:
        ```python
        from typedlog import ConsoleHandler, JsonFormatter, Logger

        logger = Logger(ConsoleHandler(JsonFormatter()))
        logger.info("user login", user_id=123, ip="192.168.1.1")
        ```
    """

    def __init__(self, handler: HandlerPort) -> None:
        """Initialize the logger.

        Args:
            handler: Handler that receives every record. The logger takes
                ownership; callers should not use it directly afterwards.
        """
        self._handler = handler

    @property
    def handler(self) -> HandlerPort:
        return self._handler

    @property
    def level(self) -> LogLevel:
        return self._handler.level

    def set_level(self, level: LogLevel) -> None:
        """Set the handler's minimum level."""
        self._handler.set_level(level)

    def log(
        self,
        level: LogLevel,
        message: str,
        /,
        fields: FieldsArg = None,
        **attributes: FieldValue,
    ) -> None:
        """Send a record at the given level to the handler.

        Args:
            level: Severity of the record.
            message: The log message.
            fields: Optional FieldSet or mapping of structured fields.
                Never modified.
            **attributes: Additional fields, applied over ``fields``.
        """
        self._handler.handle(level, message, _build_fields(fields, attributes))

    def trace(
        self, message: str, /, fields: FieldsArg = None, **attributes: FieldValue
    ) -> None:
        self.log(LogLevel.TRACE, message, fields, **attributes)

    def debug(
        self, message: str, /, fields: FieldsArg = None, **attributes: FieldValue
    ) -> None:
        self.log(LogLevel.DEBUG, message, fields, **attributes)

    def info(
        self, message: str, /, fields: FieldsArg = None, **attributes: FieldValue
    ) -> None:
        self.log(LogLevel.INFO, message, fields, **attributes)

    def warning(
        self, message: str, /, fields: FieldsArg = None, **attributes: FieldValue
    ) -> None:
        self.log(LogLevel.WARNING, message, fields, **attributes)

    def error(
        self, message: str, /, fields: FieldsArg = None, **attributes: FieldValue
    ) -> None:
        self.log(LogLevel.ERROR, message, fields, **attributes)

    def critical(
        self, message: str, /, fields: FieldsArg = None, **attributes: FieldValue
    ) -> None:
        self.log(LogLevel.CRITICAL, message, fields, **attributes)

    def exception(
        self, message: str, /, fields: FieldsArg = None, **attributes: FieldValue
    ) -> None:
        """Log at ERROR with details of the exception currently being handled.

        Adds ``exc_type``, ``exc_message`` and ``exc_traceback`` fields.
        Outside an ``except`` block this behaves like ``error``.
        """
        record = FieldSet(fields).update(attributes)
        exc_type, exc_value, exc_tb = sys.exc_info()
        if exc_type is not None:
            record.add("exc_type", exc_type.__name__)
            record.add("exc_message", str(exc_value))
            record.add(
                "exc_traceback",
                "".join(traceback.format_exception(exc_type, exc_value, exc_tb)),
            )
        self._handler.handle(LogLevel.ERROR, message, record)

    @contextmanager
    def timed(
        self,
        message: str,
        level: LogLevel = LogLevel.INFO,
        **attributes: FieldValue,
    ) -> Generator[TimedLogResult]:
        """Context manager that logs entry and exit with elapsed time.

        Args:
            message: The base log message
            level: Log level (default INFO)
            **attributes: Additional structured fields

        Yields:
            TimedLogResult whose elapsed_seconds is set on exit
        """
        result = TimedLogResult()
        self.log(level, f"{message} [entry]", {"phase": "entry", **attributes})
        start = time.perf_counter()
        try:
            yield result
        finally:
            elapsed = time.perf_counter() - start
            result.elapsed_seconds = elapsed
            self.log(
                level,
                f"{message} [exit]",
                {"phase": "exit", "elapsed_seconds": elapsed, **attributes},
            )

    def flush(self) -> None:
        self._handler.flush()

    def close(self) -> None:
        self._handler.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
