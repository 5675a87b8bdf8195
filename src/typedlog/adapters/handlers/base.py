"""Base class for level-gated handlers."""

from types import TracebackType
from typing import Self

from typedlog.core.encoding.text_formatter import TextFormatter
from typedlog.core.fields import FieldSet
from typedlog.core.levels import LogLevel
from typedlog.core.ports import FormatterPort


class BaseHandler:
    """Shared level gate and formatting for sink-backed handlers.

    Subclasses implement ``_emit`` to write one already-formatted line
    (newline included) to their sink.
    """

    def __init__(
        self,
        formatter: FormatterPort | None = None,
        level: LogLevel = LogLevel.TRACE,
    ) -> None:
        """Initialize the handler.

        Args:
            formatter: Formatter used to render accepted records.
                Defaults to TextFormatter.
            level: Minimum level a record needs to be written
                (default: TRACE, everything passes).
        """
        self._formatter = formatter if formatter is not None else TextFormatter()
        self._level = level

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def formatter(self) -> FormatterPort:
        return self._formatter

    def set_level(self, level: LogLevel) -> None:
        """Set the minimum level for subsequent records."""
        self._level = level

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self._level

    def handle(self, level: LogLevel, message: str, fields: FieldSet) -> None:
        """Format and write the record unless it is below the minimum level.

        Args:
            level: Severity of the record.
            message: Human-readable message.
            fields: Structured fields, read but never modified.
        """
        if level < self._level:
            return
        line = self._formatter.format(level, message, fields)
        self._write(line + "\n")

    def _write(self, data: str) -> None:
        try:
            self._emit(data)
        except (OSError, ValueError):  # noqa: S110
            pass  # write failures never reach the logging caller

    def _emit(self, data: str) -> None:
        raise NotImplementedError

    def flush(self) -> None:
        """Force buffered output to the sink (no-op by default)."""

    def close(self) -> None:
        """Release the sink (no-op by default)."""

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
