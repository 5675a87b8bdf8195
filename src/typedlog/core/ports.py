"""Port interfaces for formatters and handlers.

These protocols define the contracts that formatter and handler adapters
must implement. The logger depends only on these interfaces, not on
concrete implementations.
"""

from typing import Protocol, runtime_checkable

from typedlog.core.fields import FieldSet
from typedlog.core.levels import LogLevel


@runtime_checkable
class FormatterPort(Protocol):
    """Port for rendering a log record into a single line.

    Implementations are pure: no side effects, no trailing newline.
    Examples: JsonFormatter, TextFormatter.
    """

    def format(self, level: LogLevel, message: str, fields: FieldSet) -> str:
        """Render level, message and fields as one line of text."""
        ...


@runtime_checkable
class HandlerPort(Protocol):
    """Port for level-gated sinks.

    Adapters implementing this protocol filter records by a minimum level,
    format accepted records and write them to their sink.
    Examples: ConsoleHandler, FileHandler, CompositeHandler.
    """

    @property
    def level(self) -> LogLevel:
        """Current minimum level."""
        ...

    def handle(self, level: LogLevel, message: str, fields: FieldSet) -> None:
        """Format and write the record if level is at or above the minimum."""
        ...

    def set_level(self, level: LogLevel) -> None:
        """Replace the minimum level for subsequent records."""
        ...

    def flush(self) -> None:
        """Force buffered output to the sink."""
        ...

    def close(self) -> None:
        """Release the sink. Safe to call more than once."""
        ...
