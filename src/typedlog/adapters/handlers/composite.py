"""Handler that fans records out to several child handlers."""

from collections.abc import Iterable
from types import TracebackType
from typing import Self

from typedlog.core.fields import FieldSet
from typedlog.core.levels import LogLevel
from typedlog.core.ports import HandlerPort


class CompositeHandler:
    """Forward each record to every child handler in order.

    The composite's own level is checked first; each child then applies
    its own minimum level and formatter. Children are owned by the
    composite and are flushed and closed with it.
    """

    def __init__(
        self,
        handlers: Iterable[HandlerPort] = (),
        level: LogLevel = LogLevel.TRACE,
    ) -> None:
        self._handlers: list[HandlerPort] = list(handlers)
        self._level = level

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def handlers(self) -> tuple[HandlerPort, ...]:
        return tuple(self._handlers)

    def set_level(self, level: LogLevel) -> None:
        """Set the minimum level checked before any child sees a record."""
        self._level = level

    def add_handler(self, handler: HandlerPort) -> None:
        self._handlers.append(handler)

    def handle(self, level: LogLevel, message: str, fields: FieldSet) -> None:
        if level < self._level:
            return
        for handler in self._handlers:
            handler.handle(level, message, fields)

    def flush(self) -> None:
        for handler in self._handlers:
            handler.flush()

    def close(self) -> None:
        for handler in self._handlers:
            handler.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
