"""Thread-safe decorator around any handler."""

import threading
from types import TracebackType
from typing import Self

from typedlog.core.fields import FieldSet
from typedlog.core.levels import LogLevel
from typedlog.core.ports import HandlerPort


class LockedHandler:
    """Serialize every call to a wrapped handler with a lock.

    Handlers are not safe for concurrent use on their own. Wrap one in a
    LockedHandler when a logger is shared between threads.
    """

    def __init__(self, handler: HandlerPort) -> None:
        self._handler = handler
        self._lock = threading.Lock()

    @property
    def wrapped(self) -> HandlerPort:
        return self._handler

    @property
    def level(self) -> LogLevel:
        with self._lock:
            return self._handler.level

    def handle(self, level: LogLevel, message: str, fields: FieldSet) -> None:
        with self._lock:
            self._handler.handle(level, message, fields)

    def set_level(self, level: LogLevel) -> None:
        with self._lock:
            self._handler.set_level(level)

    def flush(self) -> None:
        with self._lock:
            self._handler.flush()

    def close(self) -> None:
        with self._lock:
            self._handler.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
