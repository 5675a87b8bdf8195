"""Python logging handler adapter for typedlog.

This adapter bridges Python's standard library logging module to any
typedlog handler, so records from existing ``logging`` calls are rendered
by typedlog formatters.
"""

import logging
import traceback

from typedlog.core.fields import FieldSet
from typedlog.core.levels import from_stdlib_level
from typedlog.core.ports import HandlerPort

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)

# Default attributes to extract from LogRecord
_DEFAULT_INCLUDE_ATTRS = ["module", "funcName", "lineno", "pathname"]


class TypedLogHandler(logging.Handler):
    """Logging handler that forwards records to a typedlog handler.

    Example:
        ```python
        from typedlog import ConsoleHandler, JsonFormatter, TypedLogHandler

        bridge = TypedLogHandler(ConsoleHandler(JsonFormatter()))
        logging.getLogger().addHandler(bridge)
        ```
    """

    def __init__(
        self,
        target: HandlerPort,
        include_attrs: list[str] | None = None,
    ) -> None:
        """Initialize the bridge.

        Args:
            target: typedlog handler that receives converted records.
            include_attrs: LogRecord attributes to copy into fields. Defaults
                to ["module", "funcName", "lineno", "pathname"]. Pass an
                empty list to copy none.
        """
        super().__init__()
        self._target = target
        self._include_attrs = (
            _DEFAULT_INCLUDE_ATTRS if include_attrs is None else include_attrs
        )

    @property
    def target(self) -> HandlerPort:
        return self._target

    def emit(self, record: logging.LogRecord) -> None:
        """Convert the record to level, message and fields and forward it.

        Args:
            record: The log record to emit.
        """
        try:
            message = record.getMessage()
        except Exception:
            self.handleError(record)
            return

        # Map of attribute names to their values from LogRecord
        attr_mapping: dict[str, str | int] = {
            "module": record.module,
            "funcName": record.funcName or "",
            "lineno": record.lineno,
            "pathname": record.pathname,
        }

        fields = FieldSet()
        for key in self._include_attrs:
            if key in attr_mapping:
                fields.add(key, attr_mapping[key])

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
                value, (str, int, float, bool)
            ):
                fields.add(key, value)

        # Extract exception info if present
        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None:
                fields.add("exc_type", exc_type.__name__)
            if exc_value is not None:
                fields.add("exc_message", str(exc_value))
            if exc_tb is not None:
                fields.add(
                    "exc_traceback",
                    "".join(traceback.format_exception(exc_type, exc_value, exc_tb)),
                )

        self._target.handle(from_stdlib_level(record.levelno), message, fields)

    def flush(self) -> None:
        self._target.flush()

    def close(self) -> None:
        """Close the target handler and detach from logging."""
        self._target.close()
        super().close()
