"""typedlog - structured logging with typed fields.

Records carry a level, a message and a FieldSet of int, float, str or
bool values. Formatters render them as JSON or ``key=value`` text and
handlers write the result to the console or a file.
"""

from typedlog.adapters.handlers import (
    BaseHandler,
    CompositeHandler,
    ConsoleHandler,
    FileHandler,
    InMemoryHandler,
    LockedHandler,
)
from typedlog.adapters.logging import TypedLogHandler
from typedlog.core.config import LoggerConfig
from typedlog.core.encoding import JsonFormatter, TextFormatter, escape_json_string
from typedlog.core.fields import FieldKind, FieldSet, FieldValue, field_kind
from typedlog.core.levels import LogLevel, from_stdlib_level, parse_level
from typedlog.core.logger import Logger, TimedLogResult
from typedlog.core.ports import FormatterPort, HandlerPort
from typedlog.factory import create_formatter, create_handler, create_logger

__all__ = [
    "BaseHandler",
    "CompositeHandler",
    "ConsoleHandler",
    "FieldKind",
    "FieldSet",
    "FieldValue",
    "FileHandler",
    "FormatterPort",
    "HandlerPort",
    "InMemoryHandler",
    "JsonFormatter",
    "LockedHandler",
    "LogLevel",
    "Logger",
    "LoggerConfig",
    "TextFormatter",
    "TimedLogResult",
    "TypedLogHandler",
    "create_formatter",
    "create_handler",
    "create_logger",
    "escape_json_string",
    "field_kind",
    "from_stdlib_level",
    "parse_level",
]
