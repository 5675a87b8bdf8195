"""Assemble handlers and loggers from a LoggerConfig."""

from typedlog.adapters.handlers.base import BaseHandler
from typedlog.adapters.handlers.console import ConsoleHandler
from typedlog.adapters.handlers.file import FileHandler
from typedlog.core.config import LoggerConfig
from typedlog.core.encoding.json_formatter import JsonFormatter
from typedlog.core.encoding.text_formatter import TextFormatter
from typedlog.core.logger import Logger
from typedlog.core.ports import FormatterPort


def create_formatter(name: str) -> FormatterPort:
    """Return a formatter for "json" or "text"."""
    if name == "json":
        return JsonFormatter()
    if name == "text":
        return TextFormatter()
    raise ValueError(f"unknown format: {name!r}")


def create_handler(config: LoggerConfig) -> BaseHandler:
    """Create a FileHandler when config.file_path is set, else a ConsoleHandler.

    Raises:
        OSError: If the log file cannot be opened.
    """
    formatter = create_formatter(config.format)
    if config.file_path:
        return FileHandler(
            config.file_path,
            formatter,
            level=config.level,
            append=config.append,
        )
    return ConsoleHandler(formatter, level=config.level, use_stderr=config.use_stderr)


def create_logger(config: LoggerConfig | None = None) -> Logger:
    """Create a Logger from config, or from environment variables if omitted."""
    if config is None:
        config = LoggerConfig.from_env()
    return Logger(create_handler(config))
