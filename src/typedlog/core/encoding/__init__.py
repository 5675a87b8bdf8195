"""Line formatters for log records."""

from typedlog.core.encoding.json_formatter import JsonFormatter, escape_json_string
from typedlog.core.encoding.text_formatter import TextFormatter

__all__ = [
    "JsonFormatter",
    "TextFormatter",
    "escape_json_string",
]
