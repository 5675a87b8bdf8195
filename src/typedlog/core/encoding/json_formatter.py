"""Single-line JSON formatter for log records."""

from typing import assert_never

from typedlog.core.fields import FieldKind, FieldSet, FieldValue, field_kind
from typedlog.core.levels import LogLevel

# Only these characters are escaped; other control characters and
# non-ASCII text pass through unchanged.
_ESCAPES = str.maketrans(
    {
        '"': '\\"',
        "\\": "\\\\",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
    }
)


def escape_json_string(text: str) -> str:
    """Escape quote, backslash, newline, carriage return and tab.

    Args:
        text: Raw string.

    Returns:
        Escaped string without surrounding quotes.
    """
    return text.translate(_ESCAPES)


def _encode_value(value: FieldValue) -> str:
    kind = field_kind(value)
    match kind:
        case FieldKind.INT:
            return str(value)
        case FieldKind.FLOAT:
            return repr(value)
        case FieldKind.TEXT:
            return f'"{escape_json_string(str(value))}"'
        case FieldKind.BOOL:
            return "true" if value else "false"
        case _:
            assert_never(kind)


class JsonFormatter:
    """Render records as one JSON object per line.

    Keys appear in a fixed order: ``level``, ``msg``, then fields in
    FieldSet insertion order. Example output:

        {"level":"INFO","msg":"user login","user_id":123,"ip":"192.168.1.1"}
    """

    def format(self, level: LogLevel, message: str, fields: FieldSet) -> str:
        """Render a record as a compact JSON object without trailing newline."""
        parts = [
            f'"level":"{escape_json_string(level.display_name)}"',
            f'"msg":"{escape_json_string(message)}"',
        ]
        for key, value in fields.items():
            parts.append(f'"{escape_json_string(key)}":{_encode_value(value)}')
        return "{" + ",".join(parts) + "}"
