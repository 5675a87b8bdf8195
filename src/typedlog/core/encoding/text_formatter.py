"""Human-readable ``key=value`` formatter for log records."""

from typing import assert_never

from typedlog.core.fields import FieldKind, FieldSet, FieldValue, field_kind
from typedlog.core.levels import LogLevel


def _encode_value(value: FieldValue) -> str:
    kind = field_kind(value)
    match kind:
        case FieldKind.INT:
            return str(value)
        case FieldKind.FLOAT:
            return repr(value)
        case FieldKind.TEXT:
            text = str(value)
            # Embedded double quotes are left as-is
            return f'"{text}"' if " " in text else text
        case FieldKind.BOOL:
            return "true" if value else "false"
        case _:
            assert_never(kind)


class TextFormatter:
    """Render records as ``LEVEL: message key=value ...``.

    Text values containing a space are wrapped in double quotes. Nothing
    inside the quotes is escaped, so a value holding both a space and a
    double quote cannot be parsed back unambiguously.
    """

    def format(self, level: LogLevel, message: str, fields: FieldSet) -> str:
        line = f"{level.display_name}: {message}"
        if not fields:
            return line
        rendered = " ".join(
            f"{key}={_encode_value(value)}" for key, value in fields.items()
        )
        return f"{line} {rendered}"
