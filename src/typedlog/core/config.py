"""Logger settings loaded from arguments and ``TYPEDLOG_*`` environment variables."""

from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from typedlog.core.levels import LogLevel, parse_level


class LoggerConfig(BaseSettings):
    """Settings used by create_logger to assemble a handler and formatter.

    Values not passed as arguments are read from ``TYPEDLOG_LEVEL``,
    ``TYPEDLOG_FORMAT``, ``TYPEDLOG_FILE_PATH``, ``TYPEDLOG_APPEND`` and
    ``TYPEDLOG_USE_STDERR``.

    Attributes:
        level: Minimum level written by the handler.
        format: Output format, "json" or "text".
        file_path: Write to this file instead of the console when set.
        append: Append to file_path (True) or truncate it (False).
        use_stderr: Write console output to stderr instead of stdout.
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPEDLOG_",
        case_sensitive=False,
        frozen=True,
    )

    level: LogLevel = LogLevel.INFO
    format: Literal["json", "text"] = "text"
    file_path: str | None = None
    append: bool = True
    use_stderr: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def coerce_level(cls, value: Any) -> LogLevel:
        return parse_level(value)

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("file_path", mode="before")
    @classmethod
    def empty_path_is_none(cls, value: Any) -> Any:
        return value or None

    @classmethod
    def from_env(cls, prefix: str = "TYPEDLOG_") -> "LoggerConfig":
        """Load settings from environment variables with a custom prefix.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
                (a ValueError subclass).
        """
        return cls(_env_prefix=prefix)
