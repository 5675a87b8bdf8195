"""Console handler writing to standard output or standard error."""

import sys
from typing import TextIO

from typedlog.adapters.handlers.base import BaseHandler
from typedlog.core.levels import LogLevel
from typedlog.core.ports import FormatterPort


class ConsoleHandler(BaseHandler):
    """Handler that writes each accepted line to stdout or stderr.

    The stream is chosen once at construction and cannot be changed.
    Every line is flushed immediately.

    Example:
        ```python
        handler = ConsoleHandler(JsonFormatter(), level=LogLevel.INFO)
        logger = Logger(handler)
        ```
    """

    def __init__(
        self,
        formatter: FormatterPort | None = None,
        level: LogLevel = LogLevel.TRACE,
        use_stderr: bool = False,
    ) -> None:
        """Initialize the handler.

        Args:
            formatter: Formatter for accepted records (default: TextFormatter).
            level: Minimum level (default: TRACE).
            use_stderr: Write to stderr instead of stdout.
        """
        super().__init__(formatter, level)
        self._use_stderr = use_stderr
        self._stream: TextIO | None = sys.stderr if use_stderr else sys.stdout

    @property
    def use_stderr(self) -> bool:
        return self._use_stderr

    def _emit(self, data: str) -> None:
        # sys.stdout/sys.stderr are None under pythonw and detached daemons
        if self._stream is None:
            return
        self._stream.write(data)
        self._stream.flush()
