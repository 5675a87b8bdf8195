"""In-memory handler that keeps formatted lines in a list."""

from typedlog.adapters.handlers.base import BaseHandler
from typedlog.core.levels import LogLevel
from typedlog.core.ports import FormatterPort


class InMemoryHandler(BaseHandler):
    """Collect formatted lines (without newlines) in memory.

    Suitable for testing and for embedding applications that want to
    inspect rendered output.
    """

    def __init__(
        self,
        formatter: FormatterPort | None = None,
        level: LogLevel = LogLevel.TRACE,
    ) -> None:
        super().__init__(formatter, level)
        self._lines: list[str] = []

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def clear(self) -> None:
        self._lines.clear()

    def _emit(self, data: str) -> None:
        self._lines.append(data.removesuffix("\n"))
