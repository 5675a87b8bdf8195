"""File handler writing to an append-only or truncated log file."""

from os import PathLike
from typing import TextIO

from typedlog.adapters.handlers.base import BaseHandler
from typedlog.core.levels import LogLevel
from typedlog.core.ports import FormatterPort


class FileHandler(BaseHandler):
    """Handler that writes accepted lines to a file.

    The file is opened when the handler is created and stays open until
    ``close()``. There is no rotation and no locking against other
    writers.
    """

    def __init__(
        self,
        path: str | PathLike[str],
        formatter: FormatterPort | None = None,
        level: LogLevel = LogLevel.TRACE,
        append: bool = True,
    ) -> None:
        """Open the log file.

        Args:
            path: Location of the log file.
            formatter: Formatter for accepted records (default: TextFormatter).
            level: Minimum level (default: TRACE).
            append: Append to an existing file (True) or truncate it (False).

        Raises:
            OSError: If the file cannot be opened (missing directory,
                permission denied, ...).
        """
        super().__init__(formatter, level)
        self._path = str(path)
        self._append = append
        # Line buffered so each record reaches the file as it is written
        self._stream: TextIO | None = open(  # noqa: SIM115
            self._path, "a" if append else "w", encoding="utf-8", buffering=1
        )

    @property
    def path(self) -> str:
        return self._path

    @property
    def closed(self) -> bool:
        return self._stream is None

    def _emit(self, data: str) -> None:
        if self._stream is None:
            return
        self._stream.write(data)

    def flush(self) -> None:
        """Flush buffered output to disk."""
        if self._stream is None:
            return
        try:
            self._stream.flush()
        except (OSError, ValueError):  # noqa: S110
            pass

    def close(self) -> None:
        """Close the file. Errors are ignored and repeated calls do nothing."""
        stream, self._stream = self._stream, None
        if stream is None:
            return
        try:
            stream.close()
        except OSError:  # noqa: S110
            pass
