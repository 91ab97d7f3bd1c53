"""Rejection file sink: one line per rejected request."""

from pathlib import Path
from types import TracebackType
from typing import TextIO

from bank_intake.exceptions import SinkError
from bank_intake.models.request import RejectionRecord


class RejectionFileSink:
    """Write ``<raw request> :: <reason>`` lines to a text file.

    The file is overwritten on open and has no capacity limit. Use as a
    context manager so the file is closed on every exit path.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._file: TextIO | None = None
        self.count = 0

    def open(self) -> "RejectionFileSink":
        try:
            self._file = open(self.path, "w", encoding="utf-8")
        except OSError as e:
            raise SinkError(f"Cannot open error file: {self.path}") from e
        self.count = 0
        return self

    def write(self, record: RejectionRecord) -> None:
        if self._file is None:
            raise SinkError(f"Error file {self.path} is not open")
        self._file.write(record.line + "\n")
        self.count += 1

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "RejectionFileSink":
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
