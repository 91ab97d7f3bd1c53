"""Whitespace-delimited request source."""

from pathlib import Path
from types import TracebackType
from typing import Iterable, Iterator, TextIO

from bank_intake.exceptions import RequestSourceError
from bank_intake.logging import get_logger
from bank_intake.models.request import AccountRequest

logger = get_logger(__name__)

FIELDS_PER_REQUEST = 4


def read_requests(lines: Iterable[str]) -> Iterator[AccountRequest]:
    """Yield requests from whitespace-separated tokens, four at a time.

    Line breaks carry no meaning: a record may span lines and one line may
    hold several records. A trailing group of fewer than four tokens ends
    the stream without producing a request.
    """
    tokens: list[str] = []
    for line in lines:
        for token in line.split():
            tokens.append(token)
            if len(tokens) == FIELDS_PER_REQUEST:
                yield AccountRequest(*tokens)
                tokens = []
    if tokens:
        logger.debug("Ignoring %d trailing token(s): %s", len(tokens), " ".join(tokens))


class RequestFileSource:
    """Request source backed by a text file.

    Use as a context manager; iterating yields :class:`AccountRequest`
    objects until the file is exhausted. Iterating again after exhaustion
    yields nothing.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._file: TextIO | None = None
        self._requests: Iterator[AccountRequest] | None = None

    def open(self) -> "RequestFileSource":
        try:
            # undecodable bytes become U+FFFD and fail field validation
            self._file = open(self.path, encoding="utf-8", errors="replace")
        except OSError as e:
            raise RequestSourceError(f"Cannot open input file: {self.path}") from e
        self._requests = read_requests(self._file)
        return self

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
        self._requests = None

    def __iter__(self) -> Iterator[AccountRequest]:
        if self._requests is None:
            raise RequestSourceError(f"Input file {self.path} is not open")
        return self._requests

    def __enter__(self) -> "RequestFileSource":
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def write_requests(path: str | Path, requests: Iterable[AccountRequest]) -> int:
    """Write requests one per line and return how many were written."""
    count = 0
    with open(path, "w", encoding="utf-8") as f:
        for request in requests:
            f.write(request.raw + "\n")
            count += 1
    return count
