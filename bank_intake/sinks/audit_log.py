"""Append-only text audit log."""

from pathlib import Path

from bank_intake.logging import get_logger

logger = get_logger(__name__)

LOG_HEADER = "=== Log start ==="


class AuditLog:
    """Append-only audit trail of validation attempts and batch summaries.

    Each :meth:`append` opens the file in append mode, writes one line and
    closes it again, so the file is complete after every entry.

    Parameters
    ----------
    path : str | Path
        Audit file location.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._count = 0

    def start(self) -> None:
        """Truncate the log and write the header line."""
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(LOG_HEADER + "\n")
        except OSError as e:
            logger.warning("Cannot initialize audit log %s: %s", self.path, e)
            return
        self._count = 0

    def append(self, message: str) -> None:
        """Append one line to the log.

        An unwritable log never interrupts processing; the failure is
        reported through the application logger instead.
        """
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(message + "\n")
        except OSError as e:
            logger.warning("Cannot write audit log %s: %s", self.path, e)
            return
        self._count += 1

    def read_lines(self) -> list[str] | None:
        """Return the log contents, or None if the log does not exist yet."""
        if not self.path.exists():
            return None
        with open(self.path, encoding="utf-8") as f:
            return f.read().splitlines()

    @property
    def count(self) -> int:
        """Number of entries appended since the last :meth:`start`."""
        return self._count
