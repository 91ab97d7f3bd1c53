"""Console sink for the interactive menu."""

from typing import Any, Iterable

from bank_intake.config import DECIMALS
from bank_intake.sinks.table import format_table


class ConsoleSink:
    """Print accounts, rejections and batch summaries to stdout."""

    def __init__(self, decimals: int = DECIMALS, max_records: int | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        decimals : int
            Decimal places for balances.
        max_records : int | None
            Maximum rows to print per call (None for all).
        """
        self.decimals = decimals
        self.max_records = max_records

    def write_accounts(self, accounts: Iterable[Any]) -> None:
        """Print the account table, or a notice when there are no accounts."""
        accounts = list(accounts)
        if not accounts:
            print("No accounts.")
            return

        shown = accounts[: self.max_records] if self.max_records else accounts
        for line in format_table(shown, self.decimals):
            print(line)
        self._print_overflow(len(accounts), "accounts")

    def write_rejections(self, records: Iterable[Any]) -> None:
        """Print each rejection line verbatim."""
        records = list(records)
        if not records:
            print("No invalid records.")
            return

        shown = records[: self.max_records] if self.max_records else records
        for record in shown:
            print(record.line)
        self._print_overflow(len(records), "records")

    def write_lines(self, lines: list[str] | None, missing: str = "No log file yet.") -> None:
        if lines is None:
            print(missing)
            return
        for line in lines:
            print(line)

    def write_summary(self, summary: Any) -> None:
        print(
            f"Processed: {summary.processed}"
            f" | Created: {summary.created}"
            f" | Invalid: {summary.invalid}"
        )

    def _print_overflow(self, total: int, noun: str) -> None:
        if self.max_records and total > self.max_records:
            print(f"... and {total - self.max_records} more {noun}")
