"""Fixed-width account table rendering and the table file sink."""

from pathlib import Path
from typing import Any, Iterable

from bank_intake.config import DECIMALS
from bank_intake.exceptions import SinkError

# (title, width, alignment)
COLUMNS = (
    ("Account#", 12, "<"),
    ("First", 14, "<"),
    ("Last", 14, "<"),
    ("Email", 26, "<"),
    ("Present", 10, ">"),
    ("Avail", 10, ">"),
)
TABLE_WIDTH = sum(width for _, width, _ in COLUMNS)


def format_header() -> str:
    return "".join(f"{title:{align}{width}}" for title, width, align in COLUMNS)


def format_rule() -> str:
    return "-" * TABLE_WIDTH


def format_row(account: Any, decimals: int = DECIMALS) -> str:
    """Render one account as a table row with balances at ``decimals`` places."""
    return (
        f"{account.account_id:<12}"
        f"{account.first_name:<14}"
        f"{account.last_name:<14}"
        f"{account.email:<26}"
        f"{account.present_balance:>10.{decimals}f}"
        f"{account.available_balance:>10.{decimals}f}"
    )


def format_table(accounts: Iterable[Any], decimals: int = DECIMALS) -> list[str]:
    """Header, rule and one row per account."""
    return [format_header(), format_rule()] + [format_row(a, decimals) for a in accounts]


class TableFileSink:
    """Write the account table to a text file, replacing previous contents."""

    def __init__(self, path: str | Path, decimals: int = DECIMALS) -> None:
        self.path = Path(path)
        self.decimals = decimals

    def write_accounts(self, accounts: Iterable[Any]) -> int:
        """Write the table and return the number of accounts written."""
        accounts = list(accounts)
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                for line in format_table(accounts, self.decimals):
                    f.write(line + "\n")
        except OSError as e:
            raise SinkError(f"Cannot open output file: {self.path}") from e
        return len(accounts)
