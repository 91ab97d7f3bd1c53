"""Configuration management for bank-intake."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path

from bank_intake.exceptions import ConfigurationError
from bank_intake.money import to_money
from bank_intake.validators import email_domain

MAX_ACCOUNTS = 200
MAX_OVERDRAFT = Decimal("50.00")
DECIMALS = 2


@dataclass
class LedgerConfig:
    """Capacity and balance limits for one run."""

    max_accounts: int = MAX_ACCOUNTS
    max_overdraft: Decimal = MAX_OVERDRAFT
    decimals: int = DECIMALS

    def __post_init__(self) -> None:
        if self.max_accounts <= 0:
            raise ConfigurationError(f"max_accounts must be positive, got {self.max_accounts}")
        try:
            self.max_overdraft = to_money(self.max_overdraft)
        except InvalidOperation as e:
            raise ConfigurationError(f"max_overdraft must be a finite amount, got {self.max_overdraft!r}") from e
        if self.max_overdraft < 0:
            raise ConfigurationError(f"max_overdraft must not be negative, got {self.max_overdraft}")
        if self.decimals < 0:
            raise ConfigurationError(f"decimals must not be negative, got {self.decimals}")


@dataclass(frozen=True)
class OpeningBalances:
    """Balances and overdraft allowance assigned to a new account."""

    present: Decimal
    available: Decimal
    max_overdraft: Decimal


@dataclass
class BalancePolicy:
    """Opening-balance policy keyed on the email domain.

    Students and staff of educational institutions (``.edu`` addresses)
    open with a negative present balance and a matching overdraft
    allowance; everyone else opens with a positive present balance and the
    standard allowance.
    """

    default_present: Decimal = Decimal("100.00")
    student_present: Decimal = Decimal("-150.00")
    student_overdraft: Decimal = Decimal("150.00")
    default_available: Decimal = Decimal("0.00")
    student_domain: str = "edu"

    def opening_balances(self, email: str, max_overdraft: Decimal = MAX_OVERDRAFT) -> OpeningBalances:
        """Return the opening balances for a request with the given email.

        The student allowance never drops below the standard
        ``max_overdraft``.
        """
        if email_domain(email) == self.student_domain:
            return OpeningBalances(
                present=self.student_present,
                available=self.default_available,
                max_overdraft=max(self.student_overdraft, max_overdraft),
            )
        return OpeningBalances(
            present=self.default_present,
            available=self.default_available,
            max_overdraft=max_overdraft,
        )


@dataclass
class FileConfig:
    """Locations of the request source and the output sinks."""

    input_file: Path = field(default_factory=lambda: Path("requests.txt"))
    output_file: Path = field(default_factory=lambda: Path("new_accounts.txt"))
    error_file: Path = field(default_factory=lambda: Path("invalid_records.txt"))
    log_file: Path = field(default_factory=lambda: Path("bank_log.txt"))
    json_output_dir: Path | None = None


@dataclass
class IntakeConfig:
    """Main configuration for bank-intake."""

    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    policy: BalancePolicy = field(default_factory=BalancePolicy)
    files: FileConfig = field(default_factory=FileConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "IntakeConfig":
        """Create config from environment variables."""
        import os

        try:
            ledger = LedgerConfig(
                max_accounts=int(os.getenv("MAX_ACCOUNTS", str(MAX_ACCOUNTS))),
                max_overdraft=Decimal(os.getenv("MAX_OVERDRAFT", str(MAX_OVERDRAFT))),
            )
            seed = int(os.getenv("SEED")) if os.getenv("SEED") else None
        except (ValueError, InvalidOperation) as e:
            raise ConfigurationError(f"Invalid numeric setting in environment: {e}") from e

        json_dir = os.getenv("JSON_OUTPUT_DIR")
        files = FileConfig(
            input_file=Path(os.getenv("BANK_INPUT_FILE", "requests.txt")),
            output_file=Path(os.getenv("BANK_OUTPUT_FILE", "new_accounts.txt")),
            error_file=Path(os.getenv("BANK_ERROR_FILE", "invalid_records.txt")),
            log_file=Path(os.getenv("BANK_LOG_FILE", "bank_log.txt")),
            json_output_dir=Path(json_dir) if json_dir else None,
        )

        return cls(
            ledger=ledger,
            files=files,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
