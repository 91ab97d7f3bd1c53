"""Bank account entity with validated setters."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from bank_intake.config import MAX_OVERDRAFT
from bank_intake.exceptions import (
    InvalidAvailableBalanceError,
    InvalidEmailError,
    InvalidIdentifierError,
    InvalidNameError,
    InvalidPresentBalanceError,
    ValidationError,
)
from bank_intake.logging import get_logger
from bank_intake.money import ZERO, to_money
from bank_intake.sinks.audit_log import AuditLog
from bank_intake.validators import valid_email, valid_identifier, valid_name

logger = get_logger(__name__)

DEFAULT_ACCOUNT_ID = "00000000"
ACCOUNT_ID_LENGTH = len(DEFAULT_ACCOUNT_ID)


def _parse_balance(value: Decimal | int | float | str, error: type[ValidationError]) -> Decimal:
    try:
        return to_money(value)
    except InvalidOperation as e:
        raise error(f"Not a monetary amount: {value!r}") from e


@dataclass
class BankAccount:
    """Checking account opened from an account request.

    Balances obey two invariants at all times:

    - ``present_balance >= -max_overdraft``
    - ``available_balance <= present_balance + max_overdraft``

    Every setter validates before committing; a failing setter raises a
    :class:`ValidationError` subclass and leaves the account untouched.
    ``max_overdraft`` is the account's overdraft allowance, assigned by the
    opening-balance policy.
    """

    account_id: str = DEFAULT_ACCOUNT_ID
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    present_balance: Decimal = ZERO
    available_balance: Decimal = ZERO
    max_overdraft: Decimal = field(default=MAX_OVERDRAFT, repr=False)

    def __post_init__(self) -> None:
        try:
            self.max_overdraft = to_money(self.max_overdraft)
        except InvalidOperation as e:
            raise ValueError(f"max_overdraft must be a finite amount, got {self.max_overdraft!r}") from e
        self.present_balance = _parse_balance(self.present_balance, InvalidPresentBalanceError)
        self.available_balance = _parse_balance(self.available_balance, InvalidAvailableBalanceError)
        self._check_present(self.present_balance)
        self._check_available(self.available_balance, self.present_balance)

    def _check_present(self, present: Decimal) -> None:
        if present < -self.max_overdraft:
            raise InvalidPresentBalanceError(
                f"Present balance {present} is below the overdraft limit -{self.max_overdraft}"
            )

    def _check_available(self, available: Decimal, present: Decimal) -> None:
        if available > present + self.max_overdraft:
            raise InvalidAvailableBalanceError(
                f"Available balance {available} exceeds present balance {present} "
                f"plus overdraft {self.max_overdraft}"
            )

    # Single-field setters
    def set_account_id(self, account_id: str) -> None:
        """Assign the generated 8-digit account number."""
        if len(account_id) != ACCOUNT_ID_LENGTH or not account_id.isdigit():
            raise ValueError(f"Account id must be {ACCOUNT_ID_LENGTH} digits, got {account_id!r}")
        self.account_id = account_id

    def set_name(self, first_name: str, last_name: str) -> None:
        if not valid_name(first_name) or not valid_name(last_name):
            raise InvalidNameError()
        self.first_name = first_name
        self.last_name = last_name

    def set_email(self, email: str) -> None:
        if not valid_email(email):
            raise InvalidEmailError()
        self.email = email

    def set_present_balance(self, value: Decimal | int | float | str) -> None:
        """Set the present balance.

        Rejected when it goes below the overdraft limit, or when the current
        available balance would then exceed ``present + max_overdraft``.
        """
        present = _parse_balance(value, InvalidPresentBalanceError)
        self._check_present(present)
        if self.available_balance > present + self.max_overdraft:
            raise InvalidPresentBalanceError(
                f"Present balance {present} leaves available balance "
                f"{self.available_balance} above the overdraft limit"
            )
        self.present_balance = present

    def set_available_balance(self, value: Decimal | int | float | str) -> None:
        available = _parse_balance(value, InvalidAvailableBalanceError)
        self._check_available(available, self.present_balance)
        self.available_balance = available

    # All-fields setter
    def set_account(
        self,
        ssn: str,
        first_name: str,
        last_name: str,
        email: str,
        present: Decimal | int | float | str,
        available: Decimal | int | float | str,
        audit: AuditLog | None = None,
    ) -> None:
        """Validate and commit every field at once.

        Checks run in a fixed order and the first failure wins: identifier,
        names, email, present balance, available balance (against the new
        present balance). Nothing is committed unless all checks pass.

        Parameters
        ----------
        ssn : str
            Ten-digit identifier from the request. Validated, not stored.
        first_name, last_name, email : str
            Request fields.
        present, available : Decimal | int | float | str
            Opening balances.
        audit : AuditLog | None
            Receives one line describing the outcome.

        Raises
        ------
        ValidationError
            The specific rule that failed; ``err.reason`` holds the
            rejection reason.
        """
        try:
            present_balance, available_balance = self._validate_all(
                ssn, first_name, last_name, email, present, available
            )
        except ValidationError as e:
            logger.debug("Request %s rejected: %s", ssn, e)
            if audit is not None:
                audit.append(
                    f"set_account FAILED: {e.reason.value} | {ssn} {first_name} {last_name} {email}"
                )
            raise

        self.first_name = first_name
        self.last_name = last_name
        self.email = email
        self.present_balance = present_balance
        self.available_balance = available_balance

        if audit is not None:
            audit.append(f"set_account OK: {first_name} {last_name} ({self.account_id})")

    def _validate_all(
        self,
        ssn: str,
        first_name: str,
        last_name: str,
        email: str,
        present: Decimal | int | float | str,
        available: Decimal | int | float | str,
    ) -> tuple[Decimal, Decimal]:
        if not valid_identifier(ssn):
            raise InvalidIdentifierError()
        if not valid_name(first_name) or not valid_name(last_name):
            raise InvalidNameError()
        if not valid_email(email):
            raise InvalidEmailError()

        present_balance = _parse_balance(present, InvalidPresentBalanceError)
        self._check_present(present_balance)
        available_balance = _parse_balance(available, InvalidAvailableBalanceError)
        self._check_available(available_balance, present_balance)
        return present_balance, available_balance

    def reset(self) -> None:
        """Return the account to its freshly constructed state."""
        self.account_id = DEFAULT_ACCOUNT_ID
        self.first_name = ""
        self.last_name = ""
        self.email = ""
        self.present_balance = ZERO
        self.available_balance = ZERO
        self.max_overdraft = MAX_OVERDRAFT
