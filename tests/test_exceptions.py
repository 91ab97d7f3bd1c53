"""Tests for custom exception hierarchy."""

from bank_intake.exceptions import (
    BankIntakeError,
    CapacityError,
    ConfigurationError,
    InvalidAvailableBalanceError,
    InvalidEmailError,
    InvalidIdentifierError,
    InvalidNameError,
    InvalidPresentBalanceError,
    LedgerFullError,
    RejectionCollectionFullError,
    RequestSourceError,
    SinkError,
    ValidationError,
)
from bank_intake.models.enums import RejectionReason


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_bank_intake_error_is_exception(self) -> None:
        """Test BankIntakeError inherits from Exception."""
        assert isinstance(BankIntakeError("test"), Exception)

    def test_validation_errors(self) -> None:
        """Test validation errors share ValidationError."""
        for cls in (
            InvalidIdentifierError,
            InvalidNameError,
            InvalidEmailError,
            InvalidPresentBalanceError,
            InvalidAvailableBalanceError,
        ):
            err = cls()
            assert isinstance(err, ValidationError)
            assert isinstance(err, BankIntakeError)

    def test_capacity_errors(self) -> None:
        """Test capacity errors are not validation errors."""
        assert isinstance(LedgerFullError("full"), CapacityError)
        assert isinstance(RejectionCollectionFullError("full"), CapacityError)
        assert not isinstance(LedgerFullError("full"), ValidationError)

    def test_resource_errors_are_bank_intake_errors(self) -> None:
        """Test resource errors inherit from BankIntakeError."""
        assert isinstance(ConfigurationError("test"), BankIntakeError)
        assert isinstance(SinkError("test"), BankIntakeError)
        assert isinstance(RequestSourceError("test"), BankIntakeError)


class TestRejectionReasons:
    """Reasons attached to each error class."""

    def test_reason_strings(self) -> None:
        """Test the reason string of each error class."""
        assert InvalidIdentifierError.reason.value == "Invalid SSN"
        assert InvalidNameError.reason.value == "Invalid name"
        assert InvalidEmailError.reason.value == "Invalid email"
        assert InvalidPresentBalanceError.reason.value == "Invalid present balance"
        assert InvalidAvailableBalanceError.reason.value == "Invalid available balance"
        assert LedgerFullError.reason == RejectionReason.LEDGER_FULL
        assert LedgerFullError.reason.value == "ledger full"

    def test_default_message_is_reason(self) -> None:
        """Test the default message is the reason."""
        assert str(InvalidEmailError()) == "Invalid email"

    def test_custom_message_keeps_reason(self) -> None:
        """Test a custom message keeps the class reason."""
        err = InvalidPresentBalanceError("Present balance -60.00 is below the overdraft limit")
        assert str(err) == "Present balance -60.00 is below the overdraft limit"
        assert err.reason == RejectionReason.INVALID_PRESENT_BALANCE
