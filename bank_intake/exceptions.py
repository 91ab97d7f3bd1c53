"""Custom exception hierarchy for bank-intake."""

from bank_intake.models.enums import RejectionReason


class BankIntakeError(Exception):
    """Base exception for all bank-intake errors."""


class ValidationError(BankIntakeError):
    """Raised when a field fails its validation rule.

    The ``reason`` is the human-readable rejection reason recorded for the
    offending request.
    """

    reason: RejectionReason

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.reason.value)


class InvalidIdentifierError(ValidationError):
    """Raised when the request identifier is not exactly 10 digits."""

    reason = RejectionReason.INVALID_SSN


class InvalidNameError(ValidationError):
    """Raised when a first or last name is not alphabetic or too short."""

    reason = RejectionReason.INVALID_NAME


class InvalidEmailError(ValidationError):
    """Raised when an email address does not match the accepted format."""

    reason = RejectionReason.INVALID_EMAIL


class InvalidPresentBalanceError(ValidationError):
    """Raised when the present balance would exceed the overdraft allowance."""

    reason = RejectionReason.INVALID_PRESENT_BALANCE


class InvalidAvailableBalanceError(ValidationError):
    """Raised when the available balance would exceed present plus overdraft."""

    reason = RejectionReason.INVALID_AVAILABLE_BALANCE


class CapacityError(BankIntakeError):
    """Raised when a fixed-capacity collection has no free slot."""

    reason: RejectionReason


class LedgerFullError(CapacityError):
    """Raised when a validated account cannot be admitted to a full ledger."""

    reason = RejectionReason.LEDGER_FULL


class RejectionCollectionFullError(CapacityError):
    """Raised when a rejection record cannot be stored in memory."""

    reason = RejectionReason.REJECTIONS_FULL


class ConfigurationError(BankIntakeError):
    """Raised when configuration is invalid or missing."""


class SinkError(BankIntakeError):
    """Raised when a sink cannot be opened or written."""


class RequestSourceError(BankIntakeError):
    """Raised when the request source cannot be opened."""
